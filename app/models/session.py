from sqlalchemy import Column, Integer, String, DateTime
from app.core.base import Base
from datetime import datetime


class TrainingSession(Base):
    __tablename__ = "training_sessions"

    id = Column(Integer, primary_key=True, index=True)
    trainer = Column(String, nullable=False)
    # Календарная дата, зафиксирована на полночь UTC
    date = Column(DateTime, nullable=False, index=True)
    # Время хранится уже сдвинутым на часовой пояс школы (см. SESSION_UTC_OFFSET_HOURS)
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=False)
    venue = Column(String, nullable=False)
    total_trainees = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
