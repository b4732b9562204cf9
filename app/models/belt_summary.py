from sqlalchemy import Column, Integer, String, DateTime
from app.core.base import Base
from datetime import datetime


class BeltSummary(Base):
    """Кольцо прогресса пояса: средний процент (0-100) и число учеников."""
    __tablename__ = "belt_summaries"

    id = Column(Integer, primary_key=True)
    belt_name = Column(String, unique=True, nullable=False)
    average_percentage = Column(Integer, default=0, nullable=False)
    trainee_count = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
