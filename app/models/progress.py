from datetime import datetime

from sqlalchemy import Column, Integer, BigInteger, Float, String, DateTime, ForeignKey, JSON, UniqueConstraint
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship
from app.core.base import Base


class TraineeProgress(Base):
    """Один документ прогресса на ученика: все сданные пумсэ + общий средний процент."""
    __tablename__ = "trainee_progress"

    id = Column(Integer, primary_key=True)
    trainee_id = Column(
        Integer,
        ForeignKey("trainees.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )
    overall_average = Column(Float, default=0.0, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    trainee = relationship("Trainee", back_populates="progress")
    forms = relationship(
        "FormRecord",
        back_populates="progress",
        order_by="FormRecord.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
        lazy="selectin",
    )


class FormRecord(Base):
    __tablename__ = "form_records"
    __table_args__ = (
        UniqueConstraint("progress_id", "poomsae", name="uq_form_records_progress_poomsae"),
    )

    id = Column(Integer, primary_key=True)
    progress_id = Column(
        Integer,
        ForeignKey("trainee_progress.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position = Column(Integer, nullable=False, default=0)
    poomsae = Column(String, nullable=False)
    techniques = Column(JSON, default=dict, nullable=False)
    kicks = Column(JSON, default=dict, nullable=False)
    total_score = Column(BigInteger, default=0, nullable=False)
    percentage = Column(Float, default=0.0, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    progress = relationship("TraineeProgress", back_populates="forms")
