import enum
from datetime import date, datetime

from sqlalchemy import Column, Integer, String, Date, DateTime
from sqlalchemy.orm import relationship
from app.core.base import Base


class BeltEnum(str, enum.Enum):
    White = "White"
    Yellow = "Yellow"
    Green = "Green"
    Blue = "Blue"
    Red = "Red"
    Black = "Black"


class GenderEnum(str, enum.Enum):
    Male = "Male"
    Female = "Female"
    Other = "Other"


class Trainee(Base):
    __tablename__ = "trainees"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    # Храним строкой: агрегация по поясам ищет по префиксу без учета регистра
    belt = Column(String(20), nullable=False, index=True)
    date_of_birth = Column(Date, nullable=False)
    gender = Column(String(10), nullable=False)
    phone = Column(String(15), nullable=False)
    email = Column(String, unique=True, nullable=False, index=True)
    address = Column(String(200), nullable=False)
    guardian_name = Column(String(100), nullable=False)
    guardian_contact = Column(String(16), nullable=False)
    guardian_address = Column(String(200), nullable=False)
    image = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    progress = relationship(
        "TraineeProgress",
        back_populates="trainee",
        cascade="all, delete-orphan",
        passive_deletes=True,
        uselist=False,
    )

    @property
    def age(self):
        if not self.date_of_birth:
            return None
        today = date.today()
        born = self.date_of_birth
        years = today.year - born.year
        if (today.month, today.day) < (born.month, born.day):
            years -= 1
        return years
