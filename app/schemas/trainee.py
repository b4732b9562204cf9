import re
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.models.trainee import BeltEnum, GenderEnum

PHONE_PATTERN = r"^[0-9-]{9,15}$"
GUARDIAN_CONTACT_PATTERN = r"^\+?[1-9]\d{0,15}$"
IMAGE_PATTERN = re.compile(r"\.(jpg|jpeg|png|gif)$", re.IGNORECASE)

REQUIRED_FIELDS = (
    "name", "belt", "date_of_birth", "gender", "phone", "email",
    "address", "guardian_name", "guardian_contact", "guardian_address",
)


def to_title_case(value: Optional[str]) -> Optional[str]:
    """"wHITE" -> "White"."""
    if not value:
        return value
    value = value.strip()
    return value[:1].upper() + value[1:].lower()


class TraineeInput(BaseModel):
    """Сырое тело запроса: обязательность проверяется отдельно (400, а не 422)."""
    name: Optional[str] = None
    belt: Optional[str] = None
    date_of_birth: Optional[str] = Field(default=None, alias="dateOfBirth")
    gender: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    guardian_name: Optional[str] = Field(default=None, alias="guardianName")
    guardian_contact: Optional[str] = Field(default=None, alias="guardianContact")
    guardian_address: Optional[str] = Field(default=None, alias="guardianAddress")
    image: Optional[str] = None

    class Config:
        populate_by_name = True

    def missing_fields(self):
        return [name for name in REQUIRED_FIELDS if not getattr(self, name)]


class TraineeFields(BaseModel):
    """Проверенные данные ученика, готовые к записи в модель."""
    name: str = Field(min_length=1, max_length=100)
    belt: BeltEnum
    date_of_birth: date
    gender: GenderEnum
    phone: str = Field(pattern=PHONE_PATTERN)
    email: EmailStr
    address: str = Field(max_length=200)
    guardian_name: str = Field(max_length=100)
    guardian_contact: str = Field(pattern=GUARDIAN_CONTACT_PATTERN)
    guardian_address: str = Field(max_length=200)
    image: Optional[str] = None

    class Config:
        use_enum_values = True

    @field_validator("name", "phone", "address", "guardian_name", "guardian_contact", "guardian_address",
                     mode="before")
    @classmethod
    def strip_strings(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("belt", "gender", mode="before")
    @classmethod
    def title_case(cls, value):
        return to_title_case(value) if isinstance(value, str) else value

    @field_validator("email", mode="before")
    @classmethod
    def lowercase_email(cls, value):
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def date_part(cls, value):
        # "2010-05-01T00:00:00.000Z" -> "2010-05-01"
        if isinstance(value, str) and "T" in value:
            return value.split("T", 1)[0]
        return value

    @field_validator("date_of_birth")
    @classmethod
    def date_in_past(cls, value: date) -> date:
        if value >= date.today():
            raise ValueError("Date of birth must be in the past")
        return value

    @field_validator("image")
    @classmethod
    def image_url(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        if not IMAGE_PATTERN.search(value):
            raise ValueError("Please provide a valid image URL (jpg, jpeg, png, gif)")
        return value


class TraineeRead(BaseModel):
    id: int
    name: str
    belt: str
    date_of_birth: date = Field(alias="dateOfBirth")
    gender: str
    phone: str
    email: str
    address: str
    guardian_name: str = Field(alias="guardianName")
    guardian_contact: str = Field(alias="guardianContact")
    guardian_address: str = Field(alias="guardianAddress")
    image: Optional[str] = None
    age: Optional[int] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class TraineeShort(BaseModel):
    id: int
    name: str
    email: str
    belt: Optional[str] = None
    date_of_birth: Optional[date] = Field(default=None, alias="dateOfBirth")
    gender: Optional[str] = None

    class Config:
        from_attributes = True
        populate_by_name = True
