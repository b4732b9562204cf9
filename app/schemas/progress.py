from pydantic import BaseModel, Field
from typing import Any, Dict, Optional
from datetime import datetime


class FormProgressSubmit(BaseModel):
    # Обязательность trainee_id/poomsae проверяет сервис (400, а не 422)
    trainee_id: Optional[int] = Field(default=None, alias="traineeId")
    poomsae: Optional[str] = None
    techniques: Optional[Dict[str, Any]] = None
    kicks: Optional[Dict[str, Any]] = None

    class Config:
        populate_by_name = True


class FormRecordRead(BaseModel):
    poomsae: str
    techniques: Dict[str, int] = {}
    kicks: Dict[str, int] = {}
    total_score: int = Field(alias="totalScore")
    percentage: float
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class FormProgressPlaceholder(BaseModel):
    """Ответ для ученика/пумсэ без сохраненной оценки"""
    percentage: float = 0
    techniques: Dict[str, int] = {}
    kicks: Dict[str, int] = {}

