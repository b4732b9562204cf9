from pydantic import BaseModel, Field
from typing import List, Optional, Union
from datetime import datetime


class SessionWrite(BaseModel):
    """Тело создания/обновления занятия; обязательность полей проверяет сервис."""
    trainer: Optional[str] = None
    date: Optional[str] = None  # "Wed, Sept 21, 2025"
    start_time: Optional[str] = Field(default=None, alias="startTime")  # ISO
    end_time: Optional[str] = Field(default=None, alias="endTime")  # ISO
    venue: Optional[str] = None
    total_trainees: Optional[Union[int, str]] = Field(default=None, alias="totalTrainees")

    class Config:
        populate_by_name = True


class SessionRead(BaseModel):
    id: int
    trainer: str
    date: datetime
    start_time: datetime = Field(alias="startTime")
    end_time: datetime = Field(alias="endTime")
    venue: str
    total_trainees: int = Field(alias="totalTrainees")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class DashboardSession(SessionRead):
    ui_date: str = Field(alias="uiDate")  # "Sun, Sep 21, 2025"
    time: str  # "6:00 PM - 7:00 PM"


class SessionDashboard(BaseModel):
    current: List[DashboardSession] = []
    upcoming: List[DashboardSession] = []
    history: List[DashboardSession] = []
