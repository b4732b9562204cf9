from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class BeltSummaryRead(BaseModel):
    belt_name: str = Field(alias="beltName")
    average_percentage: int = Field(alias="averagePercentage")  # 0-100
    trainee_count: int = Field(alias="traineeCount")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True
