from pydantic import BaseModel, Field, computed_field, field_validator
from typing import List, Optional, Union
from datetime import datetime

from app.schemas.forum import split_tags


class ResourceCreate(BaseModel):
    title: Optional[str] = None
    type: Optional[str] = None
    url: Optional[str] = None
    tags: Union[str, List[str], None] = None
    location: Optional[str] = None
    author: Optional[str] = None
    description: Optional[str] = ""

    @field_validator("tags", mode="after")
    @classmethod
    def normalize_tags(cls, value):
        return split_tags(value)


class ResourceRead(BaseModel):
    id: int
    title: str
    type: str
    url: str
    tags: List[str] = []
    location: str
    author: str
    subtitle: Optional[str] = ""
    description: Optional[str] = ""
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True

    @computed_field
    @property
    def date(self) -> Optional[str]:
        return self.created_at.strftime("%Y-%m-%d") if self.created_at else None

    @computed_field(alias="isLocalFile")
    @property
    def is_local_file(self) -> bool:
        return not self.url.startswith("http")
