from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Union
from datetime import datetime


def split_tags(value) -> List[str]:
    """Теги приходят строкой "a, b" или списком; пустые выкидываем"""
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [str(tag).strip() for tag in value if str(tag).strip()]


class PostCreate(BaseModel):
    text: Optional[str] = None
    image: Optional[str] = ""
    images: List[str] = []
    tags: Union[str, List[str], None] = None
    video_url: Optional[str] = Field("", alias="videoUrl")
    video_thumbnail: Optional[str] = Field("", alias="videoThumbnail")

    @field_validator("tags", mode="after")
    @classmethod
    def normalize_tags(cls, value):
        return split_tags(value)

    class Config:
        populate_by_name = True


class CommentCreate(BaseModel):
    text: Optional[str] = None


class PostAuthor(BaseModel):
    id: int
    name: str
    avatar: Optional[str] = ""

    class Config:
        from_attributes = True


class LikeRead(BaseModel):
    user_id: int = Field(..., alias="user")

    class Config:
        from_attributes = True
        populate_by_name = True


class CommentRead(BaseModel):
    id: int
    user_id: int = Field(..., alias="user")
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    date: Optional[datetime] = None

    class Config:
        from_attributes = True
        populate_by_name = True


class PostRead(BaseModel):
    id: int
    author: Optional[PostAuthor] = Field(None, alias="user")
    text: str
    image: Optional[str] = ""
    images: List[str] = []
    video_url: Optional[str] = Field("", alias="videoUrl")
    video_thumbnail: Optional[str] = Field("", alias="videoThumbnail")
    tags: List[str] = []
    likes: List[LikeRead] = []
    comments: List[CommentRead] = []
    date: Optional[datetime] = None

    class Config:
        from_attributes = True
        populate_by_name = True
