import enum

from sqlalchemy import Column, Integer, String, DateTime, ARRAY
from app.core.base import Base
from datetime import datetime


class ResourceTypeEnum(str, enum.Enum):
    Image = "Image"
    Video = "Video"
    Link = "Link"
    Text = "Text"


class Resource(Base):
    __tablename__ = "resources"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(300), nullable=False)
    type = Column(String(10), nullable=False, index=True)
    url = Column(String, nullable=False)
    tags = Column(ARRAY(String), default=list, nullable=False)
    location = Column(String, nullable=False)
    author = Column(String, nullable=False)
    subtitle = Column(String, default="", nullable=False)
    description = Column(String, default="", nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
