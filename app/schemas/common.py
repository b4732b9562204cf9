from pydantic import BaseModel
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Общая обертка ответа: {success, msg, data}"""
    success: bool = True
    msg: Optional[str] = None
    data: T


class ListResponse(BaseModel, Generic[T]):
    success: bool = True
    count: int
    data: List[T]


class MessageResponse(BaseModel):
    success: bool = True
    msg: str
