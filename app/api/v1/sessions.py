from fastapi import APIRouter, Depends, status

from app.core.config import settings
from app.core.dependencies import get_session_repository
from app.repositories.session_repository import SessionRepository
from app.schemas.common import ApiResponse
from app.schemas.session import SessionWrite, SessionRead, SessionDashboard
from app.services.session_service import SessionService

router = APIRouter(prefix="/sessions", tags=["sessions"])


def get_session_service(repo: SessionRepository = Depends(get_session_repository)) -> SessionService:
    return SessionService(repo, utc_offset_hours=settings.SESSION_UTC_OFFSET_HOURS)


@router.post("", response_model=ApiResponse[SessionRead], status_code=status.HTTP_201_CREATED)
async def create_session(
        payload: SessionWrite,
        service: SessionService = Depends(get_session_service)
):
    """Создать занятие: дата "Wed, Sept 21, 2025", время начала/конца в ISO"""
    training_session = await service.create_session(payload)
    return ApiResponse(msg="Session created successfully", data=SessionRead.model_validate(training_session))


@router.get("/dashboard", response_model=ApiResponse[SessionDashboard])
async def get_dashboard(service: SessionService = Depends(get_session_service)):
    """Занятия, разложенные на текущие, предстоящие и прошедшие"""
    dashboard = await service.get_dashboard()
    return ApiResponse(data=dashboard)


@router.put("/{session_id}", response_model=ApiResponse[SessionRead])
async def update_session(
        session_id: int,
        payload: SessionWrite,
        service: SessionService = Depends(get_session_service)
):
    training_session = await service.update_session(session_id, payload)
    return ApiResponse(msg="Session updated successfully", data=SessionRead.model_validate(training_session))
