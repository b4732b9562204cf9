from typing import List, Union

from fastapi import APIRouter, Depends

from app.core.dependencies import get_progress_service
from app.schemas.common import ApiResponse
from app.schemas.progress import FormProgressSubmit, FormRecordRead, FormProgressPlaceholder
from app.services.progress_service import ProgressService

router = APIRouter(prefix="/progress", tags=["progress"])


def serialize_form(form) -> Union[FormRecordRead, FormProgressPlaceholder]:
    if isinstance(form, FormProgressPlaceholder):
        return form
    return FormRecordRead.model_validate(form)


@router.post("", response_model=ApiResponse[FormRecordRead])
async def submit_progress(
        payload: FormProgressSubmit,
        service: ProgressService = Depends(get_progress_service)
):
    """Сохранить оценку формы (пумсэ) ученика и пересчитать общий прогресс"""
    form = await service.submit_form_progress(
        trainee_id=payload.trainee_id,
        poomsae=payload.poomsae,
        techniques=payload.techniques,
        kicks=payload.kicks,
    )
    return ApiResponse(msg="Progress saved successfully", data=FormRecordRead.model_validate(form))


@router.get(
    "/{trainee_id}/{poomsae:path}",
    response_model=ApiResponse[Union[FormRecordRead, FormProgressPlaceholder]],
)
async def get_form_progress(
        trainee_id: int,
        poomsae: str,
        service: ProgressService = Depends(get_progress_service)
):
    """Оценка одной формы; если ее нет - нулевая заглушка, а не 404"""
    form = await service.get_form_progress(trainee_id, poomsae)
    return ApiResponse(data=serialize_form(form))


@router.get("/{trainee_id}", response_model=ApiResponse[List[FormRecordRead]])
async def get_all_progress(
        trainee_id: int,
        service: ProgressService = Depends(get_progress_service)
):
    """Все формы ученика в порядке первой сдачи"""
    forms = await service.get_all_progress(trainee_id)
    return ApiResponse(data=[FormRecordRead.model_validate(f) for f in forms])
