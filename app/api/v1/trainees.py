import logging

from fastapi import APIRouter, Depends, status
from pydantic import ValidationError as PydanticValidationError

from app.core.dependencies import get_trainee_repository
from app.core.exceptions import ConflictError, NotFoundError, ValidationError, validation_error_from
from app.models.trainee import Trainee
from app.repositories.trainee_repository import TraineeRepository
from app.schemas.common import ApiResponse, ListResponse
from app.schemas.trainee import TraineeInput, TraineeFields, TraineeRead, TraineeShort

router = APIRouter(prefix="/trainees", tags=["trainees"])
logger = logging.getLogger(__name__)


def validate_trainee(data: dict) -> TraineeFields:
    try:
        return TraineeFields(**data)
    except PydanticValidationError as exc:
        raise validation_error_from(exc)


async def get_trainee_or_404(trainee_id: int, repo: TraineeRepository) -> Trainee:
    trainee = await repo.get_by_id(trainee_id)
    if not trainee:
        raise NotFoundError("Trainee not found")
    return trainee


@router.post("", response_model=ApiResponse[TraineeShort], status_code=status.HTTP_201_CREATED)
async def create_trainee(
        payload: TraineeInput,
        repo: TraineeRepository = Depends(get_trainee_repository)
):
    """Регистрация нового ученика"""
    if payload.missing_fields():
        raise ValidationError("All fields are required")

    fields = validate_trainee(payload.model_dump())

    if await repo.get_by_email(fields.email):
        raise ConflictError("Trainee with this email already exists")

    trainee = await repo.create(Trainee(**fields.model_dump()))
    logger.info(f"Ученик создан: {trainee.name} (ID: {trainee.id})")

    return ApiResponse(
        msg="Trainee added successfully",
        data=TraineeShort.model_validate(trainee)
    )


@router.get("", response_model=ListResponse[TraineeRead])
async def list_trainees(repo: TraineeRepository = Depends(get_trainee_repository)):
    """Все ученики, новые первыми"""
    trainees = await repo.list_all()
    return ListResponse(
        count=len(trainees),
        data=[TraineeRead.model_validate(t) for t in trainees]
    )


@router.get("/{trainee_id}", response_model=ApiResponse[TraineeRead])
async def get_trainee(trainee_id: int, repo: TraineeRepository = Depends(get_trainee_repository)):
    trainee = await get_trainee_or_404(trainee_id, repo)
    return ApiResponse(data=TraineeRead.model_validate(trainee))


@router.put("/{trainee_id}", response_model=ApiResponse[TraineeRead])
async def update_trainee(
        trainee_id: int,
        payload: TraineeInput,
        repo: TraineeRepository = Depends(get_trainee_repository)
):
    """Частичное обновление: переданные поля проверяются вместе с текущими значениями"""
    trainee = await get_trainee_or_404(trainee_id, repo)

    current = {name: getattr(trainee, name) for name in TraineeFields.model_fields}
    updates = payload.model_dump(exclude_unset=True, exclude_none=True)
    fields = validate_trainee({**current, **updates})

    if "email" in updates and await repo.get_by_email(fields.email, exclude_id=trainee_id):
        raise ConflictError("Email already exists")

    for name, value in fields.model_dump().items():
        setattr(trainee, name, value)

    trainee = await repo.save(trainee)
    logger.info(f"Ученик обновлен: {trainee.name} (ID: {trainee.id})")

    return ApiResponse(msg="Trainee updated successfully", data=TraineeRead.model_validate(trainee))


@router.delete("/{trainee_id}", response_model=ApiResponse[TraineeShort])
async def delete_trainee(trainee_id: int, repo: TraineeRepository = Depends(get_trainee_repository)):
    trainee = await get_trainee_or_404(trainee_id, repo)
    data = TraineeShort.model_validate(trainee)

    await repo.delete(trainee)
    logger.info(f"Ученик удален: {trainee.name} (ID: {trainee_id})")

    return ApiResponse(msg="Trainee deleted successfully", data=data)
