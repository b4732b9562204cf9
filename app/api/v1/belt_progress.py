from typing import List

from fastapi import APIRouter, Depends

from app.core.dependencies import get_belt_ring_service
from app.schemas.belt import BeltSummaryRead
from app.schemas.common import ApiResponse
from app.services.belt_service import BeltRingService

router = APIRouter(prefix="/belt-progress", tags=["belt-progress"])


@router.get("", response_model=ApiResponse[List[BeltSummaryRead]])
async def get_belt_progress(service: BeltRingService = Depends(get_belt_ring_service)):
    """Пересчитать кольца прогресса по всем поясам (White -> Black) и вернуть их"""
    summaries = await service.recompute_belt_rings()
    return ApiResponse(data=[BeltSummaryRead.model_validate(s) for s in summaries])
