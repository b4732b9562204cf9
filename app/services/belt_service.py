import logging
from typing import List

from app.models.belt_summary import BeltSummary
from app.models.trainee import BeltEnum
from app.repositories.belt_summary_repository import BeltSummaryRepository
from app.repositories.progress_repository import ProgressRepository
from app.repositories.trainee_repository import TraineeRepository
from app.services.progress_calculator import ProgressCalculator

logger = logging.getLogger(__name__)

BELT_ORDER = [belt.value for belt in BeltEnum]


class BeltRingService:
    def __init__(
            self,
            trainee_repo: TraineeRepository,
            progress_repo: ProgressRepository,
            summary_repo: BeltSummaryRepository,
    ):
        self.trainee_repo = trainee_repo
        self.progress_repo = progress_repo
        self.summary_repo = summary_repo

    async def recompute_belt_rings(self) -> List[BeltSummary]:
        """
        Пересчитать кольца всех поясов по порядку White -> Black.

        Каждый пояс сохраняется отдельно; ошибка на любом поясе прерывает
        пересчет оставшихся.
        """
        results = []
        for belt in BELT_ORDER:
            results.append(await self.recompute_belt(belt))
        return results

    async def recompute_belt(self, belt: str) -> BeltSummary:
        trainees = await self.trainee_repo.list_by_belt(belt)
        trainee_count = len(trainees)
        average_percentage = 0

        if trainee_count > 0:
            progress_docs = await self.progress_repo.list_by_trainees([t.id for t in trainees])
            progress_by_trainee = {doc.trainee_id: doc for doc in progress_docs}

            scores = [
                ProgressCalculator.trainee_belt_score(progress_by_trainee.get(t.id))
                for t in trainees
            ]
            average_percentage = ProgressCalculator.belt_percentage(scores)

        summary = await self.summary_repo.upsert(
            belt_name=belt,
            average_percentage=average_percentage,
            trainee_count=trainee_count,
        )
        logger.info(f"Пояс {belt}: учеников={trainee_count}, средний прогресс={average_percentage}%")
        return summary
