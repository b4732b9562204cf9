import logging
from typing import Any, Dict, List, Optional, Union

from app.core.config import settings
from app.core.exceptions import ValidationError
from app.models.progress import TraineeProgress, FormRecord
from app.repositories.progress_repository import ProgressRepository
from app.schemas.progress import FormProgressPlaceholder
from app.services.progress_calculator import ProgressCalculator

logger = logging.getLogger(__name__)


class ProgressService:
    """Оценки учеников по пумсэ: одна запись формы на пару (ученик, пумсэ)."""

    def __init__(
            self,
            repo: ProgressRepository,
            total_poomsae_count: int = settings.TOTAL_POOMSAE_COUNT,
            max_score_per_item: int = settings.MAX_SCORE_PER_ITEM,
    ):
        self.repo = repo
        self.total_poomsae_count = total_poomsae_count
        self.max_score_per_item = max_score_per_item

    async def submit_form_progress(
            self,
            trainee_id: Optional[int],
            poomsae: Optional[str],
            techniques: Optional[Dict[str, Any]],
            kicks: Optional[Dict[str, Any]],
    ) -> FormRecord:
        poomsae = poomsae.strip() if poomsae else poomsae
        if not trainee_id or not poomsae:
            raise ValidationError("Trainee ID and Poomsae are required")

        techniques = ProgressCalculator.normalize_scores(techniques)
        kicks = ProgressCalculator.normalize_scores(kicks)
        total_score, percentage = ProgressCalculator.score_form(
            techniques, kicks, self.max_score_per_item
        )

        progress = await self.repo.get_by_trainee(trainee_id)
        if progress is None:
            progress = TraineeProgress(trainee_id=trainee_id, overall_average=0.0)

        form = self._upsert_form(progress, poomsae)
        form.techniques = techniques
        form.kicks = kicks
        form.total_score = total_score
        form.percentage = percentage

        progress.overall_average = ProgressCalculator.curriculum_average(
            (f.percentage for f in progress.forms), self.total_poomsae_count
        )

        await self.repo.save(progress)

        logger.info(
            f"Прогресс сохранен: trainee={trainee_id}, form={poomsae}, "
            f"score={percentage * 100:.0f}%, overall={progress.overall_average * 100:.0f}%"
        )
        return form

    async def get_form_progress(
            self,
            trainee_id: int,
            poomsae: str,
    ) -> Union[FormRecord, FormProgressPlaceholder]:
        progress = await self.repo.get_by_trainee(trainee_id)
        form = self._find_form(progress, poomsae) if progress else None
        if form is None:
            return FormProgressPlaceholder()
        return form

    async def get_all_progress(self, trainee_id: int) -> List[FormRecord]:
        progress = await self.repo.get_by_trainee(trainee_id)
        if progress is None:
            return []
        return list(progress.forms)

    @staticmethod
    def _find_form(progress: TraineeProgress, poomsae: str) -> Optional[FormRecord]:
        for form in progress.forms:
            if form.poomsae == poomsae:
                return form
        return None

    @classmethod
    def _upsert_form(cls, progress: TraineeProgress, poomsae: str) -> FormRecord:
        """Найти форму по имени пумсэ или добавить новую в конец списка."""
        form = cls._find_form(progress, poomsae)
        if form is None:
            form = FormRecord(poomsae=poomsae)
            progress.forms.append(form)
        return form
