import math
from typing import Any, Dict, Iterable, Optional, Tuple

from app.core.config import settings
from app.models.progress import TraineeProgress
from app.services.parsing import parse_int


class ProgressCalculator:
    @classmethod
    def normalize_scores(cls, scores: Optional[Dict[str, Any]]) -> Dict[str, int]:
        """Оценки приемов/ударов к целым; пустое и нечисловое значение -> 0."""
        if not scores:
            return {}
        return {name: parse_int(value) for name, value in scores.items()}

    @classmethod
    def score_form(
            cls,
            techniques: Dict[str, int],
            kicks: Dict[str, int],
            max_score_per_item: Optional[int] = None,
    ) -> Tuple[int, float]:
        """Возвращает (total_score, percentage) для одной формы."""
        if max_score_per_item is None:
            max_score_per_item = settings.MAX_SCORE_PER_ITEM
        current_score = sum(techniques.values()) + sum(kicks.values())
        total_items = len(techniques) + len(kicks)

        max_possible_score = total_items * max_score_per_item
        if max_possible_score <= 0:
            return current_score, 0.0

        return current_score, current_score / max_possible_score

    @classmethod
    def curriculum_average(cls, percentages: Iterable[float], total_poomsae_count: int) -> float:
        """Средний процент по всей программе: несданные пумсэ считаются как 0."""
        percentages = list(percentages)
        if not percentages:
            return 0.0

        average = sum(p or 0 for p in percentages) / total_poomsae_count
        return min(average, 1.0)

    @classmethod
    def trainee_belt_score(cls, progress: Optional[TraineeProgress]) -> float:
        """
        Вклад ученика в кольцо пояса.

        Сохраненный overall_average > 0 берется как есть, иначе среднее по
        сданным формам (делитель - число сданных форм, а не размер программы).
        """
        if progress is None:
            return 0.0
        if progress.overall_average and progress.overall_average > 0:
            return progress.overall_average
        if progress.forms:
            total = sum(form.percentage or 0 for form in progress.forms)
            return total / len(progress.forms)
        return 0.0

    @classmethod
    def belt_percentage(cls, scores: Iterable[float]) -> int:
        """Средний процент пояса 0-100; половины округляются вверх."""
        scores = list(scores)
        if not scores:
            return 0
        raw_average = sum(scores) / len(scores)
        return int(math.floor(raw_average * 100 + 0.5))
