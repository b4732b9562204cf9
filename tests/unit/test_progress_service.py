"""
Модульные тесты для ProgressService.

Покрываемые сценарии:
- первая сдача формы создает документ прогресса
- повторная сдача той же формы заменяет оценку, а не добавляет запись
- общий средний процент считается по всей программе и не превышает 1
- обязательность trainee_id / poomsae
- заглушка для несданной формы, список форм в порядке первой сдачи
"""

import pytest
from unittest.mock import AsyncMock

from app.core.exceptions import ValidationError
from app.models.progress import TraineeProgress, FormRecord
from app.repositories.progress_repository import ProgressRepository
from app.schemas.progress import FormProgressPlaceholder
from app.services.progress_service import ProgressService

pytestmark = pytest.mark.unit


@pytest.fixture
def repo() -> AsyncMock:
    repo = AsyncMock(spec=ProgressRepository)
    repo.get_by_trainee.return_value = None
    return repo


@pytest.fixture
def service(repo) -> ProgressService:
    return ProgressService(repo, total_poomsae_count=8, max_score_per_item=2)


def saved_progress(repo) -> TraineeProgress:
    return repo.save.await_args.args[0]


# ---------------------------------------------------------------------------
# submit_form_progress
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_first_submission_creates_progress(service, repo):
    form = await service.submit_form_progress(
        trainee_id=1, poomsae="Taegeuk 1", techniques={"a": 2, "b": 1}, kicks={"k": 2}
    )

    assert form.poomsae == "Taegeuk 1"
    assert form.total_score == 5
    assert form.percentage == pytest.approx(5 / 6)

    progress = saved_progress(repo)
    assert progress.trainee_id == 1
    assert len(progress.forms) == 1
    assert progress.overall_average == pytest.approx((5 / 6) / 8)


@pytest.mark.asyncio
async def test_full_form_gives_one_eighth_overall(service, repo):
    await service.submit_form_progress(1, "Taegeuk 1", {"a": 2, "b": 2}, {"k": 2})
    assert saved_progress(repo).overall_average == pytest.approx(0.125)


@pytest.mark.asyncio
async def test_resubmission_replaces_form_in_place(service, repo):
    progress = TraineeProgress(trainee_id=1, overall_average=0.0)
    repo.get_by_trainee.return_value = progress

    await service.submit_form_progress(1, "Taegeuk 1", {"a": 2, "b": 2}, {"k": 2})
    await service.submit_form_progress(1, "Taegeuk 2", {"a": 1}, {"k": 1})
    await service.submit_form_progress(1, "Taegeuk 1", {"a": 1, "b": 1}, {"k": 1})

    assert [f.poomsae for f in progress.forms] == ["Taegeuk 1", "Taegeuk 2"]
    assert progress.forms[0].percentage == pytest.approx(0.5)
    assert progress.forms[0].total_score == 3
    # (0.5 + 0.5) / 8
    assert progress.overall_average == pytest.approx(0.125)


@pytest.mark.asyncio
async def test_same_submission_twice_is_idempotent(service, repo):
    progress = TraineeProgress(trainee_id=1, overall_average=0.0)
    repo.get_by_trainee.return_value = progress

    await service.submit_form_progress(1, "Taegeuk 1", {"a": 2}, {"k": 1})
    first = (len(progress.forms), progress.overall_average, progress.forms[0].percentage)
    await service.submit_form_progress(1, "Taegeuk 1", {"a": 2}, {"k": 1})

    assert (len(progress.forms), progress.overall_average, progress.forms[0].percentage) == first


@pytest.mark.asyncio
async def test_overall_average_capped_at_one(service, repo):
    progress = TraineeProgress(trainee_id=1, overall_average=0.0)
    repo.get_by_trainee.return_value = progress

    for i in range(8):
        await service.submit_form_progress(1, f"Taegeuk {i + 1}", {"a": 5}, {})

    assert progress.forms[0].percentage == pytest.approx(2.5)
    assert progress.overall_average == 1.0


@pytest.mark.asyncio
async def test_non_numeric_scores_count_as_zero(service, repo):
    form = await service.submit_form_progress(1, "Taegeuk 1", {"a": "2", "b": "bad"}, {"k": None})

    assert form.techniques == {"a": 2, "b": 0}
    assert form.kicks == {"k": 0}
    assert form.total_score == 2
    assert form.percentage == pytest.approx(2 / 6)


@pytest.mark.asyncio
async def test_empty_form_has_zero_percentage(service, repo):
    form = await service.submit_form_progress(1, "Taegeuk 1", {}, None)

    assert form.total_score == 0
    assert form.percentage == 0.0
    assert saved_progress(repo).overall_average == 0.0


@pytest.mark.asyncio
@pytest.mark.parametrize("trainee_id, poomsae", [(None, "Taegeuk 1"), (1, None), (1, "  "), (0, "Taegeuk 1")])
async def test_missing_trainee_or_poomsae_raises(service, repo, trainee_id, poomsae):
    with pytest.raises(ValidationError) as exc_info:
        await service.submit_form_progress(trainee_id, poomsae, {"a": 1}, {})

    assert exc_info.value.message == "Trainee ID and Poomsae are required"
    repo.save.assert_not_awaited()


# ---------------------------------------------------------------------------
# get_form_progress / get_all_progress
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_get_form_progress_placeholder_when_absent(service, repo):
    result = await service.get_form_progress(1, "Taegeuk 1")

    assert isinstance(result, FormProgressPlaceholder)
    assert result.percentage == 0
    assert result.techniques == {}
    assert result.kicks == {}


@pytest.mark.asyncio
async def test_get_form_progress_returns_stored_form(service, repo):
    progress = TraineeProgress(trainee_id=1, overall_average=0.1)
    form = FormRecord(poomsae="Taegeuk 3", techniques={"a": 1}, kicks={}, total_score=1, percentage=0.5)
    progress.forms.append(form)
    repo.get_by_trainee.return_value = progress

    assert await service.get_form_progress(1, "Taegeuk 3") is form
    assert isinstance(await service.get_form_progress(1, "Taegeuk 4"), FormProgressPlaceholder)


@pytest.mark.asyncio
async def test_get_all_progress(service, repo):
    assert await service.get_all_progress(1) == []

    progress = TraineeProgress(trainee_id=1, overall_average=0.1)
    progress.forms.append(FormRecord(poomsae="Taegeuk 2", percentage=0.5))
    progress.forms.append(FormRecord(poomsae="Taegeuk 1", percentage=1.0))
    repo.get_by_trainee.return_value = progress

    forms = await service.get_all_progress(1)
    assert [f.poomsae for f in forms] == ["Taegeuk 2", "Taegeuk 1"]
