"""
Расписание тренировок.

Клиент присылает дату строкой вида "Wed, Sept 21, 2025", а время начала и
конца в ISO (UTC). Время сохраняется уже сдвинутым на часовой пояс школы,
чтобы "18:00" по местному времени лежало в БД как 18:00, а дата занятия
фиксируется на полночь UTC и не "уезжает" на предыдущий день.
"""

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from app.core.config import settings
from app.core.exceptions import NotFoundError, ValidationError
from app.models.session import TrainingSession
from app.repositories.session_repository import SessionRepository
from app.schemas.session import SessionWrite, SessionRead, DashboardSession, SessionDashboard
from app.services.parsing import parse_int

logger = logging.getLogger(__name__)

DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
MONTH_NAMES = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
DATE_FORMATS = ("%b %d, %Y", "%B %d, %Y", "%Y-%m-%d")
SEPT = re.compile(r"\bSept\b")


def parse_display_date(value: Optional[str]) -> Optional[datetime]:
    """"Wed, Sept 21, 2025" -> datetime(2025, 9, 21) (полночь UTC)."""
    if not value:
        return None

    parts = value.strip().split(", ")
    candidates = [", ".join(parts[1:]), value.strip()] if len(parts) > 2 else [value.strip()]

    for candidate in candidates:
        candidate = SEPT.sub("Sep", candidate)
        for fmt in DATE_FORMATS:
            try:
                return datetime.strptime(candidate, fmt)
            except ValueError:
                continue
    return None


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    """ISO-строка -> naive datetime в UTC."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def format_time(value: datetime) -> str:
    hours = value.hour
    ampm = "PM" if hours >= 12 else "AM"
    hours = hours % 12 or 12
    return f"{hours}:{value.minute:02d} {ampm}"


def format_ui_date(value: datetime) -> str:
    return f"{DAY_NAMES[value.weekday()]}, {MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"


class SessionService:
    def __init__(self, repo: SessionRepository, utc_offset_hours: int = settings.SESSION_UTC_OFFSET_HOURS):
        self.repo = repo
        self.offset = timedelta(hours=utc_offset_hours)

    def to_local_time(self, value: Optional[str]) -> Optional[datetime]:
        parsed = parse_iso_datetime(value)
        return parsed + self.offset if parsed else None

    def local_now(self) -> datetime:
        return datetime.utcnow() + self.offset

    def _validate(self, payload: SessionWrite) -> dict:
        if not all([payload.trainer, payload.date, payload.start_time, payload.end_time,
                    payload.venue, payload.total_trainees]):
            raise ValidationError("All fields are required")

        parsed_date = parse_display_date(payload.date)
        if parsed_date is None:
            raise ValidationError("Invalid Date Format")

        start_time = self.to_local_time(payload.start_time)
        end_time = self.to_local_time(payload.end_time)
        if start_time is None or end_time is None:
            raise ValidationError("Invalid Time Format")

        total_trainees = parse_int(payload.total_trainees)
        if total_trainees < 1:
            raise ValidationError("Validation Error", errors=["Must have at least one trainee"])

        return {
            "trainer": payload.trainer.strip(),
            "date": parsed_date,
            "start_time": start_time,
            "end_time": end_time,
            "venue": payload.venue.strip(),
            "total_trainees": total_trainees,
        }

    async def create_session(self, payload: SessionWrite) -> TrainingSession:
        fields = self._validate(payload)
        training_session = await self.repo.create(TrainingSession(**fields))
        logger.info(f"Занятие создано: ID {training_session.id}")
        return training_session

    async def update_session(self, session_id: int, payload: SessionWrite) -> TrainingSession:
        fields = self._validate(payload)

        training_session = await self.repo.get_by_id(session_id)
        if training_session is None:
            raise NotFoundError("Session not found")

        for name, value in fields.items():
            setattr(training_session, name, value)

        training_session = await self.repo.save(training_session)
        logger.info(f"Занятие обновлено: ID {session_id}")
        return training_session

    async def get_dashboard(self, now: Optional[datetime] = None) -> SessionDashboard:
        sessions = await self.repo.list_all()
        return self.categorize(sessions, now or self.local_now())

    @staticmethod
    def categorize(sessions: List[TrainingSession], now: datetime) -> SessionDashboard:
        """
        Разложить занятия на current / upcoming / history.

        Занятие сегодня (по календарной дате) - current, пока не закончилось,
        затем history. Будущие даты - upcoming, прошедшие - history.
        """
        current, upcoming, history = [], [], []

        for session in sessions:
            if not session.start_time or not session.end_time:
                logger.warning(f"Пропускаем занятие без времени: ID {session.id}")
                continue

            start, end = session.start_time, session.end_time
            item = DashboardSession(
                **SessionRead.model_validate(session).model_dump(),
                ui_date=format_ui_date(session.date or start),
                time=f"{format_time(start)} - {format_time(end)}",
            )

            if start.date() == now.date():
                (history if now > end else current).append(item)
            elif now < start:
                upcoming.append(item)
            else:
                history.append(item)

        current.sort(key=lambda s: s.end_time)
        upcoming.sort(key=lambda s: s.start_time)
        history.sort(key=lambda s: s.start_time, reverse=True)

        return SessionDashboard(current=current, upcoming=upcoming, history=history)
