"""Study stopwatch that turns timer runs into saved study sessions."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from campus_dashboard.errors import SessionTooShortError
from campus_dashboard.repositories import SessionRepository
from campus_dashboard.schema import StudySession

logger = logging.getLogger(__name__)

MIN_SESSION_SECONDS = 60


@dataclass
class PendingSession:
    """A stopped run waiting for notes before it is saved or discarded."""

    elapsed_seconds: int

    @property
    def duration_minutes(self) -> int:
        return self.elapsed_seconds // 60


def format_clock(seconds: int) -> str:
    hours, rest = divmod(int(seconds), 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


class StudyStopwatch:
    """Single-flight start/pause/stop timer for one signed-in user.

    Elapsed time is derived from the wall clock rather than counted ticks, so
    a late or skipped one-second tick never loses time.
    """

    def __init__(
        self,
        repository: SessionRepository,
        user_id: str,
        clock: Callable[[], float] = time.monotonic,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.repository = repository
        self.user_id = user_id
        self._clock = clock
        self._today = today
        self._started_at: Optional[float] = None
        self._elapsed = 0
        self.pending: Optional[PendingSession] = None

    @property
    def is_running(self) -> bool:
        return self._started_at is not None

    @property
    def elapsed_seconds(self) -> int:
        self.tick()
        return self._elapsed

    def start(self) -> None:
        if self.is_running or self.pending is not None:
            return
        # resume from whatever was accumulated before a pause
        self._started_at = self._clock() - self._elapsed

    def tick(self) -> int:
        if self._started_at is not None:
            self._elapsed = int(self._clock() - self._started_at)
        return self._elapsed

    def pause(self) -> None:
        self.tick()
        self._started_at = None

    def reset(self) -> None:
        self._started_at = None
        self._elapsed = 0
        self.pending = None

    def stop(self) -> PendingSession:
        """Stop the run; runs under a minute are thrown away."""

        self.pause()
        elapsed = self._elapsed
        if elapsed < MIN_SESSION_SECONDS:
            self.reset()
            logger.info("Discarded %ds study run below the %ds minimum", elapsed, MIN_SESSION_SECONDS)
            raise SessionTooShortError(elapsed, MIN_SESSION_SECONDS)
        self.pending = PendingSession(elapsed_seconds=elapsed)
        return self.pending

    def save(self, notes: str = "") -> StudySession:
        if self.pending is None:
            raise ValueError("No stopped session to save")

        session = StudySession(
            id=None,
            user_id=self.user_id,
            date=self._today(),
            duration_minutes=self.pending.duration_minutes,
            notes=notes.strip() or None,
        )
        saved = self.repository.add(session)
        logger.info("Recorded %d study minutes for %s", saved.duration_minutes, self.user_id)
        self.reset()
        return saved

    def discard(self) -> None:
        self.reset()

    def display(self) -> str:
        return format_clock(self.elapsed_seconds)
