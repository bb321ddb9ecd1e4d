"""Pomodoro work/break cycle."""

from __future__ import annotations

from dataclasses import dataclass

WORK = "work"
SHORT_BREAK = "shortBreak"
LONG_BREAK = "longBreak"
MODES = (WORK, SHORT_BREAK, LONG_BREAK)


@dataclass
class PomodoroSettings:
    """Durations in minutes; a long break follows every ``long_break_interval`` work blocks."""

    work_time: int = 25
    short_break: int = 5
    long_break: int = 15
    long_break_interval: int = 4

    def __post_init__(self) -> None:
        for field in ("work_time", "short_break", "long_break", "long_break_interval"):
            value = getattr(self, field)
            if not isinstance(value, int) or value <= 0:
                raise ValueError(f"{field} must be a positive whole number")

    def seconds_for(self, mode: str) -> int:
        if mode == WORK:
            return self.work_time * 60
        if mode == SHORT_BREAK:
            return self.short_break * 60
        if mode == LONG_BREAK:
            return self.long_break * 60
        raise ValueError(f"Unknown mode '{mode}'")


class PomodoroTimer:
    def __init__(self, settings: PomodoroSettings | None = None) -> None:
        self.settings = settings or PomodoroSettings()
        self.mode = WORK
        self.time_left = self.settings.seconds_for(WORK)
        self.is_active = False
        self.sessions_completed = 0

    def toggle(self) -> None:
        self.is_active = not self.is_active

    def reset(self) -> None:
        self.is_active = False
        self.time_left = self.settings.seconds_for(self.mode)

    def switch_mode(self, mode: str) -> None:
        self.time_left = self.settings.seconds_for(mode)
        self.mode = mode
        self.is_active = False

    def update_settings(self, settings: PomodoroSettings) -> None:
        self.settings = settings
        self.reset()

    def tick(self) -> str | None:
        """Advance one second; returns the completion message when a block ends."""

        if not self.is_active:
            return None
        if self.time_left > 0:
            self.time_left -= 1
        if self.time_left == 0:
            return self._complete()
        return None

    def advance(self, seconds: int) -> list[str]:
        """Apply several one-second ticks at once, e.g. after a UI rerun."""

        messages = []
        for _ in range(max(0, int(seconds))):
            if not self.is_active:
                break
            message = self.tick()
            if message:
                messages.append(message)
        return messages

    def _complete(self) -> str:
        self.is_active = False
        if self.mode != WORK:
            self.switch_mode(WORK)
            return f"Break time over! Ready for another work session ({self.settings.work_time} minutes)"

        self.sessions_completed += 1
        if self.sessions_completed % self.settings.long_break_interval == 0:
            self.switch_mode(LONG_BREAK)
            return f"Work session complete! Time for a long break ({self.settings.long_break} minutes)"
        self.switch_mode(SHORT_BREAK)
        return f"Work session complete! Time for a short break ({self.settings.short_break} minutes)"

    def progress(self) -> float:
        total = self.settings.seconds_for(self.mode)
        return (total - self.time_left) / total * 100.0

    def display(self) -> str:
        minutes, seconds = divmod(self.time_left, 60)
        return f"{minutes:02d}:{seconds:02d}"
