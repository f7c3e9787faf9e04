"""Data models for parsed instructions, process snapshots, and session status"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional


@dataclass(frozen=True)
class Instruction:
    """Normalized result of parsing one launcher query"""
    kind: str  # 'duration', 'target', 'indefinite', 'status', 'deactivate', 'invalid'
    minutes: Optional[int] = None
    hour: Optional[int] = None
    minute: Optional[int] = None
    explicit: bool = True  # False only for the implicit empty-input status query

    @classmethod
    def duration(cls, minutes: int) -> 'Instruction':
        return cls(kind='duration', minutes=minutes)

    @classmethod
    def target(cls, hour: int, minute: int) -> 'Instruction':
        return cls(kind='target', hour=hour, minute=minute)

    @classmethod
    def indefinite(cls) -> 'Instruction':
        return cls(kind='indefinite')

    @classmethod
    def status(cls, explicit: bool = True) -> 'Instruction':
        return cls(kind='status', explicit=explicit)

    @classmethod
    def deactivate(cls) -> 'Instruction':
        return cls(kind='deactivate')

    @classmethod
    def invalid(cls) -> 'Instruction':
        return cls(kind='invalid')

    def resolve(self, now: datetime) -> Optional[datetime]:
        """
        Get the moment this instruction keeps the machine awake until

        A clock target always means its next occurrence, so a time that is not
        strictly after now rolls over to tomorrow.

        Returns:
            End datetime, or None for instructions without an end
        """
        if self.kind == 'duration':
            return now + timedelta(minutes=self.minutes)

        if self.kind == 'target':
            end = now.replace(hour=self.hour, minute=self.minute, second=0, microsecond=0)
            if end <= now:
                end += timedelta(days=1)
            return end

        return None


@dataclass
class ProcessSnapshot:
    """Point-in-time facts about the keep-awake process"""
    running: bool
    start_time: datetime
    invocation_args: str


@dataclass
class SessionStatus:
    """Keep-awake session state derived from one ProcessSnapshot"""
    active: bool
    indefinite: bool = False
    display_allows_display_sleep: bool = True
    remaining_seconds: Optional[int] = None
    should_poll_again: bool = False
    total_seconds: Optional[int] = None
    end_time: Optional[datetime] = None

    @classmethod
    def inactive(cls) -> 'SessionStatus':
        return cls(active=False)

    @property
    def timed(self) -> bool:
        return self.active and not self.indefinite
