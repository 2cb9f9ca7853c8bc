from dataclasses import asdict, dataclass
from typing import Optional

from pydantic import BaseModel, Field

from .constants import GoalType


@dataclass(frozen=True)
class ScheduleDTO:
    """Where a reader stands against the linear on-schedule pace."""
    books_per_week: int
    should_have_read: int
    difference: int
    label: str
    progress: float
    goal_met: bool
    on_schedule: bool


@dataclass
class GoalProgressDTO:
    goal_id: int
    goal_type: str
    target: int
    year: int
    read: int
    current_week: int
    weeks_in_year: int
    schedule: ScheduleDTO

    @property
    def percent(self) -> int:
        return int(self.schedule.progress * 100)

    def to_dict(self) -> dict:
        data = asdict(self)
        data['percent'] = self.percent
        return data


class ReadingGoalPayload(BaseModel):
    goal_type: GoalType = GoalType.BOOKS
    target: int = Field(ge=1)
    year: Optional[int] = Field(default=None, ge=1900, le=9999)
