from typing import List, Optional, Sequence, TypeVar

from config import logger
from errors import GoalNotFoundError, ValidationError
from models import (
    Goal,
    Recurrence,
    Tag,
    RECURRENCE_OPTIONS,
    TAG_OPTIONS,
    TITLE_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
)
from store import GoalStore

T = TypeVar("T")


def option_at(options: Sequence[T], position: int) -> T:
    """Option at `position`, clamped to the bounds of `options`."""
    if not options:
        raise ValueError("options must not be empty")
    return options[min(max(position, 0), len(options) - 1)]


def _parse_option(enum_cls, value, name: str):
    if value is None:
        raise ValidationError(f"{name} is required")
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(option.value for option in enum_cls)
        raise ValidationError(f"Unknown {name} '{value}', expected one of: {allowed}")


class GoalService:
    def __init__(self, store: GoalStore):
        self.store = store

    def create(self, title: str, description: Optional[str], recurrence, tag) -> Goal:
        """
        Validate and store a new goal.

        Raises ValidationError for an empty or too long title, a too long
        description, or a recurrence/tag outside the known options. Nothing
        is stored in that case.
        """
        if not title or not title.strip():
            raise ValidationError("Title must not be empty")
        if len(title) > TITLE_MAX_LENGTH:
            raise ValidationError(f"Title must be at most {TITLE_MAX_LENGTH} characters")
        description = description or ""
        if len(description) > DESCRIPTION_MAX_LENGTH:
            raise ValidationError(f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters")

        goal = Goal(
            title=title,
            description=description,
            recurrence=_parse_option(Recurrence, recurrence, "recurrence"),
            tag=_parse_option(Tag, tag, "tag"),
        )
        goal = self.store.insert(goal)
        logger.info(f"Created goal {goal.id}")
        return goal

    def list(self) -> List[Goal]:
        return self.store.list()

    def search(self, term: Optional[str]) -> List[Goal]:
        """Goals whose title contains `term`, ignoring case. An empty term matches everything."""
        if not term:
            return self.list()
        folded = term.casefold()
        return self.store.find_matching(lambda goal: folded in goal.title.casefold())

    def get(self, goal_id: str) -> Goal:
        goal = self.store.get(goal_id)
        if goal is None:
            raise GoalNotFoundError(f"Goal {goal_id} not found")
        return goal

    def recurrence_at(self, position: Optional[int]) -> Optional[Recurrence]:
        return None if position is None else option_at(RECURRENCE_OPTIONS, position)

    def tag_at(self, position: Optional[int]) -> Optional[Tag]:
        return None if position is None else option_at(TAG_OPTIONS, position)

    def options(self) -> dict:
        return {"recurrence": RECURRENCE_OPTIONS, "tag": TAG_OPTIONS}
