from datetime import datetime, timezone
from typing import Optional, List
from pydantic import field_validator
from sqlmodel import SQLModel, Field
from enum import Enum
import uuid

####################
#    DB Models     #
####################

class Recurrence(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

class Tag(str, Enum):
    PERSONAL = "personal"
    HEALTH = "health"
    CAREER = "career"
    FINANCE = "finance"
    LEARNING = "learning"

# Dropdown order, position in these lists is what clients select by
RECURRENCE_OPTIONS = list(Recurrence)
TAG_OPTIONS = list(Tag)

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000

def new_goal_id() -> str:
    return "goal_" + str(uuid.uuid4())

def utc_now() -> datetime:
    return datetime.now(timezone.utc)

class Goal(SQLModel, table=True):
    __tablename__ = "goals"

    # Insertion order
    seq: Optional[int] = Field(default=None, primary_key=True)
    id: str = Field(default_factory=new_goal_id, unique=True, index=True)

    title: str = Field(max_length=TITLE_MAX_LENGTH)
    description: str = Field(default="", max_length=DESCRIPTION_MAX_LENGTH)
    recurrence: Recurrence = Field(...)
    tag: Tag = Field(...)

    created_at: datetime = Field(default_factory=utc_now)

####################
#    API Models    #
####################

class GoalCreate(SQLModel):
    title: str = Field(default="")
    description: str = Field(default="")

    # Either the named value or its position in the option list
    recurrence: Optional[str] = None
    tag: Optional[str] = None
    recurrence_index: Optional[int] = None
    tag_index: Optional[int] = None

class GoalRead(SQLModel):
    id: str
    title: str
    description: str
    recurrence: Recurrence
    tag: Tag
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # SQLite hands timestamps back without their offset
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)

class GoalOptions(SQLModel):
    recurrence: List[Recurrence]
    tag: List[Tag]
