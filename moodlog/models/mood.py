from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class Mood(str, Enum):
    GREAT = "Great"
    GOOD = "Good"
    OKAY = "Okay"
    BAD = "Bad"
    AWFUL = "Awful"


class MoodCategory(BaseModel):
    key: Mood
    label: str
    intensity_rank: int = Field(ge=1)  # higher = more positive
    accent_color: str
    icon: str

    model_config = ConfigDict(frozen=True, use_enum_values=True)
