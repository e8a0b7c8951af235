from typing import Any, List, Optional
from pydantic import BaseModel, Field, GetCoreSchemaHandler, GetJsonSchemaHandler, ConfigDict, field_validator
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from datetime import date, datetime
from bson import ObjectId

from moodlog.models.mood import Mood
from moodlog.utils.datetime_utils import to_local_naive

MIN_ENERGY = 1
MAX_ENERGY = 10
DEFAULT_ENERGY = 5


class PyObjectId(ObjectId):

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:

        def validate_object_id(v: Any) -> ObjectId:
            if not ObjectId.is_valid(v):
                raise ValueError("Invalid objectid")
            return ObjectId(v)

        from_input_schema = core_schema.no_info_plain_validator_function(validate_object_id)

        return core_schema.json_or_python_schema(
            json_schema=from_input_schema,
            python_schema=core_schema.union_schema([
                core_schema.is_instance_schema(ObjectId),
                from_input_schema,
            ]),
            serialization=core_schema.to_string_ser_schema()
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {'type': 'string'}


def clamp_energy(value: int) -> int:
    return max(MIN_ENERGY, min(MAX_ENERGY, value))


# Stored entry. `mood` stays a raw string: it may no longer resolve in the catalog.
class MoodEntry(BaseModel):
    id: PyObjectId = Field(default_factory=PyObjectId, alias="_id")
    timestamp: datetime
    mood: str
    energy: int = DEFAULT_ENERGY
    note: str = ""

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    @field_validator("energy")
    @classmethod
    def clamp(cls, v: int) -> int:
        return clamp_energy(v)

    def to_document(self) -> dict:
        return {
            "_id": ObjectId(self.id),
            "timestamp": self.timestamp,
            "mood": self.mood,
            "energy": self.energy,
            "note": self.note,
        }


# Input from the entry form
class NewEntryRequest(BaseModel):
    mood: Mood
    energy: int = DEFAULT_ENERGY
    note: str
    timestamp: Optional[datetime] = None

    @field_validator("energy")
    @classmethod
    def clamp(cls, v: int) -> int:
        return clamp_energy(v)

    @field_validator("note")
    @classmethod
    def note_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Note must not be empty")
        return v

    @field_validator("timestamp")
    @classmethod
    def not_in_future(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is None:
            return v
        v = to_local_naive(v)
        if v > datetime.now():
            raise ValueError("Entry date cannot be in the future")
        return v


# Input for the one-tap "log today" action
class LogTodayRequest(BaseModel):
    mood: Mood


class DayBucket(BaseModel):
    day: date
    label: Optional[str] = None
    entries: List[MoodEntry]
