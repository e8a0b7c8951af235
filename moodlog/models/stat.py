from pydantic import BaseModel
from typing import List, Optional
from datetime import date, datetime

from moodlog.models.entry import MoodEntry


class MoodCountStat(BaseModel):
    mood: str
    count: int
    percentage: float


class RankingResponse(BaseModel):
    total_entries: int
    moods: List[MoodCountStat]


class TrendPoint(BaseModel):
    day: date
    intensity: int # 1 (Awful) -> 5 (Great)
    timestamp: datetime


class TrendResponse(BaseModel):
    window_days: int
    points: List[TrendPoint]


class CalendarCell(BaseModel):
    day: Optional[date] = None  # None = padding slot
    entry: Optional[MoodEntry] = None


class CalendarResponse(BaseModel):
    title: str
    year: int
    month: int
    first_weekday: int
    cells: List[CalendarCell]


class HomeSummary(BaseModel):
    top_mood: str
    today_mood: Optional[str] = None
    total_entries: int
    average_energy: float
