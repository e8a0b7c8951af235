from fastapi import APIRouter, Depends, Query
from datetime import date, datetime
from typing import Optional

from moodlog import config
from moodlog.db.entry_store import MoodEntryStore, get_entry_store
from moodlog.models.stat import CalendarResponse, HomeSummary, RankingResponse, TrendResponse
from moodlog.services import analytics_service
from moodlog.utils.datetime_utils import month_title

router = APIRouter(
    prefix="/stats",
    tags=["Statistics"]
)

NOW_DESCRIPTION = "Reference instant, defaults to the server clock"

# ==========================================
# API ENDPOINTS
# ==========================================

@router.get("/ranking", response_model=RankingResponse)
async def get_ranking(store: MoodEntryStore = Depends(get_entry_store)):
    entries = store.fetch_all()
    return RankingResponse(
        total_entries=len(entries),
        moods=analytics_service.rank_moods(entries)
    )


@router.get("/summary", response_model=HomeSummary)
async def get_summary(
    now: Optional[datetime] = Query(None, description=NOW_DESCRIPTION),
    store: MoodEntryStore = Depends(get_entry_store)
):
    return analytics_service.summarize(store.fetch_all(), now or datetime.now())


@router.get("/trend", response_model=TrendResponse)
async def get_trend(
    window_days: int = Query(7, gt=0, description="Window length in days, e.g. 7 or 30"),
    now: Optional[datetime] = Query(None, description=NOW_DESCRIPTION),
    store: MoodEntryStore = Depends(get_entry_store)
):
    points = analytics_service.windowed_series(store.fetch_all(), window_days, now or datetime.now())
    return TrendResponse(window_days=window_days, points=points)


@router.get("/calendar", response_model=CalendarResponse)
async def get_calendar(
    year: int = Query(..., ge=1, le=9999, description="Year, e.g. 2026"),
    month: int = Query(..., ge=1, le=12, description="Month, 1-12"),
    first_weekday: Optional[int] = Query(None, ge=0, le=6, description="0 = Monday ... 6 = Sunday"),
    store: MoodEntryStore = Depends(get_entry_store)
):
    if first_weekday is None:
        first_weekday = config.FIRST_WEEKDAY
    reference_month = date(year, month, 1)

    return CalendarResponse(
        title=month_title(reference_month),
        year=year,
        month=month,
        first_weekday=first_weekday,
        cells=analytics_service.month_calendar(store.fetch_all(), reference_month, first_weekday)
    )
