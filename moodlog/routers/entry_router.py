from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional
from datetime import datetime
from bson import ObjectId

from moodlog.db.entry_store import MoodEntryStore, get_entry_store
from moodlog.models.entry import DayBucket, LogTodayRequest, MoodEntry, NewEntryRequest
from moodlog.services.analytics_service import group_by_day
from moodlog.utils.datetime_utils import day_key

ID_INVALID_MESSAGE = "Invalid entry id"
NOT_FOUND_MESSAGE = "Entry not found"

router = APIRouter(
    prefix="/entries",
    tags=["Entries"]
)


def parse_entry_id(entry_id: str) -> ObjectId:
    if not ObjectId.is_valid(entry_id):
        raise HTTPException(status_code=400, detail=ID_INVALID_MESSAGE)
    return ObjectId(entry_id)


@router.post("/new", response_model=MoodEntry, status_code=status.HTTP_201_CREATED)
async def create_new_entry(
    request: NewEntryRequest,
    store: MoodEntryStore = Depends(get_entry_store)
):
    entry = MoodEntry(
        timestamp=request.timestamp or datetime.now(),
        mood=request.mood.value,
        energy=request.energy,
        note=request.note,
    )
    return store.insert(entry)


@router.post("/today", response_model=MoodEntry)
async def log_today(
    request: LogTodayRequest,
    now: Optional[datetime] = Query(None, description="Reference instant, defaults to the server clock"),
    store: MoodEntryStore = Depends(get_entry_store)
):
    return store.log_today(request.mood.value, now or datetime.now())


@router.get("/history", response_model=List[DayBucket])
async def get_history(
    now: Optional[datetime] = Query(None, description="Reference instant for day labels"),
    store: MoodEntryStore = Depends(get_entry_store)
):
    entries = store.fetch_all(descending=True)  # newest first inside each day
    return group_by_day(entries, today=day_key(now or datetime.now()))


@router.delete("", response_model=dict)
async def delete_all_entries(store: MoodEntryStore = Depends(get_entry_store)):
    return {"deleted": store.delete_all()}


@router.get("/{entry_id}", response_model=MoodEntry)
async def get_single_entry(
    entry_id: str,
    store: MoodEntryStore = Depends(get_entry_store)
):
    entry = store.get(parse_entry_id(entry_id))
    if entry:
        return entry
    raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(
    entry_id: str,
    store: MoodEntryStore = Depends(get_entry_store)
):
    if not store.delete(parse_entry_id(entry_id)):
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    return None
