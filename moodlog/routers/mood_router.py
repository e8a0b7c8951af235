from fastapi import APIRouter
from typing import List

from moodlog.models.mood import MoodCategory
from moodlog.services.mood_catalog import all_moods

router = APIRouter(
    prefix="/moods",
    tags=["Moods"]
)


@router.get("", response_model=List[MoodCategory])
async def get_moods():
    return list(all_moods())
