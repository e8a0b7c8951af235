import logging
from datetime import datetime, timedelta
from typing import List, Optional, Union

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.collection import Collection

from moodlog.db.database import get_entry_collection
from moodlog.models.entry import MoodEntry
from moodlog.utils.datetime_utils import start_of_day, to_local_naive

logger = logging.getLogger(__name__)

EntryId = Union[str, ObjectId]


class MoodEntryStore:
    """MongoDB-backed storage for mood entries.

    Timestamps are stored as naive local wall-clock time, so the stored value
    and the calendar day it belongs to always agree.
    """

    def __init__(self, collection: Collection):
        self.collection = collection

    def insert(self, entry: MoodEntry) -> MoodEntry:
        self.collection.insert_one(entry.to_document())
        logger.info("Inserted entry %s (%s)", entry.id, entry.mood)
        return entry

    def get(self, entry_id: EntryId) -> Optional[MoodEntry]:
        doc = self.collection.find_one({"_id": ObjectId(entry_id)})
        return MoodEntry.model_validate(doc) if doc else None

    def delete(self, entry_id: EntryId) -> bool:
        result = self.collection.delete_one({"_id": ObjectId(entry_id)})
        if result.deleted_count:
            logger.info("Deleted entry %s", entry_id)
        return result.deleted_count > 0

    def delete_all(self) -> int:
        result = self.collection.delete_many({})
        logger.info("Deleted all %d entries", result.deleted_count)
        return result.deleted_count

    def fetch_all(self, descending: bool = False) -> List[MoodEntry]:
        cursor = self.collection.find().sort("timestamp", DESCENDING if descending else ASCENDING)
        return [MoodEntry.model_validate(doc) for doc in cursor]

    def fetch_count(self, query: Optional[dict] = None) -> int:
        return self.collection.count_documents(query or {})

    def log_today(self, mood: str, now: datetime) -> MoodEntry:
        """
        One-tap logging: overwrite the mood of today's most recent entry, or
        create a new entry when nothing was logged today.
        """
        now = to_local_naive(now)
        day_start = start_of_day(now)

        updated = self.collection.find_one_and_update(
            {"timestamp": {"$gte": day_start, "$lt": day_start + timedelta(days=1)}},
            {"$set": {"mood": mood}},
            sort=[("timestamp", DESCENDING)],
            return_document=ReturnDocument.AFTER
        )
        if updated:
            logger.info("Updated today's entry %s to %s", updated["_id"], mood)
            return MoodEntry.model_validate(updated)

        return self.insert(MoodEntry(timestamp=now, mood=mood))


def get_entry_store() -> MoodEntryStore:
    return MoodEntryStore(get_entry_collection())
