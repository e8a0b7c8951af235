import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import ConnectionFailure

from moodlog import config

logger = logging.getLogger(__name__)

_db: Optional[Database] = None


def connect(uri: str = config.MONGO_URI, db_name: str = config.DB_NAME) -> Database:
    global _db
    client = MongoClient(uri, serverSelectionTimeoutMS=5000)
    try:
        client.admin.command('ping')
    except ConnectionFailure as e:
        logger.error("Could not connect to MongoDB at %s: %s", uri, e)
        raise
    logger.info("Connected to MongoDB database %s", db_name)
    _db = client[db_name]
    return _db


def get_database() -> Database:
    if _db is None:
        return connect()
    return _db


def get_entry_collection() -> Collection:
    return get_database()[config.ENTRY_COLLECTION]
