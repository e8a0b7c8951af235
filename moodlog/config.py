import os
from typing import Optional

from babel import Locale, UnknownLocaleError, default_locale
from dotenv import load_dotenv

load_dotenv()

MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
DB_NAME = os.getenv("DB_NAME", "moodlog")
ENTRY_COLLECTION = "mood_entries"


def locale_first_weekday(locale_name: Optional[str] = None) -> int:
    """First day of the week for a locale (host locale by default), Monday = 0."""
    locale_name = locale_name or default_locale()
    if not locale_name:
        return 0
    try:
        return Locale.parse(locale_name).first_week_day
    except (UnknownLocaleError, ValueError):
        return 0


def parse_first_weekday(value: Optional[str]) -> int:
    if value is None or not value.strip():
        return locale_first_weekday()
    try:
        weekday = int(value)
    except ValueError:
        raise ValueError(f"FIRST_WEEKDAY must be an integer 0-6 (0 = Monday), got {value!r}")
    if not 0 <= weekday <= 6:
        raise ValueError(f"FIRST_WEEKDAY must be between 0 (Monday) and 6 (Sunday), got {weekday}")
    return weekday


# 0 = Monday ... 6 = Sunday
FIRST_WEEKDAY = parse_first_weekday(os.getenv("FIRST_WEEKDAY"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE")
