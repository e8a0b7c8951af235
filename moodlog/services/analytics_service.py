"""
Aggregation over a snapshot of mood entries.

Every function here is pure: it reads the entries it is given plus explicit
parameters (`now`, a window, a reference month) and never touches the store
or the clock. Unknown mood keys never raise; see each function for how they
are treated.
"""
import logging
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional, Sequence

from moodlog.models.entry import DayBucket, MoodEntry
from moodlog.models.stat import CalendarCell, HomeSummary, MoodCountStat, TrendPoint
from moodlog.services import mood_catalog
from moodlog.utils.datetime_utils import day_key, day_label, month_grid, to_local_naive

logger = logging.getLogger(__name__)

NO_TOP_MOOD = "—"


# ==========================================
# RANKING
# ==========================================

def count_moods(entries: Iterable[MoodEntry]) -> Dict[str, int]:
    """Occurrences per catalog key. Entries with unknown moods are skipped."""
    counter = {category.key: 0 for category in mood_catalog.all_moods()}
    unknown = 0
    for entry in entries:
        category = mood_catalog.resolve(entry.mood)
        if category is None:
            unknown += 1
            continue
        counter[category.key] += 1

    if unknown:
        logger.debug("Skipped %d entries with unknown mood while counting", unknown)
    return counter


def rank_moods(entries: Sequence[MoodEntry]) -> List[MoodCountStat]:
    counter = count_moods(entries)
    total_entries = len(entries)

    mood_stats = []
    for mood, count in counter.items():
        percentage = round((count / total_entries) * 100, 1) if total_entries else 0.0
        mood_stats.append(MoodCountStat(mood=mood, count=count, percentage=percentage))

    # sort() is stable, so equal counts keep catalog display order
    mood_stats.sort(key=lambda x: x.count, reverse=True)
    return mood_stats


def top_mood(entries: Sequence[MoodEntry]) -> str:
    counter = count_moods(entries)
    best_mood, best_count = NO_TOP_MOOD, 0
    for mood, count in counter.items():
        if count > best_count:
            best_mood, best_count = mood, count
    return best_mood


# ==========================================
# DAY GROUPING
# ==========================================

def latest_entry(entries: Iterable[MoodEntry]) -> Optional[MoodEntry]:
    # Equal timestamps: the first one seen wins
    latest = None
    for entry in entries:
        if latest is None or to_local_naive(entry.timestamp) > to_local_naive(latest.timestamp):
            latest = entry
    return latest


def today_mood(entries: Sequence[MoodEntry], now: datetime) -> Optional[str]:
    today = day_key(now)
    entry = latest_entry(e for e in entries if day_key(e.timestamp) == today)
    return entry.mood if entry else None


def group_by_day(entries: Sequence[MoodEntry], today: Optional[date] = None) -> List[DayBucket]:
    """
    Partition entries by calendar day, newest day first.

    Entries keep their input order inside a bucket. When `today` is given,
    each bucket also gets a display label ("Today", "Yesterday", full date).
    """
    buckets: Dict[date, List[MoodEntry]] = {}
    for entry in entries:
        buckets.setdefault(day_key(entry.timestamp), []).append(entry)

    return [
        DayBucket(
            day=day,
            label=day_label(day, today) if today is not None else None,
            entries=buckets[day],
        )
        for day in sorted(buckets, reverse=True)
    ]


# ==========================================
# TREND
# ==========================================

def windowed_series(entries: Sequence[MoodEntry], window_days: int, now: datetime) -> List[TrendPoint]:
    """Entries with timestamp >= now - window_days, oldest first.

    Unknown moods are plotted at the neutral midpoint so the line stays
    continuous.
    """
    try:
        cutoff = to_local_naive(now) - timedelta(days=window_days)
    except OverflowError:
        # Window reaches past year 1: keep everything
        cutoff = datetime.min
    neutral = mood_catalog.neutral_intensity()

    points = []
    for entry in entries:
        timestamp = to_local_naive(entry.timestamp)
        if timestamp < cutoff:
            continue

        intensity = mood_catalog.intensity_of(entry.mood)
        if intensity is None:
            logger.debug("Unknown mood %r on entry %s plotted as neutral", entry.mood, entry.id)
            intensity = neutral

        points.append(TrendPoint(day=day_key(timestamp), intensity=intensity, timestamp=timestamp))

    points.sort(key=lambda p: p.timestamp)
    return points


# ==========================================
# CALENDAR
# ==========================================

def month_calendar(
    entries: Sequence[MoodEntry],
    reference_month: date,
    first_weekday: Optional[int] = None
) -> List[CalendarCell]:
    by_day: Dict[date, MoodEntry] = {}
    for entry in entries:
        day = day_key(entry.timestamp)
        current = by_day.get(day)
        if current is None or to_local_naive(entry.timestamp) > to_local_naive(current.timestamp):
            by_day[day] = entry

    return [
        CalendarCell(day=day, entry=by_day.get(day) if day else None)
        for day in month_grid(reference_month, first_weekday)
    ]


# ==========================================
# SUMMARY
# ==========================================

def average_energy(entries: Sequence[MoodEntry]) -> float:
    if not entries:
        return 0.0
    return round(sum(entry.energy for entry in entries) / len(entries), 1)


def summarize(entries: Sequence[MoodEntry], now: datetime) -> HomeSummary:
    return HomeSummary(
        top_mood=top_mood(entries),
        today_mood=today_mood(entries, now),
        total_entries=len(entries),
        average_energy=average_energy(entries),
    )
