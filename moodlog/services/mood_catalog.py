from typing import Dict, Optional, Tuple

from moodlog.models.mood import Mood, MoodCategory

# Display order; independent of intensity rank
CATALOG: Tuple[MoodCategory, ...] = (
    MoodCategory(key=Mood.GREAT, label="Great", intensity_rank=5, accent_color="7FB95F", icon="sun.max.fill"),
    MoodCategory(key=Mood.GOOD, label="Good", intensity_rank=4, accent_color="ADCC5F", icon="cloud.sun.fill"),
    MoodCategory(key=Mood.OKAY, label="Okay", intensity_rank=3, accent_color="E4CA37", icon="cloud.fill"),
    MoodCategory(key=Mood.BAD, label="Bad", intensity_rank=2, accent_color="86B5D5", icon="cloud.rain.fill"),
    MoodCategory(key=Mood.AWFUL, label="Awful", intensity_rank=1, accent_color="798FDE", icon="cloud.bolt.rain.fill"),
)

_BY_KEY: Dict[str, MoodCategory] = {category.key: category for category in CATALOG}


def all_moods() -> Tuple[MoodCategory, ...]:
    return CATALOG


def resolve(key) -> Optional[MoodCategory]:
    """Catalog entry for a stored mood key, or None when the key is unknown."""
    if isinstance(key, Mood):
        key = key.value
    return _BY_KEY.get(key)


def intensity_of(key) -> Optional[int]:
    category = resolve(key)
    return category.intensity_rank if category else None


def neutral_intensity() -> int:
    return (len(CATALOG) + 1) // 2
