"""Reading-time estimation for pre-rendered item bodies."""
import bleach

from .config import READING_WORDS_PER_MINUTE, logger
from .models import Item


def word_count(html: str) -> int:
    text = bleach.clean(html, tags=[], strip=True)
    return len(text.split())


def estimate_reading_time(html: str, words_per_minute: int = READING_WORDS_PER_MINUTE) -> float:
    """Fractional minutes needed to read ``html`` at ``words_per_minute``."""
    if words_per_minute <= 0:
        raise ValueError(f"words_per_minute must be positive, got {words_per_minute}")
    return word_count(html) / words_per_minute


def with_reading_time(item: Item, words_per_minute: int = READING_WORDS_PER_MINUTE) -> Item:
    minutes = estimate_reading_time(item.body, words_per_minute)
    logger.debug(f"Reading time for {item.path}: {minutes:.2f} min")
    return item.with_reading_time(minutes)
