"""
Estimated reading time for rendered or raw content.

Words are counted after HTML tags are stripped. Minutes are rounded up, so
any non-empty text reads in at least one minute.
"""

import math

from bs4 import BeautifulSoup
from django.conf import settings

DEFAULT_WPM = 200
UNDER_A_MINUTE = "< 1 min read"


def _words_per_minute(words_per_minute):
    if words_per_minute is None:
        words_per_minute = getattr(settings, "CONTENT_READING_WPM", DEFAULT_WPM)
    if words_per_minute <= 0:
        raise ValueError("words_per_minute must be positive")
    return words_per_minute


def count_words(text) -> int:
    # Tags separate words: "one</p><p>two" is two words.
    plain = BeautifulSoup(text or "", "html.parser").get_text(separator=" ")
    return len(plain.split())


def get_minutes(text, words_per_minute=None) -> int:
    """Reading time in whole minutes (0 for empty text)."""
    wpm = _words_per_minute(words_per_minute)
    return math.ceil(count_words(text) / wpm)


def calculate(text, words_per_minute=None) -> str:
    """Human-readable reading time, e.g. "5 min read"."""
    minutes = get_minutes(text, words_per_minute)
    if minutes < 1:
        return UNDER_A_MINUTE
    return f"{minutes} min read"


def get_stats(text, words_per_minute=None) -> dict:
    wpm = _words_per_minute(words_per_minute)
    word_count = count_words(text)
    minutes = math.ceil(word_count / wpm)
    return {
        "word_count": word_count,
        "minutes": minutes,
        "formatted_time": f"{minutes} min read" if minutes >= 1 else UNDER_A_MINUTE,
    }
