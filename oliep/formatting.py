"""Stateless formatting helpers shared by the templates and the build pass."""
import datetime
import math
import re


def long_date(value: datetime.date) -> str:
    """Long-form date without time, e.g. ``April 3, 2021``."""
    return f"{value:%B} {value.day}, {value.year}"


def reading_minutes(minutes: float) -> int:
    """Whole minutes of a fractional estimate, rounded down."""
    return int(math.floor(minutes))


def normalize_tag(text: str) -> str:
    """URL-safe form of a tag label: lowercase, runs of anything else become '-'."""
    text = text.lower()
    text = re.sub(r'[^a-z0-9]+', '-', text)
    return text.strip('-')


def rfc822_date(value: datetime.date) -> str:
    """Date as used by RSS ``pubDate`` (midnight UTC)."""
    moment = datetime.datetime(value.year, value.month, value.day, tzinfo=datetime.timezone.utc)
    return moment.strftime('%a, %d %b %Y %H:%M:%S +0000')


def cdata_safe(text: str) -> str:
    """Splits ``]]>`` so ``text`` can sit inside a single CDATA section."""
    return text.replace(']]>', ']]]]><![CDATA[>')
