# src/domain/time/utc.py

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def ensure_utc(dt: datetime) -> datetime:
    """Naive datetimes are taken as UTC; aware ones are converted."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_iso_utc(value: str) -> datetime:
    """
    Parse the --start argument (YYYY-MM-DD or full ISO datetime, 'Z' allowed).

    Raises:
        ValueError: empty or malformed value
    """
    v = value.strip()
    if not v:
        raise ValueError("Empty date value")
    if v.endswith("Z"):
        v = v[:-1] + "+00:00"

    try:
        dt = datetime.fromisoformat(v)
    except ValueError as exc:
        raise ValueError(f"Invalid ISO date: {value!r}") from exc

    return ensure_utc(dt)


def start_of_year(reference: Optional[datetime] = None) -> datetime:
    """
    Midnight UTC of January 1st of the reference year (default: now).

    Used as the lower bound of year-to-date analyses.
    """
    ref = ensure_utc(reference) if reference is not None else datetime.now(timezone.utc)
    return datetime(ref.year, 1, 1, tzinfo=timezone.utc)
