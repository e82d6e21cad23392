"""Shared utilities (datetime helpers)."""

from workforce.shared.utils.datetime import (
    ensure_utc,
    from_timestamp_ms_utc,
    to_timestamp_ms,
    utc_now,
)

__all__ = ["ensure_utc", "from_timestamp_ms_utc", "to_timestamp_ms", "utc_now"]
