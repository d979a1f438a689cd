"""Local wall-clock <-> UTC instant conversion.

Phase times are entered as ``datetime-local`` form values (``YYYY-MM-DDTHH:MM``
in the operator's zone) and stored as UTC instants. Every conversion in the
package goes through this module so display and validation code agree.

Wall-clock values that fall in a DST gap do not exist in the zone; they are
resolved with the offset in force before the transition and therefore come
back shifted by the gap when converted to local time again.
"""

from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

LOCAL_DATETIME_FORMAT = "%Y-%m-%dT%H:%M"


class InvalidTimezoneError(ValueError):
    """Raised when a timezone name cannot be resolved."""


def get_zone(tz: str | tzinfo) -> tzinfo:
    """Resolve a timezone name or pass a tzinfo through.

    Raises:
        InvalidTimezoneError: If the name is not a known IANA zone.
    """
    if isinstance(tz, tzinfo):
        return tz
    if tz.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidTimezoneError(f"Unknown timezone '{tz}'") from e


def ensure_utc(value: datetime) -> datetime:
    """Return an aware UTC datetime. Naive values are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_utc(value: str | datetime | None) -> datetime | None:
    """Parse an ISO 8601 instant into an aware UTC datetime.

    Returns None for empty or unparseable input so that callers can report
    the field as missing instead of failing.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)

    text = value.strip()
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    return ensure_utc(parsed)


def to_utc_iso(value: datetime) -> str:
    """Format an instant as an ISO 8601 UTC string with a ``Z`` suffix."""
    return ensure_utc(value).isoformat().replace("+00:00", "Z")


def local_to_utc(local_value: str | None, tz: str | tzinfo) -> datetime | None:
    """Convert a ``YYYY-MM-DDTHH:MM`` wall-clock value in ``tz`` to UTC.

    Args:
        local_value: The form value. Empty values yield None.
        tz: IANA zone name or tzinfo of the operator.

    Returns:
        Aware UTC datetime, or None when no value was entered.

    Raises:
        ValueError: If the value is not in ``YYYY-MM-DDTHH:MM`` form.
    """
    if not local_value or not local_value.strip():
        return None
    naive = datetime.strptime(local_value.strip(), LOCAL_DATETIME_FORMAT)
    return naive.replace(tzinfo=get_zone(tz)).astimezone(timezone.utc)


def utc_to_local(value: str | datetime | None, tz: str | tzinfo) -> str:
    """Convert a UTC instant to a ``YYYY-MM-DDTHH:MM`` wall-clock value in ``tz``.

    Returns an empty string when there is nothing to display.
    """
    instant = parse_utc(value)
    if instant is None:
        return ""
    return instant.astimezone(get_zone(tz)).strftime(LOCAL_DATETIME_FORMAT)
