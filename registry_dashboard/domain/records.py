"""Display-field derivations for registry application records."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Final

from .models import ApplicationRecord

UNNAMED_APP: Final[str] = "Unnamed App"
UNKNOWN_VALUE: Final[str] = "Unknown"
INVALID_DATE: Final[str] = "Invalid Date"
AUTHORITY_NAME_SCHEME: Final[str] = "lrn://"


def domain_record_display_name(record: ApplicationRecord) -> str:
    """Return the `name` attribute or the unnamed fallback.

    Args:
        record: Application record.

    Returns:
        str: Display name.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return record.attributes.get("name") or UNNAMED_APP


def domain_record_display_version(record: ApplicationRecord) -> str:
    """Return the `app_version` attribute or the unknown fallback.

    Args:
        record: Application record.

    Returns:
        str: Display version.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return record.attributes.get("app_version") or UNKNOWN_VALUE


def domain_record_authority(record: ApplicationRecord) -> str:
    """Derive the naming authority from the first `lrn://` name.

    The name is split on `/` and the segment at index 2 is the authority,
    so `lrn://alice/apps/x` yields `alice`.

    Args:
        record: Application record.

    Returns:
        str: Authority segment, or the unknown fallback.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return domain_names_authority(record.names)


def domain_names_authority(names: tuple[str, ...] | list[str]) -> str:
    """Derive the naming authority from an ordered name list.

    Args:
        names: Registered names of one record.

    Returns:
        str: Authority segment, or the unknown fallback.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    authority_name = next(
        (name for name in names if isinstance(name, str) and name.startswith(AUTHORITY_NAME_SCHEME)),
        None,
    )
    if authority_name is None:
        return UNKNOWN_VALUE

    name_segments = authority_name.split("/")
    if len(name_segments) < 3:
        return UNKNOWN_VALUE
    return name_segments[2] or UNKNOWN_VALUE


def domain_record_first_owner(record: ApplicationRecord) -> str:
    """Return the first raw owner address, or an empty string."""

    return record.owners[0] if record.owners else ""


def domain_parse_timestamp(value: str | None) -> datetime | None:
    """Parse an upstream ISO-8601 timestamp into an aware UTC datetime.

    Args:
        value: Raw timestamp text. A trailing `Z` is accepted and naive
            values are treated as UTC.

    Returns:
        datetime | None: Parsed timestamp, or None when blank or malformed.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if not isinstance(value, str) or not value.strip():
        return None

    normalized_value = value.strip()
    if normalized_value.endswith(("Z", "z")):
        normalized_value = f"{normalized_value[:-1]}+00:00"
    try:
        parsed_timestamp = datetime.fromisoformat(normalized_value)
    except ValueError:
        return None

    if parsed_timestamp.tzinfo is None:
        return parsed_timestamp.replace(tzinfo=timezone.utc)
    return parsed_timestamp.astimezone(timezone.utc)


def domain_format_timestamp(value: str | None) -> str:
    """Render an upstream timestamp for display.

    Args:
        value: Raw timestamp text.

    Returns:
        str: `YYYY-MM-DD HH:MM:SS UTC`, or `Invalid Date` when unparseable.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    parsed_timestamp = domain_parse_timestamp(value)
    if parsed_timestamp is None:
        return INVALID_DATE
    return parsed_timestamp.strftime("%Y-%m-%d %H:%M:%S UTC")


__all__ = [
    "AUTHORITY_NAME_SCHEME",
    "INVALID_DATE",
    "UNKNOWN_VALUE",
    "UNNAMED_APP",
    "domain_format_timestamp",
    "domain_names_authority",
    "domain_parse_timestamp",
    "domain_record_authority",
    "domain_record_display_name",
    "domain_record_display_version",
    "domain_record_first_owner",
]
