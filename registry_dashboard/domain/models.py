"""Typed domain models shared across runtime layers.

Records are immutable snapshots of one upstream query result. Attribute lists
are converted to mappings once, at the adapter boundary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


@dataclass(frozen=True)
class ApplicationRecord:
    """Application record returned by the registry.

    Attributes:
        record_id: Opaque registry record identifier.
        bond_id: Bond identifier that pays for the record.
        create_time: Raw creation timestamp as returned upstream.
        expiry_time: Raw expiry timestamp as returned upstream.
        names: Ordered registered names, at most one `lrn://` authority path.
        owners: Ordered owner addresses in raw hex form.
        attributes: String attribute values keyed by attribute name.
    """

    record_id: str
    bond_id: str
    create_time: str
    expiry_time: str
    names: tuple[str, ...] = ()
    owners: tuple[str, ...] = ()
    attributes: Mapping[str, str | None] = field(default_factory=dict)


@dataclass(frozen=True)
class DeploymentRecord:
    """Deployment record attached to one application.

    Attributes:
        record_id: Opaque registry record identifier.
        names: Ordered registered names.
        attributes: String attribute values keyed by attribute name.
    """

    record_id: str
    names: tuple[str, ...] = ()
    attributes: Mapping[str, str | None] = field(default_factory=dict)


class UrlStatus(str, Enum):
    """Reachability state of one deployment URL."""

    CHECKING = "checking"
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class DerivedStats:
    """Summary statistics over the full application record set.

    Attributes:
        total_apps: Number of fetched records.
        unique_authorities: Number of distinct derived authorities.
        recently_created: Records created within the last 30 days.
        soon_expiring: Records expiring before 30 days from now.
    """

    total_apps: int
    unique_authorities: int
    recently_created: int
    soon_expiring: int


@dataclass(frozen=True)
class ApplicationDetailInfo:
    """Application metadata redisplayed by the detail view.

    Attributes:
        name: Display name.
        version: Display version.
        authority: Derived authority.
        created: Display-formatted creation time.
        expires: Display-formatted expiry time.
        owner: Bech32 owner address.
        repository: Repository URL or fallback label.
    """

    name: str
    version: str
    authority: str
    created: str
    expires: str
    owner: str
    repository: str


def domain_build_attribute_map(raw_attributes: object) -> dict[str, str | None]:
    """Convert an upstream `{key, value}` attribute list into a mapping.

    Only the string value variant is kept. When a key repeats, the first
    entry wins.

    Args:
        raw_attributes: Upstream attribute list.

    Returns:
        dict[str, str | None]: Attribute values keyed by attribute name.

    Raises:
        ValueError: Raised when the attribute payload is not a list of objects.
    """

    if raw_attributes is None:
        return {}
    if not isinstance(raw_attributes, list):
        raise ValueError("attributes must be a list")

    attribute_map: dict[str, str | None] = {}
    for raw_attribute in raw_attributes:
        if not isinstance(raw_attribute, dict):
            raise ValueError("attribute entries must be objects")
        key = raw_attribute.get("key")
        if not isinstance(key, str) or key in attribute_map:
            continue
        raw_value = raw_attribute.get("value")
        string_value = raw_value.get("string") if isinstance(raw_value, dict) else None
        attribute_map[key] = string_value if isinstance(string_value, str) else None
    return attribute_map
