"""Domain models and record derivations used across application layer boundaries."""

from .address import (
    LACONIC_ADDRESS_PREFIX,
    AddressEncodeResult,
    domain_address_decode_bech32,
    domain_address_display,
    domain_address_to_bech32,
)
from .models import (
    ApplicationDetailInfo,
    ApplicationRecord,
    DeploymentRecord,
    DerivedStats,
    UrlStatus,
    domain_build_attribute_map,
)
from .records import (
    INVALID_DATE,
    UNKNOWN_VALUE,
    UNNAMED_APP,
    domain_format_timestamp,
    domain_names_authority,
    domain_parse_timestamp,
    domain_record_authority,
    domain_record_display_name,
    domain_record_display_version,
    domain_record_first_owner,
)
from .timeline import domain_build_lifecycle_event

__all__ = [
    "AddressEncodeResult",
    "ApplicationDetailInfo",
    "ApplicationRecord",
    "DeploymentRecord",
    "DerivedStats",
    "INVALID_DATE",
    "LACONIC_ADDRESS_PREFIX",
    "UNKNOWN_VALUE",
    "UNNAMED_APP",
    "UrlStatus",
    "domain_address_decode_bech32",
    "domain_address_display",
    "domain_address_to_bech32",
    "domain_build_attribute_map",
    "domain_build_lifecycle_event",
    "domain_format_timestamp",
    "domain_names_authority",
    "domain_parse_timestamp",
    "domain_record_authority",
    "domain_record_display_name",
    "domain_record_display_version",
    "domain_record_first_owner",
]
