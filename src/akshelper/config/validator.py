"""Validation utilities for cluster definitions."""

from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from akshelper.lib.errors import ClusterValidationError
from akshelper.lib.helpers import validate_dns_prefix
from akshelper.lib.logging_config import get_logger
from akshelper.lib.validation import FieldError, handle_validation_errors
from akshelper.models.cluster import ClusterDefinition

logger = get_logger(__name__)

# Segments whose schema name is not a plain capitalization of the key,
# keyed by the lowercased key without underscores.
_IRREGULAR_SEGMENTS: dict[str, str] = {
    "dnsprefix": "DNSPrefix",
    "vmsize": "VMSize",
    "osdisksizegb": "OSDiskSizeGB",
    "ipaddresscount": "IPAddressCount",
    "disksizesgb": "DiskSizesGB",
    "clientid": "ClientID",
    "ssh": "SSH",
}


def namespace_segment(key: str) -> str:
    """Map a model field name or alias to its schema name.

    ``dnsPrefix`` and ``dns_prefix`` both become ``DNSPrefix``;
    ``agentPoolProfiles`` becomes ``AgentPoolProfiles``.
    """
    irregular = _IRREGULAR_SEGMENTS.get(key.replace("_", "").lower())
    if irregular:
        return irregular
    if "_" in key:
        return "".join(part.capitalize() for part in key.split("_"))
    return key[:1].upper() + key[1:]


def loc_to_namespace(loc: Sequence[int | str]) -> str:
    """Build a dotted field path from a pydantic error location.

    List indices are attached to the preceding segment, e.g.
    ``("properties", "agentPoolProfiles", 2, "count")`` becomes
    ``Properties.AgentPoolProfiles[2].Count``.
    """
    namespace = ""
    for item in loc:
        if isinstance(item, int):
            namespace += f"[{item}]"
        else:
            segment = namespace_segment(item)
            namespace = f"{namespace}.{segment}" if namespace else segment
    return namespace or "unknown"


def field_errors_from_pydantic(exc: PydanticValidationError) -> list[FieldError]:
    """Convert a Pydantic ValidationError into field failures, in order.

    Args:
        exc: Pydantic ValidationError raised for a cluster definition

    Returns:
        One FieldError per reported error, located by schema field path
    """
    return [
        FieldError(
            namespace=loc_to_namespace(error.get("loc", ())),
            value=error.get("input"),
            kind=error.get("type", ""),
        )
        for error in exc.errors()
    ]


def validate_cluster_definition(data: dict[str, Any]) -> ClusterDefinition:
    """Validate a parsed cluster definition.

    Schema constraints are checked first; the DNS prefix format is checked
    only once the schema is satisfied.

    Args:
        data: Parsed cluster definition document

    Returns:
        Validated ClusterDefinition

    Raises:
        ClusterValidationError: With the message of the first failure
        TranslationError: If the first failure cannot be translated
    """
    try:
        definition = ClusterDefinition.model_validate(data)
    except PydanticValidationError as e:
        errors = field_errors_from_pydantic(e)
        logger.debug(f"Cluster definition has {len(errors)} validation error(s)")
        raise handle_validation_errors(errors) from e

    dns_prefix = definition.properties.master_profile.dns_prefix
    try:
        validate_dns_prefix(dns_prefix)
    except ValueError as e:
        raise ClusterValidationError(
            "Properties.MasterProfile.DNSPrefix", str(e)
        ) from e

    return definition
