"""Translation of cluster definition validation failures into messages.

A validation pass over a cluster definition yields a batch of field
failures, each located by a dotted field path such as
``Properties.AgentPoolProfiles[2].Count``. Only the first failure of a
batch is translated, in three stages:

1. Exact lookup in ``EXACT_MESSAGES`` for top-level profile fields.
2. For ``Properties.AgentPoolProfiles`` paths only, the first matching rule
   of ``AGENT_POOL_RULES``, which dispatch on the path's suffix or on a
   fragment it contains.
3. A fallback embedding the path and the raw batch.

The master profile storage profile message lists two valid values; the
agent pool message lists three.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from akshelper.config.defaults import (
    EPHEMERAL,
    MANAGED_DISKS,
    MAX_AGENT_COUNT,
    MAX_DISK_SIZE_GB,
    MAX_DISKS,
    MAX_IP_ADDRESS_COUNT,
    MAX_PORT,
    MIN_AGENT_COUNT,
    MIN_DISK_SIZE_GB,
    MIN_IP_ADDRESS_COUNT,
    MIN_PORT,
    STORAGE_ACCOUNT,
)
from akshelper.lib.errors import (
    ClusterValidationError,
    TranslationError,
    UnrecognizedFieldPathError,
)
from akshelper.lib.logging_config import get_logger

logger = get_logger(__name__)

AGENT_POOL_PREFIX = "Properties.AgentPoolProfiles"


@dataclass(frozen=True)
class FieldError:
    """One reported constraint violation.

    Attributes:
        namespace: Dotted path of the failing field
        value: The offending value, as received by the validator
        kind: Validator-specific failure type, for diagnosis only
    """

    namespace: str
    value: Any = None
    kind: str = ""


@dataclass(frozen=True)
class MessageTemplate:
    """A message format and the type of value it interpolates.

    ``text`` is formatted with ``namespace`` and ``value``. When
    ``value_type`` is set, the offending value must be an instance of it.
    """

    text: str
    value_type: type | None = None

    def render(self, error: FieldError) -> str:
        if self.value_type is not None and not _is_instance(
            error.value, self.value_type
        ):
            raise TranslationError(
                error.namespace, self.value_type.__name__, error.value
            )
        return self.text.format(namespace=error.namespace, value=error.value)


def _is_instance(value: Any, value_type: type) -> bool:
    # bool is an int subclass but never a valid size or count
    if value_type is int and isinstance(value, bool):
        return False
    return isinstance(value, value_type)


MISSING = MessageTemplate("missing {namespace}")

OS_DISK_SIZE = MessageTemplate(
    "Invalid os disk size of {value} specified.  The range of valid values are "
    f"[{MIN_DISK_SIZE_GB}, {MAX_DISK_SIZE_GB}]",
    int,
)

EXACT_MESSAGES: dict[str, MessageTemplate] = {
    "Properties.OrchestratorProfile": MISSING,
    "Properties.OrchestratorProfile.OrchestratorType": MISSING,
    "Properties.MasterProfile": MISSING,
    "Properties.MasterProfile.DNSPrefix": MISSING,
    "Properties.MasterProfile.VMSize": MISSING,
    "Properties.LinuxProfile": MISSING,
    "Properties.ServicePrincipalProfile.ClientID": MISSING,
    "Properties.WindowsProfile.AdminUsername": MISSING,
    "Properties.WindowsProfile.AdminPassword": MISSING,
    "Properties.MasterProfile.Count": MessageTemplate(
        "MasterProfile count needs to be 1, 3, or 5"
    ),
    "Properties.MasterProfile.OSDiskSizeGB": OS_DISK_SIZE,
    "Properties.MasterProfile.IPAddressCount": MessageTemplate(
        "MasterProfile.IPAddressCount needs to be in the range "
        f"[{MIN_IP_ADDRESS_COUNT},{MAX_IP_ADDRESS_COUNT}]"
    ),
    "Properties.MasterProfile.StorageProfile": MessageTemplate(
        "Unknown storageProfile '{value}'. "
        f"Specify either {STORAGE_ACCOUNT} or {MANAGED_DISKS}",
        str,
    ),
}

PathPredicate = Callable[[str], bool]


def _endswith(*suffixes: str) -> PathPredicate:
    return lambda namespace: namespace.endswith(suffixes)


def _contains(fragment: str) -> PathPredicate:
    return lambda namespace: fragment in namespace


# Evaluated in order; the first matching rule wins.
AGENT_POOL_RULES: tuple[tuple[PathPredicate, MessageTemplate], ...] = (
    (_endswith(".Name", "VMSize"), MISSING),
    (
        _endswith(".Count"),
        MessageTemplate(
            "AgentPoolProfile count needs to be in the range "
            f"[{MIN_AGENT_COUNT},{MAX_AGENT_COUNT}]"
        ),
    ),
    (_endswith(".OSDiskSizeGB"), OS_DISK_SIZE),
    (
        _contains(".Ports"),
        MessageTemplate(
            f"AgentPoolProfile Ports must be in the range[{MIN_PORT}, {MAX_PORT}]"
        ),
    ),
    (
        _endswith(".StorageProfile"),
        MessageTemplate(
            "Unknown storageProfile '{value}'. "
            f"Specify {STORAGE_ACCOUNT}, {MANAGED_DISKS}, or {EPHEMERAL}",
            str,
        ),
    ),
    (
        _contains(".DiskSizesGB"),
        MessageTemplate(
            f"A maximum of {MAX_DISKS} disks may be specified, The range of valid "
            f"disk size values are [{MIN_DISK_SIZE_GB}, {MAX_DISK_SIZE_GB}]"
        ),
    ),
    (
        _endswith(".IPAddressCount"),
        MessageTemplate(
            "AgentPoolProfile.IPAddressCount needs to be in the range "
            f"[{MIN_IP_ADDRESS_COUNT},{MAX_IP_ADDRESS_COUNT}]"
        ),
    ),
)


def find_template(namespace: str) -> MessageTemplate | None:
    """Return the message template for a field path, if any.

    Exact matches take precedence over agent pool rules.
    """
    template = EXACT_MESSAGES.get(namespace)
    if template is not None:
        return template
    if namespace.startswith(AGENT_POOL_PREFIX):
        for predicate, rule_template in AGENT_POOL_RULES:
            if predicate(namespace):
                return rule_template
    return None


def handle_validation_errors(errors: Sequence[FieldError]) -> ClusterValidationError:
    """Translate the first failure of a batch into a validation error.

    Args:
        errors: Failures reported by one validation pass; later entries
            are only used as diagnostic context

    Returns:
        ClusterValidationError whose message describes the first failure,
        or UnrecognizedFieldPathError when its path has no translation

    Raises:
        ValueError: If the batch is empty
        TranslationError: If the offending value does not fit the message
    """
    if not errors:
        raise ValueError("Cannot translate an empty batch of validation errors")

    error = errors[0]
    template = find_template(error.namespace)
    if template is None:
        logger.debug(f"No translation for namespace {error.namespace}")
        return UnrecognizedFieldPathError(error.namespace, errors)

    logger.debug(f"Translating validation failure for {error.namespace}")
    return ClusterValidationError(error.namespace, template.render(error))


def translate_field_error(error: FieldError) -> str:
    """Return the message for a single failure."""
    return handle_validation_errors([error]).message
