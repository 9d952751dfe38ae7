"""Small provisioning helpers shared across akshelper.

Includes DNS prefix validation, GPU and SGX SKU lookups, managed disk tier
selection, and string formatting used when embedding generated
configuration into provisioning templates.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

DNS_PREFIX_PATTERN = re.compile(r"^([A-Za-z][A-Za-z0-9-]{1,43}[A-Za-z0-9])$")

PROMO_SUFFIX = "_Promo"

# Add a SKU here only once NVIDIA driver support for it has been confirmed.
NVIDIA_ENABLED_SKUS: dict[str, bool] = {
    # K80
    "Standard_NC6": True,
    "Standard_NC12": True,
    "Standard_NC24": True,
    "Standard_NC24r": True,
    # M60
    "Standard_NV6": True,
    "Standard_NV12": True,
    "Standard_NV12s_v3": True,
    "Standard_NV24": True,
    "Standard_NV24s_v3": True,
    "Standard_NV24r": True,
    "Standard_NV48s_v3": True,
    # P40
    "Standard_ND6s": True,
    "Standard_ND12s": True,
    "Standard_ND24s": True,
    "Standard_ND24rs": True,
    # P100
    "Standard_NC6s_v2": True,
    "Standard_NC12s_v2": True,
    "Standard_NC24s_v2": True,
    "Standard_NC24rs_v2": True,
    # V100
    "Standard_NC6s_v3": True,
    "Standard_NC12s_v3": True,
    "Standard_NC24s_v3": True,
    "Standard_NC24rs_v3": True,
    "Standard_ND40s_v3": True,
    "Standard_ND40rs_v2": True,
    # T4
    "Standard_NC4as_T4_v3": True,
    "Standard_NC8as_T4_v3": True,
    "Standard_NC16as_T4_v3": True,
    "Standard_NC64as_T4_v3": True,
}

SGX_ENABLED_SKUS = frozenset({"Standard_DC2s", "Standard_DC4s"})


def validate_dns_prefix(dns_name: str) -> str:
    """Validate a cluster DNS prefix.

    Args:
        dns_name: The DNS prefix to validate

    Returns:
        The validated DNS prefix (unchanged if valid)

    Raises:
        ValueError: If the prefix is not 3-45 characters of letters, numbers
            and hyphens starting with a letter and ending with a letter or
            number
    """
    if not DNS_PREFIX_PATTERN.match(dns_name):
        raise ValueError(
            f"DNSPrefix '{dns_name}' is invalid. The DNSPrefix must contain "
            "between 3 and 45 characters and can contain only letters, numbers, "
            "and hyphens.  It must start with a letter and must end with a "
            f"letter or a number. (length was {len(dns_name)})"
        )
    return dns_name


def is_nvidia_enabled_sku(vm_size: str) -> bool:
    """Return True if the VM size has NVIDIA driver support."""
    vm_size = vm_size.removesuffix(PROMO_SUFFIX)
    return NVIDIA_ENABLED_SKUS.get(vm_size, False)


def is_sgx_enabled_sku(vm_size: str) -> bool:
    """Return True if the VM size has SGX driver support."""
    return vm_size in SGX_ENABLED_SKUS


def get_storage_account_type(size_name: str) -> str:
    """Return the managed disk storage tier supported by a VM size.

    Sizes whose capability segment contains ``s`` (e.g. ``Standard_DS2_v2``)
    support premium storage.

    Raises:
        ValueError: If the size name has no capability segment
    """
    parts = size_name.split("_")
    if len(parts) < 2:
        raise ValueError(f"Invalid sizeName: {size_name}")
    capability = parts[1]
    if "s" in capability.lower():
        return "Premium_LRS"
    return "Standard_LRS"


def get_ordered_escaped_key_vals_string(config: Mapping[str, str]) -> str:
    """Return ``"key=val"`` pairs sorted by key and joined by ``, ``."""
    return ", ".join(f'"{key}={config[key]}"' for key in sorted(config))


def slice_int_is_non_empty(values: Sequence[int] | None) -> bool:
    """Return True if the sequence has at least one element."""
    return bool(values)


def wrap_as_verbatim(value: str) -> str:
    """Format a string for inserting a literal string into an ARM expression."""
    return f"',{value},'"


def indent_string(original: str, spaces: int) -> str:
    """Pad each line of a string with ``spaces`` spaces.

    Every output line, including the last, ends with a newline.
    """
    pad = " " * spaces
    return "".join(f"{pad}{line}\n" for line in original.splitlines())
