"""Composition of container runtime configuration files.

A configuration file is produced from its defaults in four steps:

1. The defaults are deep-copied; the caller's instance is never mutated.
2. Overrides are applied in order. An override mutates the copy it is
   given and signals failure by raising; the exception propagates
   unchanged and no later override runs.
3. Named options are applied. ``dataDir`` overwrites the data directory
   whatever the overrides set.
4. The result is serialized: Docker as JSON indented by four spaces,
   containerd as TOML.

Example:
    >>> text = get_containerd_config(
    ...     {CONTAINER_DATA_DIR_KEY: "/mnt/containerd"},
    ...     [containerd_sandbox_image_overrider("k8s.gcr.io/pause:3.1")],
    ... )
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Sequence
from typing import TypeVar

import tomli_w

from akshelper.config.defaults import (
    CONTAINER_DATA_DIR_KEY,
    KUBENET_CNI_TEMPLATE_PATH,
    NVIDIA_CONTAINER_RUNTIME_PATH,
    NVIDIA_RUNTIME_NAME,
    get_default_containerd_config,
    get_default_docker_config,
)
from akshelper.lib.helpers import is_nvidia_enabled_sku
from akshelper.lib.logging_config import get_logger
from akshelper.models.cluster import AgentPoolProfile
from akshelper.models.runtime import (
    ContainerdConfig,
    DockerConfig,
    DockerDaemonRuntime,
    RuntimeConfigModel,
)

logger = get_logger(__name__)

ConfigT = TypeVar("ConfigT", bound=RuntimeConfigModel)

Override = Callable[[ConfigT], None]
DockerOverride = Callable[[DockerConfig], None]
ContainerdOverride = Callable[[ContainerdConfig], None]

JSON_INDENT = 4


def apply_overrides(
    defaults: ConfigT, overrides: Sequence[Override[ConfigT]] | None = None
) -> ConfigT:
    """Return a copy of ``defaults`` with each override applied in order.

    Args:
        defaults: Baseline configuration, left untouched
        overrides: Functions mutating the copy; may be None

    Returns:
        The overridden copy

    Raises:
        Exception: Whatever the first failing override raises
    """
    config = defaults.model_copy(deep=True)
    for override in overrides or ():
        override(config)
    return config


def apply_named_options(config: ConfigT, opts: Mapping[str, str] | None) -> ConfigT:
    """Apply named options to ``config`` in place and return it."""
    if opts and CONTAINER_DATA_DIR_KEY in opts:
        setattr(config, config.data_dir_field, opts[CONTAINER_DATA_DIR_KEY])
    return config


def compose(
    defaults: ConfigT,
    overrides: Sequence[Override[ConfigT]] | None = None,
    opts: Mapping[str, str] | None = None,
) -> ConfigT:
    """Fold overrides, then named options, into a copy of ``defaults``."""
    config = apply_overrides(defaults, overrides)
    logger.debug(
        f"Applied {len(overrides or ())} override(s) to {type(config).__name__}"
    )
    return apply_named_options(config, opts)


def serialize_docker_config(config: DockerConfig) -> str:
    return json.dumps(config.to_document(), indent=JSON_INDENT)


def serialize_containerd_config(config: ContainerdConfig) -> str:
    return tomli_w.dumps(config.to_document())


def get_docker_config(
    opts: Mapping[str, str] | None = None,
    overrides: Sequence[DockerOverride] | None = None,
) -> str:
    """Return the Docker daemon configuration as JSON.

    Args:
        opts: Named options; ``dataDir`` sets ``data-root``
        overrides: Ordered overrides of the defaults; may be None

    Returns:
        The ``daemon.json`` content
    """
    config = compose(get_default_docker_config(), overrides, opts)
    return serialize_docker_config(config)


def get_containerd_config(
    opts: Mapping[str, str] | None = None,
    overrides: Sequence[ContainerdOverride] | None = None,
) -> str:
    """Return the containerd configuration as TOML.

    Args:
        opts: Named options; ``dataDir`` sets ``root``
        overrides: Ordered overrides of the defaults; may be None

    Returns:
        The ``config.toml`` content
    """
    config = compose(get_default_containerd_config(), overrides, opts)
    return serialize_containerd_config(config)


def containerd_kubenet_override(config: ContainerdConfig) -> None:
    """Set the CNI config template required when using kubenet."""
    config.plugins.cri.cni.conf_template = KUBENET_CNI_TEMPLATE_PATH


def containerd_sandbox_image_overrider(image: str) -> ContainerdOverride:
    """Return an override setting the pod sandbox image to ``image``."""

    def override(config: ContainerdConfig) -> None:
        config.plugins.cri.sandbox_image = image

    return override


def docker_nvidia_override(config: DockerConfig) -> None:
    """Make the NVIDIA container runtime the Docker default runtime."""
    if config.runtimes is None:
        config.runtimes = {}
    config.default_runtime = NVIDIA_RUNTIME_NAME
    config.runtimes[NVIDIA_RUNTIME_NAME] = DockerDaemonRuntime(
        path=NVIDIA_CONTAINER_RUNTIME_PATH,
        runtime_args=[],
    )


def docker_overrides_for_pool(profile: AgentPoolProfile) -> list[DockerOverride]:
    """Return the Docker overrides needed by an agent pool's VM size."""
    if is_nvidia_enabled_sku(profile.vm_size):
        return [docker_nvidia_override]
    return []
