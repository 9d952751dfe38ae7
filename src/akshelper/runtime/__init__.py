"""Container runtime configuration for cluster nodes.

This package composes the Docker and containerd configuration files and
renders them into cloud-init sections.
"""

from akshelper.runtime.cloud_init import WriteFile, render_write_files
from akshelper.runtime.compose import (
    apply_overrides,
    compose,
    containerd_kubenet_override,
    containerd_sandbox_image_overrider,
    docker_nvidia_override,
    get_containerd_config,
    get_docker_config,
)

__all__ = [
    "WriteFile",
    "apply_overrides",
    "compose",
    "containerd_kubenet_override",
    "containerd_sandbox_image_overrider",
    "docker_nvidia_override",
    "get_containerd_config",
    "get_docker_config",
    "render_write_files",
]
