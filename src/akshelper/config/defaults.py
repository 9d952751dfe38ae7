"""Default values and validation bounds for akshelper."""

from akshelper.models.runtime import (
    ContainerdConfig,
    ContainerdPlugin,
    ContainerdRuntime,
    CRIPlugin,
    DockerConfig,
    LogOpts,
    Plugins,
)


# Agent pool sizing
MIN_AGENT_COUNT = 1
MAX_AGENT_COUNT = 1000

# Ports opened on agent pools
MIN_PORT = 1
MAX_PORT = 65535

# Attached data disks
MAX_DISKS = 4
MIN_DISK_SIZE_GB = 1
MAX_DISK_SIZE_GB = 1023

# IP addresses per network interface
MIN_IP_ADDRESS_COUNT = 1
MAX_IP_ADDRESS_COUNT = 256

VALID_MASTER_COUNTS: tuple[int, ...] = (1, 3, 5)

# Storage profiles
STORAGE_ACCOUNT = "StorageAccount"
MANAGED_DISKS = "ManagedDisks"
EPHEMERAL = "Ephemeral"

# Named option key for the container runtime data directory
CONTAINER_DATA_DIR_KEY = "dataDir"

NVIDIA_RUNTIME_NAME = "nvidia"
NVIDIA_CONTAINER_RUNTIME_PATH = "/usr/bin/nvidia-container-runtime"
KUBENET_CNI_TEMPLATE_PATH = "/etc/containerd/kubenet_template.conf"
RUNC_RUNTIME_TYPE = "io.containerd.runc.v2"


def get_default_docker_config() -> DockerConfig:
    """Return a fresh Docker daemon configuration with provisioning defaults."""
    return DockerConfig(
        data_root="/mnt/docker",
        live_restore=True,
        log_driver="json-file",
        log_opts=LogOpts(max_size="50m", max_file="5"),
    )


def get_default_containerd_config() -> ContainerdConfig:
    """Return a fresh containerd configuration with provisioning defaults."""
    return ContainerdConfig(
        version=2,
        root="/var/lib/containerd",
        state="/run/containerd",
        plugins=Plugins(
            cri=CRIPlugin(
                containerd=ContainerdPlugin(
                    default_runtime_name="runc",
                    runtimes={
                        "runc": ContainerdRuntime(runtime_type=RUNC_RUNTIME_TYPE),
                        "untrusted": ContainerdRuntime(runtime_type=RUNC_RUNTIME_TYPE),
                    },
                )
            )
        ),
    )
