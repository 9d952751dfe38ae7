"""Pydantic models for container runtime configuration files.

This module defines the schema of the Docker daemon configuration
(``/etc/docker/daemon.json``) and the containerd configuration
(``/etc/containerd/config.toml``) written at node provisioning time.

Field aliases carry the on-disk key names. Optional fields default to
``None`` and are omitted when serialized.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class RuntimeConfigModel(BaseModel):
    """Base class for serializable runtime configuration documents.

    Subclasses name the field that the ``dataDir`` named option overwrites.
    """

    model_config = ConfigDict(populate_by_name=True)

    data_dir_field: ClassVar[str]

    def to_document(self) -> dict[str, Any]:
        """Return the on-disk representation, without unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class LogOpts(BaseModel):
    """Options for the Docker ``json-file`` log driver."""

    model_config = ConfigDict(populate_by_name=True)

    max_size: str | None = Field(default=None, alias="max-size")
    max_file: str | None = Field(default=None, alias="max-file")


class DockerDaemonRuntime(BaseModel):
    """An additional OCI runtime registered with the Docker daemon."""

    model_config = ConfigDict(populate_by_name=True)

    path: str | None = None
    runtime_args: list[str] = Field(default_factory=list, alias="runtimeArgs")


class DockerConfig(RuntimeConfigModel):
    """Docker daemon configuration (``daemon.json``).

    Attributes:
        data_root: Root directory of persistent Docker state
        live_restore: Keep containers running while the daemon is down
        log_driver: Default logging driver for containers
        log_opts: Options for the logging driver
        default_runtime: Runtime used when none is requested
        runtimes: Additional runtimes by name
    """

    data_dir_field: ClassVar[str] = "data_root"

    data_root: str | None = Field(default=None, alias="data-root")
    live_restore: bool | None = Field(default=None, alias="live-restore")
    log_driver: str | None = Field(default=None, alias="log-driver")
    log_opts: LogOpts = Field(default_factory=LogOpts, alias="log-opts")
    default_runtime: str | None = Field(default=None, alias="default-runtime")
    runtimes: dict[str, DockerDaemonRuntime] | None = None


class ContainerdCNIPlugin(BaseModel):
    """CNI settings of the containerd CRI plugin."""

    conf_template: str | None = None


class ContainerdRuntime(BaseModel):
    """A runtime handler known to containerd."""

    runtime_type: str


class ContainerdPlugin(BaseModel):
    """Runtime selection of the containerd CRI plugin."""

    default_runtime_name: str | None = None
    runtimes: dict[str, ContainerdRuntime] = Field(default_factory=dict)


class CRIPlugin(BaseModel):
    """The ``io.containerd.grpc.v1.cri`` plugin section."""

    sandbox_image: str | None = None
    cni: ContainerdCNIPlugin = Field(default_factory=ContainerdCNIPlugin)
    containerd: ContainerdPlugin = Field(default_factory=ContainerdPlugin)


class Plugins(BaseModel):
    """Plugin sections of the containerd configuration."""

    model_config = ConfigDict(populate_by_name=True)

    cri: CRIPlugin = Field(
        default_factory=CRIPlugin, alias="io.containerd.grpc.v1.cri"
    )


class ContainerdConfig(RuntimeConfigModel):
    """containerd configuration (``config.toml``).

    Attributes:
        version: Configuration schema version
        root: Root directory of persistent containerd state
        state: Directory for transient state
        subreaper: Run containerd as a subreaper
        oom_score: OOM score adjustment of the daemon
        plugins: Plugin sections
    """

    data_dir_field: ClassVar[str] = "root"

    version: int | None = None
    root: str | None = None
    state: str | None = None
    subreaper: bool | None = None
    oom_score: int | None = None
    plugins: Plugins = Field(default_factory=Plugins)
