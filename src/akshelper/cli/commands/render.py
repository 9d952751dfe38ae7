"""CLI commands for rendering container runtime configuration.

Implements the 'akshelper render' command group, which prints the
composed Docker or containerd configuration, optionally wrapped in a
cloud-init write_files section.
"""

from __future__ import annotations

import sys
from collections.abc import Generator
from contextlib import contextmanager

import click

from akshelper.config.defaults import CONTAINER_DATA_DIR_KEY
from akshelper.lib.logging_config import get_logger, setup_logging
from akshelper.runtime.cloud_init import (
    CONTAINERD_CONFIG_PATH,
    DOCKER_DAEMON_JSON_PATH,
    WriteFile,
    render_write_files,
)
from akshelper.runtime.compose import (
    ContainerdOverride,
    DockerOverride,
    containerd_kubenet_override,
    containerd_sandbox_image_overrider,
    docker_nvidia_override,
    get_containerd_config,
    get_docker_config,
)

logger = get_logger(__name__)


@contextmanager
def handle_render_errors() -> Generator[None, None, None]:
    """Report composition or serialization failures and exit with code 3."""
    try:
        yield
    except Exception as e:
        logger.exception(f"Failed to render configuration: {e}")
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(3)


def _build_opts(data_dir: str | None) -> dict[str, str]:
    return {CONTAINER_DATA_DIR_KEY: data_dir} if data_dir is not None else {}


def _emit(content: str, path: str, cloud_init: bool) -> None:
    if cloud_init:
        click.echo(render_write_files([WriteFile(path, content)]), nl=False)
    else:
        click.echo(content)


@click.group(name="render", invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose debug logging")
@click.pass_context
def render(ctx: click.Context, verbose: bool) -> None:
    """Render container runtime configuration files.

    Subcommands:

        docker      Render /etc/docker/daemon.json

        containerd  Render /etc/containerd/config.toml
    """
    setup_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@render.command()
@click.option("--data-dir", type=str, default=None, help="Docker data root")
@click.option("--nvidia", is_flag=True, help="Use the NVIDIA container runtime")
@click.option(
    "--cloud-init", is_flag=True, help="Wrap the output in cloud-init write_files"
)
def docker(data_dir: str | None, nvidia: bool, cloud_init: bool) -> None:
    """Render the Docker daemon configuration.

    Example:

        akshelper render docker --data-dir /mnt/docker --nvidia
    """
    overrides: list[DockerOverride] = []
    if nvidia:
        overrides.append(docker_nvidia_override)

    with handle_render_errors():
        content = get_docker_config(_build_opts(data_dir), overrides)
    _emit(content, DOCKER_DAEMON_JSON_PATH, cloud_init)


@render.command()
@click.option("--data-dir", type=str, default=None, help="containerd root")
@click.option("--kubenet", is_flag=True, help="Configure the kubenet CNI template")
@click.option("--sandbox-image", type=str, default=None, help="Pod sandbox image")
@click.option(
    "--cloud-init", is_flag=True, help="Wrap the output in cloud-init write_files"
)
def containerd(
    data_dir: str | None,
    kubenet: bool,
    sandbox_image: str | None,
    cloud_init: bool,
) -> None:
    """Render the containerd configuration.

    Example:

        akshelper render containerd --kubenet --sandbox-image k8s.gcr.io/pause:3.1
    """
    overrides: list[ContainerdOverride] = []
    if kubenet:
        overrides.append(containerd_kubenet_override)
    if sandbox_image:
        overrides.append(containerd_sandbox_image_overrider(sandbox_image))

    with handle_render_errors():
        content = get_containerd_config(_build_opts(data_dir), overrides)
    _emit(content, CONTAINERD_CONFIG_PATH, cloud_init)
