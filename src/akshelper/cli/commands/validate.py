"""CLI command for validating cluster definitions.

Implements the 'akshelper validate' command.
"""

from __future__ import annotations

import sys

import click

from akshelper.lib.errors import (
    ClusterValidationError,
    ConfigError,
    FileNotFoundError,
    TranslationError,
)
from akshelper.lib.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


@click.command()
@click.argument("cluster_definition", type=click.Path())
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose debug logging")
@click.option("--quiet", "-q", is_flag=True, help="Only print errors")
def validate(cluster_definition: str, verbose: bool, quiet: bool) -> None:
    """Validate a cluster definition file.

    CLUSTER_DEFINITION is the path to an apimodel file (.json, .yaml, .yml).

    Exit codes:

        0  The definition is valid

        2  The definition is invalid or cannot be read

        3  The validation failure could not be translated, or another
           error occurred

    Example:

        akshelper validate kubernetes.json
    """
    setup_logging(verbose=verbose, quiet=quiet)

    from akshelper.config.loader import load_cluster_definition

    try:
        definition = load_cluster_definition(cluster_definition)
    except (ConfigError, FileNotFoundError) as e:
        logger.error(f"Failed to read cluster definition: {e}")
        click.secho("Error: Configuration error", fg="red", err=True)
        click.echo(f"  {e.message}", err=True)
        sys.exit(2)
    except ClusterValidationError as e:
        logger.debug(f"Validation failed for {e.namespace}")
        click.secho("Error: Invalid cluster definition", fg="red", err=True)
        click.echo(f"  {e.message}", err=True)
        sys.exit(2)
    except TranslationError as e:
        logger.error(f"Untranslatable validation failure: {e}")
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(3)
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(3)

    if not quiet:
        pools = len(definition.properties.agent_pool_profiles)
        click.secho("Cluster definition is valid", fg="green")
        click.echo(f"  Agent pools: {pools}")
