"""akshelper - Validate cluster definitions and compose node runtime configs.

akshelper checks cluster definition (apimodel) documents and turns their
validation failures into actionable messages. It also composes the Docker
and containerd configuration files written to nodes at provisioning time.

Main features:
- Load cluster definitions from JSON or YAML
- One precise message per invalid cluster definition
- Docker daemon.json and containerd config.toml composition with overrides
- Cloud-init write_files rendering
"""

from akshelper.config.loader import load_cluster_definition
from akshelper.lib.errors import (
    AksHelperError,
    ClusterValidationError,
    ConfigError,
    TranslationError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "load_cluster_definition",
    "AksHelperError",
    "ClusterValidationError",
    "ConfigError",
    "TranslationError",
]
