"""Pytest configuration and shared fixtures for akshelper tests."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def cluster_definition() -> dict[str, Any]:
    """Return a minimal valid cluster definition document.

    A fresh dictionary is built for every test, so tests may mutate it.
    """
    return {
        "apiVersion": "vlabs",
        "location": "westus2",
        "properties": {
            "orchestratorProfile": {"orchestratorType": "Kubernetes"},
            "masterProfile": {
                "count": 1,
                "dnsPrefix": "mycluster",
                "vmSize": "Standard_D2_v3",
            },
            "agentPoolProfiles": [
                {
                    "name": "agentpool1",
                    "count": 3,
                    "vmSize": "Standard_D2_v3",
                }
            ],
            "linuxProfile": {
                "adminUsername": "azureuser",
                "ssh": {"publicKeys": [{"keyData": "ssh-rsa AAAAB3Nza"}]},
            },
            "servicePrincipalProfile": {
                "clientId": "00000000-0000-0000-0000-000000000000",
                "secret": "s3cret",
            },
        },
    }


@pytest.fixture
def write_cluster_file(tmp_path: Path) -> Callable[[dict[str, Any], str], Path]:
    """Return a helper writing a cluster definition to a temporary file.

    The helper takes the document and a file name; ``.json`` names are
    written as JSON, anything else as YAML.
    """
    import yaml

    def _write(document: dict[str, Any], name: str = "kubernetes.json") -> Path:
        path = tmp_path / name
        if name.endswith(".json"):
            path.write_text(json.dumps(document, indent=2))
        else:
            path.write_text(yaml.safe_dump(document))
        return path

    return _write
