"""Cloud-init rendering for container runtime configuration.

Generated configuration files are delivered to nodes through a cloud-init
``write_files`` section, with each file's content embedded as a YAML block
scalar.
"""

from __future__ import annotations

from dataclasses import dataclass

from jinja2 import Template

from akshelper.lib.helpers import indent_string

DOCKER_DAEMON_JSON_PATH = "/etc/docker/daemon.json"
CONTAINERD_CONFIG_PATH = "/etc/containerd/config.toml"

DEFAULT_PERMISSIONS = "0644"
CONTENT_INDENT = 6

# Jinja2 template for the write_files section
WRITE_FILES_TEMPLATE = """\
write_files:
{% for entry in entries %}
  - path: {{ entry.path }}
    permissions: "{{ entry.permissions }}"
    owner: {{ entry.owner }}
    content: |
{{ entry.indented_content }}{% endfor %}"""


@dataclass(frozen=True)
class WriteFile:
    """A file written to the node at provisioning time."""

    path: str
    content: str
    permissions: str = DEFAULT_PERMISSIONS
    owner: str = "root"

    @property
    def indented_content(self) -> str:
        return indent_string(self.content, CONTENT_INDENT)


def render_write_files(entries: list[WriteFile]) -> str:
    """Render a cloud-init ``write_files`` section.

    Args:
        entries: Files to write, in order

    Returns:
        The YAML fragment, ending with a newline

    Example:
        >>> fragment = render_write_files(
        ...     [WriteFile(DOCKER_DAEMON_JSON_PATH, get_docker_config())]
        ... )
        >>> fragment.splitlines()[1]
        '  - path: /etc/docker/daemon.json'
    """
    template = Template(WRITE_FILES_TEMPLATE, trim_blocks=True)
    return template.render(entries=entries)
