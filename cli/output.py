"""
Output format selection and rendering for CLI commands.
"""

import json
from typing import Any, Dict, Optional

import yaml

from config.error_handling import FormatResolutionError
from models.core import OutputFormat


class OutputOptions:
    """Holds the raw ``--output`` flag value and its resolved format."""

    def __init__(self, output: Optional[str] = None,
                 default: OutputFormat = OutputFormat.TABLE):
        self.output = output
        self.default = default
        self._resolved: Optional[OutputFormat] = None

    @property
    def resolved(self) -> OutputFormat:
        if self._resolved is None:
            raise FormatResolutionError("output format has not been resolved")
        return self._resolved

    def resolve(self) -> OutputFormat:
        """
        Resolve the raw flag value against the supported formats.

        Returns:
            The resolved OutputFormat

        Raises:
            FormatResolutionError: If the value names no supported format
        """
        value = (self.output or "").strip().lower()
        if not value:
            self._resolved = self.default
            return self._resolved

        try:
            self._resolved = OutputFormat(value)
        except ValueError:
            raise FormatResolutionError(
                f"unsupported output format: {self.output!r}",
                value=self.output,
                choices=OutputFormat.choices()
            )
        return self._resolved

    def is_(self, fmt: OutputFormat) -> bool:
        """Return True when the resolved format is ``fmt``."""
        return self.resolved is fmt


def render_json(data: Dict[str, Any]) -> str:
    """Serialize ``data`` as 2-space indented JSON with a trailing newline."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def render_yaml(data: Dict[str, Any]) -> str:
    return yaml.safe_dump(data, sort_keys=False, default_flow_style=False, allow_unicode=True)


def render_fetch_table(data: Dict[str, Any]) -> str:
    """
    Render a fetch result as the human-readable summary.

    The URL and playlist lines are only included for sources that were given.
    """
    lines = [
        f"blog fetch (stub) -> out_dir={data['out_dir']} analyze={format_bool(data['analyze'])}"
    ]
    if data.get('url'):
        lines.append(f"  URL: {data['url']}")
    if data.get('playlist'):
        lines.append(f"  Playlist: {data['playlist']}")
    return "\n".join(lines) + "\n"


def format_bool(value: bool) -> str:
    return "true" if value else "false"
