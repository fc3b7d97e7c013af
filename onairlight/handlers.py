"""Registries that fan configuration and status out to named sections."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class ConfigHandler(Protocol):
    """Something that can store and load its configuration in a JSON object."""

    def write_config_to(self, node: dict[str, Any], hide_critical: bool) -> None: ...

    def read_config_from(self, node: dict[str, Any]) -> None: ...


class StatusHandler(Protocol):
    """Something that can report its status into a JSON object."""

    def write_status_to(self, node: dict[str, Any]) -> None: ...


def _section(node: dict[str, Any], name: str) -> dict[str, Any]:
    sub = node.get(name)
    if not isinstance(sub, dict):
        sub = {}
        node[name] = sub
    return sub


@dataclass
class _Entry:
    name: str
    handler: Any


class ConfigRegistry:
    """Config handlers, each writing and reading its own named section."""

    def __init__(self) -> None:
        self._entries: list[_Entry] = []

    def add(self, name: str, handler: ConfigHandler) -> None:
        """Register ``handler`` for the section ``name``."""
        if name and handler is not None:
            self._entries.append(_Entry(name, handler))

    def get(self, name: str) -> ConfigHandler | None:
        """Return the handler last registered for ``name``, or None."""
        found = None
        for entry in self._entries:
            if entry.name == name:
                found = entry.handler
        return found

    def write_config_to(self, node: dict[str, Any], hide_critical: bool = False) -> None:
        """Let every handler write into its section, creating it if needed."""
        for entry in self._entries:
            entry.handler.write_config_to(_section(node, entry.name), hide_critical)

    def read_config_from(self, node: dict[str, Any]) -> None:
        """Pass each present section to its handler; warn about missing ones."""
        for entry in self._entries:
            sub = node.get(entry.name)
            if isinstance(sub, dict):
                entry.handler.read_config_from(sub)
            else:
                logger.warning("missing entry [%s] in config node", entry.name)


class StatusRegistry:
    """Status handlers, each writing its own named section."""

    def __init__(self) -> None:
        self._entries: list[_Entry] = []

    def add(self, name: str, handler: StatusHandler) -> None:
        """Register ``handler`` under ``name`` unless that name is taken."""
        if self.get(name) is None:
            self._entries.append(_Entry(name, handler))

    def get(self, name: str) -> StatusHandler | None:
        """Return the handler registered under ``name``, or None."""
        found = None
        for entry in self._entries:
            if entry.name == name:
                found = entry.handler
        return found

    def write_status_to(self, node: dict[str, Any]) -> None:
        """Let every handler write into its section, creating it if needed."""
        for entry in self._entries:
            sub = _section(node, entry.name)
            if entry.handler is not None:
                entry.handler.write_status_to(sub)