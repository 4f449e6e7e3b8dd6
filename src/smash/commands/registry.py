"""Command registry: maps lower-cased command words to handlers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from smash.console import Console
from smash.errors import RegistryFrozenError, UnrecognizedCommandError

logger = logging.getLogger(__name__)

Handler = Callable[[Console, Sequence[str], int], None]


class CommandRegistry:
    """Name to handler map, filled once at startup and then frozen."""

    def __init__(self) -> None:
        self._handlers: dict[str, Handler] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, name: str, handler: Handler) -> None:
        """Register ``handler`` under the lower-cased ``name``."""
        if self._frozen:
            raise RegistryFrozenError(f"cannot register {name!r}: registry is frozen")
        if not name or " " in name:
            raise ValueError(f"invalid command name: {name!r}")
        key = name.lower()
        if key in self._handlers:
            logger.debug("replacing handler for command %s", key)
        self._handlers[key] = handler

    def freeze(self) -> CommandRegistry:
        self._frozen = True
        return self

    def lookup(self, name: str) -> Handler | None:
        """Exact-match lookup; no prefix or alias matching."""
        return self._handlers.get(name)

    def resolve(self, name: str) -> Handler:
        handler = self.lookup(name)
        if handler is None:
            raise UnrecognizedCommandError(name)
        return handler

    def names(self) -> list[str]:
        return sorted(self._handlers)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)
