"""Command dispatch loop."""

from __future__ import annotations

import logging

from smash.commands.parser import MAX_PARAM_LENGTH, MAX_PARAMS, ParseResult, parse
from smash.commands.registry import CommandRegistry
from smash.console import Console
from smash.errors import SmashError
from smash.logging import bind_context, clear_context

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "user@smash $ "


class Shell:
    """Prompt, tokenize, dispatch, repeat.

    Only the quit handler ends the process. End of input also stops the
    loop so that piped sessions terminate.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        console: Console,
        *,
        prompt: str = DEFAULT_PROMPT,
        max_params: int = MAX_PARAMS,
        max_param_length: int = MAX_PARAM_LENGTH,
    ) -> None:
        self._registry = registry
        self._console = console
        self._prompt = prompt
        self._max_params = max_params
        self._max_param_length = max_param_length

    def parse(self, line: str) -> ParseResult:
        return parse(line, max_params=self._max_params, max_param_length=self._max_param_length)

    def dispatch(self, result: ParseResult) -> None:
        if result.overflowed:
            if result.error is not None:
                self._console.echo(result.error.render())
            return
        if result.is_empty:
            return

        bind_context(command=result.command, argc=result.count)
        try:
            handler = self._registry.resolve(result.command)
            logger.debug("dispatching %s with %d params", result.command, result.count)
            handler(self._console, result.params, result.count)
        except SmashError as exc:
            logger.info("command failed: %s", exc)
            self._console.echo(exc.render())
        finally:
            clear_context()

    def execute_line(self, line: str) -> ParseResult:
        """Parse and dispatch one line without prompting."""
        result = self.parse(line)
        self.dispatch(result)
        return result

    def run(self) -> None:
        while True:
            self._console.echo(self._prompt, nl=False)
            line = self._console.read_line()
            if not line:
                self._console.echo()
                logger.info("end of input, leaving shell")
                return
            self.execute_line(line)
