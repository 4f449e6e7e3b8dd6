"""smash exception hierarchy.

All smash-specific exceptions inherit from SmashError. None of them is fatal:
the dispatch loop renders them to the user and prompts again.
"""


class SmashError(Exception):
    """Base exception for all smash errors."""

    def __init__(self, message: str = "", *, hint: str = "") -> None:
        super().__init__(message)
        self.hint = hint

    def render(self) -> str:
        message = str(self)
        if not self.hint:
            return message
        return f"{message}\n{self.hint}"


class ParseOverflowError(SmashError):
    """A parameter on the input line exceeded the length limit."""

    def __init__(self, index: int, limit: int) -> None:
        super().__init__(f"Parameter {index} exceeds maximum allowed characters: {limit}.")
        self.index = index
        self.limit = limit


class ArityError(SmashError):
    """A command received the wrong number of arguments."""

    def __init__(self, message: str, *, usage: str) -> None:
        super().__init__(message, hint=f"Usage: {usage}")
        self.usage = usage


class ResourceError(SmashError):
    """A file, directory or child process could not be used."""


class UnrecognizedCommandError(SmashError):
    """No handler is registered for the command word."""

    def __init__(self, command: str) -> None:
        super().__init__(
            f'Unrecognized command: "{command}".',
            hint='Type "help" to view a list of valid commands.',
        )
        self.command = command


class RegistryFrozenError(SmashError):
    """The command registry no longer accepts registrations."""


class ConfigError(SmashError):
    """Invalid configuration."""
