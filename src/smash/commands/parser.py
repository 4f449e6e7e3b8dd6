"""Input line tokenizer.

A line is split on single spaces into at most ``max_params`` parameters.
Parameter 0 is the command word and is lower-cased; the rest keep their case.
Runs of spaces never produce empty parameters. Parameters past ``max_params``
are dropped silently, while a parameter longer than ``max_param_length``
invalidates the whole line.
"""

from __future__ import annotations

from dataclasses import dataclass

from smash.errors import ParseOverflowError

MAX_PARAMS = 4
MAX_PARAM_LENGTH = 100

# count of a line that was abandoned because a parameter was too long
OVERFLOW = -1


@dataclass(frozen=True)
class ParseResult:
    params: tuple[str, ...]
    count: int
    error: ParseOverflowError | None = None

    @property
    def command(self) -> str:
        return self.params[0] if self.params else ""

    @property
    def args(self) -> tuple[str, ...]:
        if self.count <= 1:
            return ()
        return self.params[1 : self.count]

    @property
    def is_empty(self) -> bool:
        return self.count == 0

    @property
    def overflowed(self) -> bool:
        return self.count == OVERFLOW


def _padded(tokens: list[str], slots: int) -> tuple[str, ...]:
    return tuple(tokens) + ("",) * (slots - len(tokens))


def tokenize(
    line: str,
    *,
    max_params: int = MAX_PARAMS,
    max_param_length: int = MAX_PARAM_LENGTH,
) -> list[str]:
    """Split one input line into parameters.

    Scanning stops at the first newline. Raises ParseOverflowError when a
    parameter would grow past ``max_param_length`` characters.
    """
    tokens: list[str] = []
    current: list[str] = []
    length = 0
    for char in line:
        if char == "\n":
            break
        if char == " ":
            if not current:
                continue
            tokens.append("".join(current))
            current = []
            length = 0
            if len(tokens) >= max_params:
                return tokens
            continue
        if not tokens:
            char = char.lower()
        current.append(char)
        # lower() may expand one character into several
        length += len(char)
        if length > max_param_length:
            raise ParseOverflowError(len(tokens), max_param_length)

    if current:
        tokens.append("".join(current))
    return tokens


def parse(
    line: str,
    *,
    max_params: int = MAX_PARAMS,
    max_param_length: int = MAX_PARAM_LENGTH,
) -> ParseResult:
    """Tokenize ``line`` into a fresh, fully padded ParseResult.

    ``count`` is 0 for a blank line, the number of parameters on success, or
    OVERFLOW with every slot cleared when a parameter is too long.
    """
    try:
        tokens = tokenize(line, max_params=max_params, max_param_length=max_param_length)
    except ParseOverflowError as exc:
        return ParseResult(params=_padded([], max_params), count=OVERFLOW, error=exc)
    return ParseResult(params=_padded(tokens, max_params), count=len(tokens))
