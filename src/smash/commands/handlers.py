"""Built-in command handlers."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

from smash.commands.registry import CommandRegistry
from smash.console import Console
from smash.errors import ArityError, ResourceError

logger = logging.getLogger(__name__)

PROGRAM_VERSION = "1.0"

_HELP_TEXT = (
    "\tWelcome to smash v{version}!\n"
    "\n"
    "\tThe following is a list of valid commands:\n"
    "\n"
    "\trun <executable-file>\n"
    "\tlist\n"
    "\tlist <directory>\n"
    "\tcopy <old-filename> <new-filename>\n"
    "\thelp\n"
    "\tquit\n"
    "\n"
    "\tNote: All commands are case insensitive (arguments are not)."
)


def help_command(console: Console, params: Sequence[str], count: int) -> None:
    del params, count
    console.echo(_HELP_TEXT.format(version=PROGRAM_VERSION))


def quit_command(console: Console, params: Sequence[str], count: int) -> None:
    del params, count
    console.echo("Thanks for choosing smash!")
    sys.exit(0)


def _cannot_continue(message: str) -> ResourceError:
    return ResourceError(message, hint="Cannot continue requested operation.")


def copy_command(console: Console, params: Sequence[str], count: int) -> None:
    if count != 3:
        raise ArityError(
            "Invalid number of arguments.", usage="copy <old-filename> <new-filename>"
        )
    source, destination = params[1], params[2]
    # copying a file onto itself would truncate it before it is read
    if source == destination:
        raise ResourceError("Cannot copy same file!")

    try:
        src = open(source, "rb")
    except OSError as exc:
        logger.info("copy source %s unavailable: %s", source, exc)
        raise _cannot_continue(
            f'File "{source}" doesn\'t exist or has invalid permissions.'
        ) from exc

    with src:
        if os.path.exists(destination):
            # different spellings of one path, e.g. "a" and "./a"
            if os.path.samefile(source, destination):
                raise ResourceError("Cannot copy same file!")
            console.echo(f'File "{destination}" already exists.')
            console.echo("If you continue, this file will be overwritten.")
            if not console.confirm("Do you wish to continue"):
                console.echo("Operation aborted.")
                return
        try:
            dst = open(destination, "wb")
        except OSError as exc:
            logger.info("copy destination %s unwritable: %s", destination, exc)
            raise _cannot_continue(
                f'Unknown error creating output file "{destination}".'
            ) from exc
        try:
            # closing flushes buffered bytes, so write errors can surface there too
            with dst:
                shutil.copyfileobj(src, dst)
        except OSError as exc:
            logger.info("copy %s to %s failed: %s", source, destination, exc)
            raise _cannot_continue(
                f'Error copying "{source}" to "{destination}": {exc.strerror or exc}'
            ) from exc
    logger.info("copied %s to %s", source, destination)


def list_command(console: Console, params: Sequence[str], count: int) -> None:
    if count > 2:
        raise ArityError("Too many arguments.", usage="list [<directory>]")
    target = params[1] if count == 2 else "./"
    try:
        with os.scandir(target) as entries:
            names = sorted(entry.name for entry in entries)
    except OSError as exc:
        logger.info("cannot list %s: %s", target, exc)
        raise ResourceError("Unable to open the directory.") from exc

    for name in [".", "..", *names]:
        console.echo(name)


def _executable_path(path: str) -> str:
    # Popen searches PATH for bare names; a bare name here means the current directory
    if not os.path.dirname(path):
        return os.path.join(os.curdir, path)
    return path


def run_command(console: Console, params: Sequence[str], count: int) -> None:
    del console
    if count != 2:
        raise ArityError("Invalid number of arguments.", usage="run <executable-file>")
    path = params[1]
    if not Path(path).exists():
        raise ResourceError(f'Unable to find executable file "{path}".')

    try:
        proc = subprocess.Popen([""], executable=_executable_path(path))
    except OSError as exc:
        logger.info("cannot start %s: %s", path, exc)
        raise ResourceError(f'Failed to start "{path}": {exc.strerror or exc}') from exc
    returncode = proc.wait()
    logger.debug("child %s exited with status %s", path, returncode)


def build_default_registry() -> CommandRegistry:
    registry = CommandRegistry()
    registry.register("help", help_command)
    registry.register("quit", quit_command)
    registry.register("copy", copy_command)
    registry.register("list", list_command)
    registry.register("run", run_command)
    return registry.freeze()
