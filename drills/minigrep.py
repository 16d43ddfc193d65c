"""Print the lines of a file that contain a query string."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass


class ConfigError(ValueError):
    """Raised when the command-line arguments are incomplete."""


@dataclass(frozen=True)
class Config:
    """What to search for, where, and whether case matters."""

    query: str
    file_path: str
    ignore_case: bool = False

    @classmethod
    def from_args(
        cls,
        args: Iterable[str],
        environ: Mapping[str, str] | None = None,
    ) -> Config:
        """Build a config from argv-style arguments (program name first).

        Case is ignored when IGNORE_CASE is set in the environment.
        """
        remaining = iter(args)
        next(remaining, None)

        query = next(remaining, None)
        if query is None:
            raise ConfigError("Didn't get a query string")

        file_path = next(remaining, None)
        if file_path is None:
            raise ConfigError("Didn't get a file path")

        env = os.environ if environ is None else environ
        return cls(query=query, file_path=file_path, ignore_case="IGNORE_CASE" in env)


def _lines(contents: str) -> Iterator[str]:
    """Split on newlines, dropping a trailing empty line and a line-ending CR."""
    if not contents:
        return
    parts = contents.split("\n")
    if parts[-1] == "":
        parts.pop()
    for part in parts:
        yield part[:-1] if part.endswith("\r") else part


def search(query: str, contents: str) -> list[str]:
    """Return the lines of ``contents`` that contain ``query``."""
    return [line for line in _lines(contents) if query in line]


def search_case_insensitive(query: str, contents: str) -> list[str]:
    """Return the lines of ``contents`` that contain ``query``, ignoring case."""
    needle = query.lower()
    return [line for line in _lines(contents) if needle in line.lower()]


def run(config: Config) -> None:
    """Read the configured file and print every matching line."""
    with open(config.file_path, encoding="utf-8") as handle:
        contents = handle.read()

    finder = search_case_insensitive if config.ignore_case else search
    for line in finder(config.query, contents):
        print(line)


def main(argv: list[str] | None = None) -> int:
    """Command entry point; ``argv`` excludes the program name."""
    arguments = sys.argv[1:] if argv is None else argv
    try:
        config = Config.from_args(["minigrep", *arguments])
    except ConfigError as err:
        print(f"Problem parsing arguments: {err}", file=sys.stderr)
        return 1

    print(f"Searching for {config.query}")
    print(f"In file {config.file_path}")

    try:
        run(config)
    except (OSError, UnicodeDecodeError) as err:
        print(f"Application error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())