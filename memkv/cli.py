"""Interactive command line for the key-value store."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import TextIO

from memkv.store import KVStore

BANNER = "Custom In-Memory Key-Value Store CLI"
USAGE = "Commands: SET <key> <value>, GET <key>, DEL <key>, PREFIX <prefix>, BLOOM <key>, EXIT"
PROMPT = "> "
ERROR = (
    "ERR: Unknown command or incorrect arguments. "
    "Available: SET, GET, DEL, PREFIX, BLOOM, EXIT"
)


def _tokens(line: str) -> list[str]:
    """Split on single spaces; a trailing empty token is dropped."""
    parts = line.split(" ")
    if parts[-1] == "":
        parts.pop()
    return parts


def execute(store: KVStore, line: str) -> list[str]:
    """Run one command line against ``store`` and return the output lines."""
    args = _tokens(line)
    if not args:
        return []
    command = args[0]
    if command == "SET" and len(args) == 3:
        store.set(args[1], args[2])
        return ["OK"]
    if command == "GET" and len(args) == 2:
        value = store.get(args[1])
        if value or store.might_contain(args[1]):
            return [f'"{value}"']
        return ["(nil)"]
    if command == "DEL" and len(args) == 2:
        if store.remove(args[1]):
            return ["OK (deleted)"]
        return ["OK (key not found)"]
    if command == "PREFIX" and len(args) == 2:
        keys = store.prefix_search(args[1])
        if not keys:
            return ["(no keys found with this prefix)"]
        return [f"{number}) {key}" for number, key in enumerate(keys, start=1)]
    if command == "BLOOM" and len(args) == 2:
        if store.might_contain(args[1]):
            return [f'Key "{args[1]}" MIGHT be present (check GET for confirmation).']
        return [f'Key "{args[1]}" is DEFINITELY NOT present.']
    if command == "EXIT":
        return ["Exiting store."]
    return [ERROR]


def repl(store: KVStore, lines: Iterable[str], out: TextIO) -> None:
    """Read commands from ``lines`` and write responses to ``out`` until EXIT or end of input."""
    out.write(f"{BANNER}\n{USAGE}\n")
    for raw in lines:
        out.write(PROMPT)
        line = raw.rstrip("\n")
        for response in execute(store, line):
            out.write(f"{response}\n")
        if _tokens(line)[:1] == ["EXIT"]:
            return
    out.write(PROMPT)


def main(argv: list[str] | None = None) -> int:
    """Start an interactive session on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="memkv", description="In-memory key-value store shell."
    )
    parser.parse_args(argv)
    repl(KVStore(), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())