"""Path-data grammar parser.

Turns an SVG ``d`` string into a flat list of PathCommand objects with every
coordinate resolved to absolute space, and splits that list into subpaths that
can be replayed on their own.

A small character scanner is used instead of regex segmenting so malformed
input is reported at the offending offset rather than silently skipped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from svgraphics.engine.errors import MalformedPathError

logger = logging.getLogger(__name__)

# Fixed argument count per command (lower-case key)
ARITY: dict[str, int] = {"m": 2, "l": 2, "h": 1, "v": 1, "c": 6, "s": 4, "q": 4, "t": 2, "a": 7, "z": 0}

_COMMAND_LETTERS = frozenset("MLHVCSQTAZmlhvcsqtaz")
_SEPARATORS = frozenset(" \t\r\n\f,")

# Which axis each argument of a relative command is offset along.
# None = not a coordinate (arc radii, rotation, flags).
_RELATIVE_AXES: dict[str, tuple[int | None, ...]] = {
    "m": (0, 1),
    "l": (0, 1),
    "h": (0,),
    "v": (1,),
    "c": (0, 1, 0, 1, 0, 1),
    "s": (0, 1, 0, 1),
    "q": (0, 1, 0, 1),
    "t": (0, 1),
    "a": (None, None, None, None, None, 0, 1),
}

# Argument index feeding the new current point (x, y)
_END_POINT: dict[str, tuple[int | None, int | None]] = {
    "m": (0, 1),
    "l": (0, 1),
    "h": (0, None),
    "v": (None, 0),
    "c": (4, 5),
    "s": (2, 3),
    "q": (2, 3),
    "t": (0, 1),
    "a": (5, 6),
}


def format_number(value: float) -> str:
    """Shortest text that parses back to the same float."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


@dataclass(frozen=True)
class PathCommand:
    """One drawing command. ``letter`` case encodes relative (lower) vs absolute (upper)."""

    letter: str
    args: tuple[float, ...] = ()
    absolute_args: tuple[float, ...] = ()

    @property
    def kind(self) -> str:
        return self.letter.lower()

    @property
    def is_relative(self) -> bool:
        return self.letter.islower()

    def default_form(self) -> str:
        return self.letter + " ".join(format_number(a) for a in self.args)

    def global_form(self) -> str:
        return self.letter.upper() + " ".join(format_number(a) for a in self.absolute_args)

    def to_absolute(self) -> PathCommand:
        upper = self.letter.upper()
        return PathCommand(upper, self.absolute_args, self.absolute_args)


@dataclass(frozen=True)
class Subpath:
    """A run of commands starting with an absolute moveTo."""

    commands: tuple[PathCommand, ...]

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def to_path_data(self) -> str:
        parts = [self.commands[0].global_form()]
        parts.extend(cmd.default_form() for cmd in self.commands[1:])
        return " ".join(parts)


class _Cursor:
    """Running current point and subpath start used for absolute resolution."""

    def __init__(self) -> None:
        self.point = [0.0, 0.0]
        self.start = [0.0, 0.0]

    def resolve(self, letter: str, args: tuple[float, ...]) -> PathCommand:
        kind = letter.lower()

        if kind == "z":
            self.point = list(self.start)
            return PathCommand(letter, (), ())

        if letter.islower():
            axes = _RELATIVE_AXES[kind]
            absolute = tuple(
                value if axis is None else self.point[axis] + value
                for value, axis in zip(args, axes)
            )
        else:
            absolute = args

        x_index, y_index = _END_POINT[kind]
        if x_index is not None:
            self.point[0] = absolute[x_index]
        if y_index is not None:
            self.point[1] = absolute[y_index]

        if kind == "m":
            self.start = [absolute[0], absolute[1]]

        return PathCommand(letter, args, absolute)


def _scan_number(text: str, start: int) -> int:
    """Return the end offset of the float literal starting at ``start``."""
    n = len(text)
    i = start
    if i < n and text[i] in "+-":
        i += 1
    digits = 0
    while i < n and text[i].isdigit():
        i += 1
        digits += 1
    if i < n and text[i] == ".":
        i += 1
        while i < n and text[i].isdigit():
            i += 1
            digits += 1
    if digits == 0:
        raise MalformedPathError(f"malformed number at offset {start}: {text[start:start + 8]!r}")
    if i < n and text[i] in "eE":
        j = i + 1
        if j < n and text[j] in "+-":
            j += 1
        if j < n and text[j].isdigit():
            i = j
            while i < n and text[i].isdigit():
                i += 1
    return i


def tokenize(text: str) -> list[tuple[str, list[float]]]:
    """Split path data into (command letter, numeric run) segments."""
    segments: list[tuple[str, list[float]]] = []
    values: list[float] | None = None
    kind = ""
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        if ch in _SEPARATORS:
            i += 1
        elif ch in _COMMAND_LETTERS:
            values = []
            kind = ch.lower()
            segments.append((ch, values))
            i += 1
        elif ch.isdigit() or ch in "+-.":
            if values is None:
                raise MalformedPathError(f"number before first command at offset {i}")
            # Arc flags may be packed without separators ("a1 1 0 015 5")
            if kind == "a" and len(values) % 7 in (3, 4) and ch in "01":
                values.append(float(ch))
                i += 1
                continue
            end = _scan_number(text, i)
            values.append(float(text[i:end]))
            i = end
        else:
            raise MalformedPathError(f"unexpected character {ch!r} at offset {i}")

    return segments


def parse_path_data(text: str) -> list[PathCommand]:
    """Parse path data into absolute-resolved commands.

    Raises MalformedPathError when a numeric run does not fill a whole number of
    argument groups for its command.
    """
    cursor = _Cursor()
    commands: list[PathCommand] = []

    for letter, values in tokenize(text):
        kind = letter.lower()
        arity = ARITY[kind]

        if arity == 0:
            if values:
                raise MalformedPathError(f"{letter!r} takes no arguments, got {len(values)}")
            commands.append(cursor.resolve(letter, ()))
            continue

        if not values or len(values) % arity:
            raise MalformedPathError(
                f"{letter!r} expects a multiple of {arity} numbers, got {len(values)}"
            )

        for offset in range(0, len(values), arity):
            chunk_letter = letter
            # Extra coordinate pairs after a moveTo are implicit lineTos
            if kind == "m" and offset:
                chunk_letter = "l" if letter == "m" else "L"
            commands.append(cursor.resolve(chunk_letter, tuple(values[offset:offset + arity])))

    logger.debug("Parsed path data: %d commands", len(commands))
    return commands


def serialize_absolute(commands: list[PathCommand]) -> str:
    """Render commands in absolute form; re-parsing gives the same coordinates."""
    return " ".join(cmd.global_form() for cmd in commands)


def split_subpaths(commands: list[PathCommand]) -> list[Subpath]:
    """Split at every moveTo. The moveTo opening each subpath is made absolute."""
    subpaths: list[Subpath] = []
    current: list[PathCommand] = []

    for cmd in commands:
        if cmd.kind == "m":
            if current:
                subpaths.append(Subpath(tuple(current)))
            current = [cmd.to_absolute()]
            continue
        if not current:
            raise MalformedPathError(f"path data must begin with a moveTo, got {cmd.letter!r}")
        current.append(cmd)

    if current:
        subpaths.append(Subpath(tuple(current)))

    return subpaths
