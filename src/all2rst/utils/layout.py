#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2rst/utils/layout.py
"""Line layout primitives for the reStructuredText writer.

Rendering happens in two layers. Inline content is turned into a flat stream
of tokens which :func:`wrap` fills into lines. Block content is a list of
lines in which the :data:`BLANK` sentinel requests a blank line; consecutive
requests collapse into one when the block is finally rendered.

Inline tokens
-------------
str
    Atomic fragment. Adjacent fragments glue into a single word and are
    never split across lines.
SPACE
    Breakable space. Runs of spaces collapse.
NEWLINE
    Forced line break (a no-op at the start of a line).
BLANK
    Forced blank line.
Lines
    Pre-laid-out block embedded in the inline flow, such as display math.

"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Union


class _Sentinel:
    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name


SPACE = _Sentinel("SPACE")
NEWLINE = _Sentinel("NEWLINE")
BLANK = _Sentinel("BLANK")


@dataclass(frozen=True)
class Lines:
    """Block of already laid-out lines carried inside inline content."""

    lines: tuple[Union[str, _Sentinel], ...]


Line = Union[str, _Sentinel]
Block = list[Line]
Token = Union[str, _Sentinel, Lines]


def char_width(char: str) -> int:
    """Display width of a single character."""
    if unicodedata.combining(char):
        return 0
    if unicodedata.east_asian_width(char) in ("W", "F"):
        return 2
    return 1


def measure_width(text: str) -> int:
    """Display width of a string, counting wide East Asian characters twice.

    Examples
    --------
        >>> measure_width("abc")
        3
        >>> measure_width("日本")
        4

    """
    if text.isascii():
        return len(text)
    return sum(char_width(c) for c in text)


def _words(tokens: Iterable[Token]) -> list[Token]:
    """Glue adjacent fragments into words.

    A space following a fragment that ends in whitespace is kept inside the
    word, so such a fragment never ends a line.
    """
    items: list[Token] = []
    parts: list[str] = []
    for tok in tokens:
        if isinstance(tok, str):
            if tok:
                parts.append(tok)
        elif tok is SPACE and parts and parts[-1][-1:].isspace():
            parts.append(" ")
        else:
            if parts:
                items.append("".join(parts))
                parts = []
            items.append(tok)
    if parts:
        items.append("".join(parts))
    return items


def wrap(tokens: Iterable[Token], width: Optional[int]) -> Block:
    """Fill inline tokens into lines.

    Parameters
    ----------
    tokens : iterable of Token
        Inline token stream
    width : int or None
        Maximum line width, or None to break only at explicit breaks

    Returns
    -------
    Block
        Lines (trailing whitespace removed) and BLANK requests

    Examples
    --------
        >>> wrap(["a", SPACE, "b", SPACE, "c"], 3)
        ['a b', 'c']

    """
    block: Block = []
    line = ""
    line_width = 0
    space_pending = False

    def flush() -> None:
        nonlocal line, line_width
        if line:
            block.append(line.rstrip())
        line = ""
        line_width = 0

    for item in _words(tokens):
        if isinstance(item, str):
            if not line:
                line = item.lstrip()
                line_width = measure_width(line)
            else:
                item_width = measure_width(item)
                if not space_pending:
                    line += item
                    line_width += item_width
                elif width is None or line_width + 1 + item_width <= width:
                    line += " " + item
                    line_width += 1 + item_width
                else:
                    flush()
                    line = item.lstrip()
                    line_width = measure_width(line)
            space_pending = False
        elif item is SPACE:
            space_pending = bool(line)
        elif item is NEWLINE:
            flush()
            space_pending = False
        elif item is BLANK:
            flush()
            block.append(BLANK)
            space_pending = False
        elif isinstance(item, Lines):
            flush()
            block.extend(item.lines)
            space_pending = False
    flush()
    return block


def strip_blanks(block: Sequence[Line]) -> Block:
    """Remove leading and trailing BLANK requests."""
    start, end = 0, len(block)
    while start < end and block[start] is BLANK:
        start += 1
    while end > start and block[end - 1] is BLANK:
        end -= 1
    return list(block[start:end])


def is_empty(block: Sequence[Line]) -> bool:
    """Whether a block renders to nothing."""
    return all(line is BLANK or line == "" for line in block)


def vcat(blocks: Iterable[Sequence[Line]]) -> Block:
    """Stack blocks directly on top of each other."""
    result: Block = []
    for block in blocks:
        result.extend(block)
    return result


def vsep(blocks: Iterable[Sequence[Line]]) -> Block:
    """Stack non-empty blocks with a blank line between each pair."""
    result: Block = []
    for block in blocks:
        if is_empty(block):
            continue
        if result:
            result.append(BLANK)
        result.extend(block)
    return result


def nest(block: Sequence[Line], indent: int) -> Block:
    """Indent every non-empty line by ``indent`` spaces."""
    pad = " " * indent
    return [pad + line if isinstance(line, str) and line else line for line in block]


def hang(block: Sequence[Line], indent: int, prefix: str) -> Block:
    """Put ``prefix`` in front of the first line and indent the rest.

    Examples
    --------
        >>> hang(["one", "two"], 2, "- ")
        ['- one', '  two']

    """
    lines = strip_blanks(block)
    if not lines:
        return [prefix.rstrip()]
    first = lines[0]
    head = (prefix + first) if first else prefix.rstrip()
    return [head] + nest(lines[1:], indent)


def prefixed(block: Sequence[Line], prefix: str) -> Block:
    """Put ``prefix`` in front of every line, including empty ones."""
    return [(prefix + line).rstrip() if isinstance(line, str) else line for line in block]


def block_width(block: Sequence[Line]) -> int:
    """Width of the widest line of a block."""
    return max((measure_width(line) for line in block if isinstance(line, str)), default=0)


def text_lines(block: Sequence[Line]) -> list[str]:
    """The lines of a block with blank requests dropped."""
    return [line for line in block if isinstance(line, str)]


def render_block(block: Sequence[Line]) -> str:
    """Render a block to text.

    BLANK requests collapse with each other and with empty lines, and are
    dropped at the start and end of the block.
    """
    out: list[str] = []
    pending_blank = False
    for line in block:
        if line is BLANK:
            pending_blank = bool(out)
            continue
        if pending_blank and out[-1] != "":
            out.append("")
        pending_blank = False
        out.append(line)  # type: ignore[arg-type]
    while out and out[-1] == "":
        out.pop()
    return "\n".join(out)


def pad_right(text: str, width: int) -> str:
    """Pad ``text`` with spaces to the display ``width``."""
    return text + " " * max(0, width - measure_width(text))
