#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2rst/utils/validation.py
"""Check rendered reStructuredText with docutils."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from docutils import nodes as docutils_nodes
from docutils.core import publish_doctree

logger = logging.getLogger(__name__)

_LEVEL_NAMES = {0: "DEBUG", 1: "INFO", 2: "WARNING", 3: "ERROR", 4: "SEVERE"}


@dataclass(frozen=True)
class RstProblem:
    """A message reported by docutils while parsing output."""

    level: int
    line: int | None
    message: str

    @property
    def level_name(self) -> str:
        return _LEVEL_NAMES.get(self.level, str(self.level))

    def __str__(self) -> str:
        where = f"line {self.line}: " if self.line is not None else ""
        return f"{self.level_name}: {where}{self.message}"


def validate_rst(text: str, min_level: int = 2) -> list[RstProblem]:
    """Parse ``text`` with docutils and collect its system messages.

    Parameters
    ----------
    text : str
        reStructuredText source
    min_level : int, default 2
        Lowest docutils message level to report (2 is WARNING)

    Returns
    -------
    list of RstProblem
        Problems in document order; empty when the text parses cleanly

    """
    # messages below report_level are filtered out of the doctree
    settings_overrides = {
        "report_level": min_level,
        "halt_level": 5,
        "warning_stream": False,
        "file_insertion_enabled": False,
        "raw_enabled": True,
    }
    doctree = publish_doctree(text, settings_overrides=settings_overrides)

    problems = []
    for message in doctree.findall(docutils_nodes.system_message):
        level = int(message.get("level", 0))
        if level < min_level:
            continue
        text_parts = [child.astext() for child in message.children if isinstance(child, docutils_nodes.paragraph)]
        description = " ".join(text_parts) or message.astext()
        problems.append(RstProblem(level=level, line=message.get("line"), message=description))
    logger.debug(f"docutils reported {len(problems)} problem(s)")
    return problems
