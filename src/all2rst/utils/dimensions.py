#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2rst/utils/dimensions.py
"""Image dimension parsing for ``width`` and ``height`` attributes."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping, Optional

from all2rst.constants import DIMENSION_UNITS

_DIMENSION_RE = re.compile(r"^\s*(\d+(?:\.\d*)?|\.\d+)\s*([a-z%]*)\s*$", re.IGNORECASE)


@dataclass(frozen=True)
class Dimension:
    """A length with its unit.

    Parameters
    ----------
    amount : float
        Numeric value
    unit : str
        One of ``px``, ``cm``, ``mm``, ``in``, ``em`` or ``%``

    """

    amount: float
    unit: str

    @property
    def is_percent(self) -> bool:
        return self.unit == "%"

    def __str__(self) -> str:
        if self.unit == "px":
            return f"{round(self.amount)}px"
        if self.amount == int(self.amount):
            return f"{int(self.amount)}{self.unit}"
        return f"{self.amount:g}{self.unit}"


def parse_dimension(value: str) -> Optional[Dimension]:
    """Parse a dimension attribute value.

    A bare number is read as pixels. Values with an unknown unit or that are
    not numbers at all are ignored.

    Parameters
    ----------
    value : str
        Attribute value such as ``"50%"``, ``"3in"`` or ``"120"``

    Returns
    -------
    Dimension or None
        Parsed dimension, or None if the value is not understood

    Examples
    --------
        >>> str(parse_dimension("120"))
        '120px'
        >>> parse_dimension("wide") is None
        True

    """
    match = _DIMENSION_RE.match(value)
    if not match:
        return None
    amount = float(match.group(1))
    unit = match.group(2).lower() or "px"
    if unit not in DIMENSION_UNITS:
        return None
    return Dimension(amount=amount, unit=unit)


def image_dimension_fields(attributes: Mapping[str, str]) -> list[str]:
    """Build ``:width:`` and ``:height:`` directive options.

    Percent widths are kept; percent heights have no meaning for
    reStructuredText images and are dropped.

    Parameters
    ----------
    attributes : Mapping[str, str]
        Key-value attributes of an image or figure

    Returns
    -------
    list of str
        Directive option lines (without indentation)

    """
    result: list[str] = []
    width = parse_dimension(attributes["width"]) if "width" in attributes else None
    if width is not None:
        result.append(f":width: {width}")
    height = parse_dimension(attributes["height"]) if "height" in attributes else None
    if height is not None and not height.is_percent:
        result.append(f":height: {height}")
    return result
