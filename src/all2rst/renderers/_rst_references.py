#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2rst/renderers/_rst_references.py
"""Registries for content written after the document body.

reStructuredText keeps footnote bodies, hyperlink targets and image
substitution definitions out of the running text. While the body is
rendered these are collected here, then written in registration order.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, NamedTuple, Optional

from all2rst.ast.nodes import Attr, Node, Text
from all2rst.ast.utils import extract_text

LabelRenderer = Callable[[list[Node]], str]


@dataclass(frozen=True)
class ImageTarget:
    """An image substitution definition.

    Parameters
    ----------
    label : list of Node
        Inline content naming the substitution
    url : str
        Image source
    title : str
        Image title
    attr : Attr
        Image attributes (dimensions and alignment classes)
    target : str or None
        Link target when the image is wrapped in a link
    text : str
        Label as written between the substitution bars

    """

    label: list[Node]
    url: str
    title: str = ""
    attr: Attr = field(default_factory=Attr)
    target: Optional[str] = None
    text: str = ""

    def same_image(self, other: ImageTarget) -> bool:
        return (self.url, self.title, self.attr, self.target) == (other.url, other.title, other.attr, other.target)


@dataclass
class LinkTarget:
    """A named hyperlink target; ``text`` is the label as written in the reference."""

    label: list[Node]
    url: str
    title: str = ""
    text: str = ""


class RegistryMark(NamedTuple):
    """Sizes of a registry at one point of a rendering pass."""

    notes: int
    links: int
    images: int
    image_counter: int


@dataclass
class ReferenceRegistry:
    """Footnotes, link targets and images collected while rendering.

    Attributes
    ----------
    notes : list of list of Node
        Footnote bodies; footnote ``n`` is ``notes[n - 1]``
    links : list of LinkTarget
        Named hyperlink targets
    images : list of ImageTarget
        Image substitution definitions
    image_counter : int
        Number of generated ``imageN`` labels handed out

    """

    notes: list[list[Node]] = field(default_factory=list)
    links: list[LinkTarget] = field(default_factory=list)
    images: list[ImageTarget] = field(default_factory=list)
    image_counter: int = 0

    def add_note(self, blocks: list[Node]) -> int:
        """Register a footnote body and return its number (starting at 1)."""
        self.notes.append(blocks)
        return len(self.notes)

    def find_link(self, label: list[Node]) -> Optional[LinkTarget]:
        for link in self.links:
            if link.label == label:
                return link
        return None

    def add_link(self, label: list[Node], url: str, title: str = "", text: str = "") -> None:
        self.links.append(LinkTarget(label=label, url=url, title=title, text=text or extract_text(label)))

    def checkpoint(self) -> RegistryMark:
        """Return a mark that `rollback` can later restore."""
        return RegistryMark(len(self.notes), len(self.links), len(self.images), self.image_counter)

    def rollback(self, mark: RegistryMark) -> None:
        """Forget everything registered since ``mark`` was taken."""
        del self.notes[mark.notes :]
        del self.links[mark.links :]
        del self.images[mark.images :]
        self.image_counter = mark.image_counter

    def _next_image_label(self) -> list[Node]:
        self.image_counter += 1
        return [Text(content=f"image{self.image_counter}")]

    def register_image(
        self,
        alt: list[Node],
        url: str,
        title: str = "",
        attr: Optional[Attr] = None,
        target: Optional[str] = None,
        render_label: Optional[LabelRenderer] = None,
    ) -> ImageTarget:
        """Register an image and return its substitution definition.

        The alt text is used as label. An image whose alt text is already
        taken by a different image, or that has no alt text, gets a generated
        ``imageN`` label. Registering the same image twice reuses the first
        definition.

        Parameters
        ----------
        alt : list of Node
            Alt text
        url : str
            Image source
        title : str
            Image title
        attr : Attr or None
            Image attributes
        target : str or None
            Link target for images wrapped in a link
        render_label : callable or None
            Turns the label into the text written between the substitution
            bars. Called once per new definition; plain text extraction when
            omitted.

        Returns
        -------
        ImageTarget
            The new or reused definition

        """
        candidate = ImageTarget(label=alt, url=url, title=title, attr=attr or Attr(), target=target)
        existing = next((image for image in self.images if image.label == alt), None)

        if existing is not None:
            if existing.same_image(candidate):
                return existing
            label = self._next_image_label()
        elif not alt or alt == [Text(content="")]:
            label = self._next_image_label()
        else:
            label = alt

        text = (render_label or extract_text)(label)
        entry = ImageTarget(label=label, url=url, title=title, attr=candidate.attr, target=target, text=text)
        self.images.append(entry)
        return entry
