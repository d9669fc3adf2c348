"""Document container owning an ordered collection of drawables."""

import copy
from collections.abc import Iterator
from typing import TextIO, TypeVar

from svgdoc.domain.context import RenderContext
from svgdoc.domain.drawable import Drawable

DrawableT = TypeVar("DrawableT", bound=Drawable)


class Document:
    """An SVG document made of drawables rendered in insertion order.

    The document is the sole owner of everything added to it. add() stores
    an independent copy, so changing the caller's shape afterwards does
    not affect the document.

    Example:
        doc = Document()
        doc.add(Circle().set_center(Point(20, 30)).set_radius(15))
        doc.add(Polyline().add_point(Point(0, 0)).add_point(Point(10, 10)))
        doc.render(sys.stdout)
    """

    def __init__(self) -> None:
        self._objects: list[Drawable] = []

    def add(self, obj: DrawableT) -> None:
        """Add a copy of any drawable to the document.

        Args:
            obj: Shape to add; the caller keeps the original

        Raises:
            TypeError: If obj is not a Drawable
        """
        if not isinstance(obj, Drawable):
            raise TypeError(f"Expected a Drawable, got {type(obj).__name__}")
        self.add_ptr(copy.deepcopy(obj))

    def add_ptr(self, obj: Drawable) -> None:
        """Add a drawable, transferring ownership to the document.

        The object itself is stored. Callers must not modify it afterwards.

        Args:
            obj: Drawable handed over to the document

        Raises:
            TypeError: If obj is not a Drawable
        """
        if not isinstance(obj, Drawable):
            raise TypeError(f"Expected a Drawable, got {type(obj).__name__}")
        self._objects.append(obj)

    def render(self, out: TextIO, indent_step: int = 2, indent: int = 0) -> None:
        """Render every drawable into out, one element per line.

        Sink write errors are not caught.

        Args:
            out: Text sink; not closed by the document
            indent_step: Spaces added per nesting level
            indent: Indentation of the top-level elements
        """
        context = RenderContext(out, indent_step, indent)
        for obj in self._objects:
            obj.render(context)

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[Drawable]:
        return iter(self._objects)
