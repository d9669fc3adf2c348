"""Abstract drawable contract.

Every shape renders through the same three steps: indentation, the
shape's own element text, then a single newline. Subclasses only supply
the middle step.
"""

from abc import ABC, abstractmethod

from svgdoc.domain.context import RenderContext


class Drawable(ABC):
    """Base class for anything that can render itself as one element."""

    def render(self, context: RenderContext) -> None:
        """Render this object as a single indented line.

        Args:
            context: Render context providing sink and indentation
        """
        context.render_indent()
        self._render_object(context)
        context.out.write("\n")

    @abstractmethod
    def _render_object(self, context: RenderContext) -> None:
        """Write the element markup, without indentation or newline."""
