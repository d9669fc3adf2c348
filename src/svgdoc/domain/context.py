"""Render context threaded through a single render call."""

from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class RenderContext:
    """Output sink plus indentation state for rendering elements.

    The sink is borrowed: the context never opens or closes it. Contexts
    are never changed in place; nested content is rendered through a
    new context obtained from indented().

    Attributes:
        out: Text sink receiving the markup
        indent_step: Spaces added per nesting level
        indent: Spaces written before each element at this level
    """

    out: TextIO
    indent_step: int = 0
    indent: int = 0

    def indented(self) -> "RenderContext":
        """Return a context one nesting level deeper.

        Returns:
            New context sharing the sink and step, with indent + indent_step
        """
        return RenderContext(self.out, self.indent_step, self.indent + self.indent_step)

    def render_indent(self) -> None:
        """Write the current indentation to the sink."""
        self.out.write(" " * self.indent)
