"""Concrete SVG shapes.

Each shape is a mutable builder: setters replace one attribute in place
and return the same instance so calls can be chained:

    Circle().set_center(Point(20, 30)).set_radius(15)

Element reference:
- circle: https://developer.mozilla.org/en-US/docs/Web/SVG/Element/circle
- polyline: https://developer.mozilla.org/en-US/docs/Web/SVG/Element/polyline
- text: https://developer.mozilla.org/en-US/docs/Web/SVG/Element/text
"""

from svgdoc.domain.context import RenderContext
from svgdoc.domain.drawable import Drawable
from svgdoc.domain.markup import escape_markup, format_attributes, format_number
from svgdoc.domain.point import Point


class Circle(Drawable):
    """The <circle> element.

    Attributes:
        center: Center point (cx, cy)
        radius: Radius (r)
    """

    def __init__(self) -> None:
        self.center = Point(0.0, 0.0)
        self.radius = 1.0

    def set_center(self, center: Point) -> "Circle":
        self.center = center
        return self

    def set_radius(self, radius: float) -> "Circle":
        self.radius = radius
        return self

    def _render_object(self, context: RenderContext) -> None:
        attrs = format_attributes({
            "cx": format_number(self.center.x),
            "cy": format_number(self.center.y),
            "r": format_number(self.radius),
        })
        context.out.write(f"<circle {attrs} />")

    def __repr__(self) -> str:
        return f"Circle(center={self.center!r}, radius={self.radius!r})"


class Polyline(Drawable):
    """The <polyline> element.

    Points keep insertion order; duplicates are kept as given.

    Attributes:
        points: Vertices of the line
    """

    def __init__(self) -> None:
        self.points: list[Point] = []

    def add_point(self, point: Point) -> "Polyline":
        """Append the next vertex of the line."""
        self.points.append(point)
        return self

    def _render_object(self, context: RenderContext) -> None:
        points = " ".join(
            f"{format_number(p.x)},{format_number(p.y)}" for p in self.points
        )
        context.out.write(f"<polyline {format_attributes({'points': points})} />")

    def __repr__(self) -> str:
        return f"Polyline(points={self.points!r})"


class Text(Drawable):
    """The <text> element.

    font-family and font-weight are only emitted once set. The text data
    is escaped, so arbitrary strings cannot break the document structure.

    Attributes:
        position: Anchor point (x, y)
        offset: Offset from the anchor (dx, dy)
        font_size: Font size (font-size)
        font_family: Font family name (font-family), None when unset
        font_weight: Font weight (font-weight), None when unset
        data: Character data rendered inside the element
    """

    def __init__(self) -> None:
        self.position = Point(0.0, 0.0)
        self.offset = Point(0.0, 0.0)
        self.font_size = 1
        self.font_family: str | None = None
        self.font_weight: str | None = None
        self.data = ""

    def set_position(self, position: Point) -> "Text":
        """Set the anchor point (x and y attributes)."""
        self.position = position
        return self

    def set_offset(self, offset: Point) -> "Text":
        """Set the offset from the anchor (dx and dy attributes)."""
        self.offset = offset
        return self

    def set_font_size(self, size: int) -> "Text":
        self.font_size = size
        return self

    def set_font_family(self, font_family: str) -> "Text":
        self.font_family = font_family
        return self

    def set_font_weight(self, font_weight: str) -> "Text":
        self.font_weight = font_weight
        return self

    def set_data(self, data: str) -> "Text":
        """Set the text shown inside the element."""
        self.data = data
        return self

    def _render_object(self, context: RenderContext) -> None:
        attrs = {
            "x": format_number(self.position.x),
            "y": format_number(self.position.y),
            "dx": format_number(self.offset.x),
            "dy": format_number(self.offset.y),
            "font-size": format_number(self.font_size),
        }
        if self.font_family is not None:
            attrs["font-family"] = self.font_family
        if self.font_weight is not None:
            attrs["font-weight"] = self.font_weight

        context.out.write(
            f"<text {format_attributes(attrs)}>{escape_markup(self.data)}</text>"
        )

    def __repr__(self) -> str:
        return (
            f"Text(position={self.position!r}, offset={self.offset!r}, "
            f"font_size={self.font_size!r}, font_family={self.font_family!r}, "
            f"font_weight={self.font_weight!r}, data={self.data!r})"
        )
