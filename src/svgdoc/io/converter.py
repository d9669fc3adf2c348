"""Converters between scene dictionaries and domain shapes.

Scene files describe each shape as a dictionary with a "type" key.
Points are written either as [x, y] pairs or as {"x": ..., "y": ...}.
"""

from typing import Any

from svgdoc.domain.drawable import Drawable
from svgdoc.domain.point import Point
from svgdoc.domain.shapes import Circle, Polyline, Text
from svgdoc.exceptions import UnknownShapeError

SHAPE_TYPES = ("circle", "polyline", "text")


def point_from_value(value: Any) -> Point:
    """Convert a scene point value to a Point.

    Args:
        value: [x, y] sequence or {"x": ..., "y": ...} mapping

    Returns:
        Point instance
    """
    if isinstance(value, dict):
        return Point.from_dict(value)
    x, y = value
    return Point(x, y)


def shape_from_dict(data: dict[str, Any]) -> Drawable:
    """Build a domain shape from its scene dictionary.

    Missing keys keep the shape's defaults.

    Args:
        data: Shape dictionary with a "type" key

    Returns:
        Configured Circle, Polyline or Text

    Raises:
        UnknownShapeError: If the type is not supported
    """
    shape_type = data.get("type")

    if shape_type == "circle":
        circle = Circle()
        if "center" in data:
            circle.set_center(point_from_value(data["center"]))
        if "radius" in data:
            circle.set_radius(data["radius"])
        return circle

    if shape_type == "polyline":
        polyline = Polyline()
        for value in data.get("points", []):
            polyline.add_point(point_from_value(value))
        return polyline

    if shape_type == "text":
        text = Text()
        if "position" in data:
            text.set_position(point_from_value(data["position"]))
        if "offset" in data:
            text.set_offset(point_from_value(data["offset"]))
        if "font_size" in data:
            text.set_font_size(data["font_size"])
        if data.get("font_family") is not None:
            text.set_font_family(data["font_family"])
        if data.get("font_weight") is not None:
            text.set_font_weight(data["font_weight"])
        if "data" in data:
            text.set_data(data["data"])
        return text

    raise UnknownShapeError(str(shape_type))


def shape_to_dict(shape: Drawable) -> dict[str, Any]:
    """Serialize a domain shape to its scene dictionary.

    Args:
        shape: Circle, Polyline or Text

    Returns:
        Scene dictionary with a "type" key

    Raises:
        UnknownShapeError: If the shape class has no scene representation
    """
    if isinstance(shape, Circle):
        return {
            "type": "circle",
            "center": list(shape.center.to_tuple()),
            "radius": shape.radius,
        }

    if isinstance(shape, Polyline):
        return {
            "type": "polyline",
            "points": [list(p.to_tuple()) for p in shape.points],
        }

    if isinstance(shape, Text):
        data: dict[str, Any] = {
            "type": "text",
            "position": list(shape.position.to_tuple()),
            "offset": list(shape.offset.to_tuple()),
            "font_size": shape.font_size,
            "data": shape.data,
        }
        if shape.font_family is not None:
            data["font_family"] = shape.font_family
        if shape.font_weight is not None:
            data["font_weight"] = shape.font_weight
        return data

    raise UnknownShapeError(type(shape).__name__)
