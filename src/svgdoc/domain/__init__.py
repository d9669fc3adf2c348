"""Domain models for svgdoc.

This module contains the object model that gets rendered into markup:

- Point: Immutable 2D coordinate
- RenderContext: Output sink plus indentation state for one render call
- Drawable: Abstract contract implemented by every shape
- Circle, Polyline, Text: Concrete shapes with fluent setters
"""

from svgdoc.domain.context import RenderContext
from svgdoc.domain.drawable import Drawable
from svgdoc.domain.point import Point
from svgdoc.domain.shapes import Circle, Polyline, Text

__all__: list[str] = [
    # Value types
    "Point",
    "RenderContext",
    # Shapes
    "Drawable",
    "Circle",
    "Polyline",
    "Text",
]
