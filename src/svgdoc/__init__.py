"""svgdoc - Render vector primitives into SVG markup.

svgdoc builds small SVG documents out of circles, polylines and text
elements. Shapes are configured through fluent setters, collected by a
Document and rendered, one element per line, into any text sink.

Example:
    >>> import sys
    >>> from svgdoc import Circle, Document, Point
    >>> doc = Document()
    >>> doc.add(Circle().set_center(Point(20, 30)).set_radius(15))
    >>> doc.render(sys.stdout)
    <circle cx="20" cy="30" r="15" />

The CLI renders JSON scene files:
    $ svgdoc scene.json
"""

from svgdoc.core.document import Document
from svgdoc.domain import Circle, Drawable, Point, Polyline, RenderContext, Text

__version__ = "0.1.0"

__all__ = [
    "Circle",
    "Document",
    "Drawable",
    "Point",
    "Polyline",
    "RenderContext",
    "Text",
    "__version__",
]
