"""Scene and document I/O for svgdoc.

This module handles reading scene descriptions and writing rendered
documents. The core Document never opens or closes files itself; this
layer owns them.

Key responsibilities:
- Load JSON scene files into Documents
- Convert between scene dictionaries and domain shapes
- Write rendered documents, optionally framed by an <svg> root

Key classes:
- SceneReader: Load scenes and build documents
- DocumentWriter: Save rendered documents
"""

from svgdoc.io.reader import SceneReader
from svgdoc.io.writer import DocumentWriter, render_framed, render_to_string

__all__ = [
    "DocumentWriter",
    "SceneReader",
    "render_framed",
    "render_to_string",
]
