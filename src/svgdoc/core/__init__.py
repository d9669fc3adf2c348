"""Core document rendering for svgdoc.

Key classes:
- Document: Owns drawables and renders them in insertion order
"""

from svgdoc.core.document import Document

__all__ = ["Document"]
