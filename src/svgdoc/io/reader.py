"""Scene reader for loading JSON scene files.

This module provides the SceneReader class for loading scene files
and turning their shape descriptions into a Document.
"""

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from svgdoc.core.document import Document
from svgdoc.domain.drawable import Drawable
from svgdoc.exceptions import SceneFormatError, SceneLoadError
from svgdoc.io.converter import shape_from_dict


class PointEntry(BaseModel):
    """Point written as {"x": ..., "y": ...}."""

    model_config = ConfigDict(extra="forbid")

    x: float
    y: float


PointValue = tuple[float, float] | PointEntry


class CircleEntry(BaseModel):
    """Scene entry for a circle."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["circle"]
    center: PointValue | None = None
    radius: float | None = None


class PolylineEntry(BaseModel):
    """Scene entry for a polyline."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["polyline"]
    points: list[PointValue] = Field(default_factory=list)


class TextEntry(BaseModel):
    """Scene entry for a text element."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["text"]
    position: PointValue | None = None
    offset: PointValue | None = None
    font_size: int | None = Field(default=None, ge=0)
    font_family: str | None = None
    font_weight: str | None = None
    data: str | None = None


ShapeEntry = Annotated[
    CircleEntry | PolylineEntry | TextEntry,
    Field(discriminator="type"),
]


class SceneFile(BaseModel):
    """Top level layout of a scene file."""

    shapes: list[ShapeEntry] = Field(default_factory=list)


class SceneReader:
    """Loads JSON scene files and builds documents from them.

    Example:
        reader = SceneReader(Path("scene.json"))
        reader.load()
        reader.document.render(sys.stdout)
    """

    def __init__(self, scene_path: Path) -> None:
        """Initialize the scene reader.

        Args:
            scene_path: Path to the JSON scene file
        """
        self._scene_path = scene_path
        self._shapes: list[dict[str, Any]] | None = None

    def load(self) -> None:
        """Load and check the scene file.

        Raises:
            FileNotFoundError: If scene file does not exist
            SceneLoadError: If the file cannot be read
            SceneFormatError: If the content is not a valid scene
        """
        if not self._scene_path.exists():
            raise FileNotFoundError(f"Scene file not found: {self._scene_path}")

        try:
            raw = self._scene_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SceneLoadError(str(self._scene_path), str(e)) from e

        try:
            content = json.loads(raw)
        except json.JSONDecodeError as e:
            raise SceneFormatError(str(self._scene_path), f"invalid JSON: {e}") from e

        try:
            scene = SceneFile.model_validate(content)
        except ValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise SceneFormatError(str(self._scene_path), details) from e

        self._shapes = [
            entry.model_dump(exclude_none=True) for entry in scene.shapes
        ]

    def _require_loaded(self) -> list[dict[str, Any]]:
        if self._shapes is None:
            raise RuntimeError("Scene not loaded. Call load() first.")
        return self._shapes

    @property
    def shape_count(self) -> int:
        """Number of shapes described by the scene."""
        return len(self._require_loaded())

    def iter_shapes(self) -> Iterator[Drawable]:
        """Iterate over the scene's shapes as domain objects.

        Yields:
            Shapes in file order
        """
        for data in self._require_loaded():
            yield shape_from_dict(data)

    @property
    def document(self) -> Document:
        """Build a new Document holding every shape of the scene."""
        document = Document()
        for shape in self.iter_shapes():
            document.add_ptr(shape)
        return document
