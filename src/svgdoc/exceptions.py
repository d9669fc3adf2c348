"""Exception hierarchy for svgdoc.

Rendering itself defines no error kinds: failures of the output sink
propagate unchanged. These exceptions belong to the scene, output and
CLI layers around the core.
"""


class SvgDocError(Exception):
    """Base exception for all svgdoc errors."""

    pass


class SceneError(SvgDocError):
    """Errors related to scene file loading."""

    pass


class SceneLoadError(SceneError):
    """Error reading a scene file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load scene '{path}': {reason}")


class SceneFormatError(SceneError):
    """Scene file content is not a valid scene description."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid scene format '{path}': {details}")


class ShapeError(SvgDocError):
    """Errors related to shape descriptions."""

    pass


class UnknownShapeError(ShapeError):
    """Shape description names an unsupported shape type."""

    def __init__(self, shape_type: str) -> None:
        self.shape_type = shape_type
        super().__init__(f"Unknown shape type '{shape_type}'")


class OutputError(SvgDocError):
    """Errors related to writing rendered documents."""

    pass


class DocumentWriteError(OutputError):
    """Error writing a rendered document to disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write document '{path}': {reason}")
