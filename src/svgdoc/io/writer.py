"""Document writer for saving rendered documents.

The core only renders into sinks supplied by the caller. This module is
the caller for file output: it owns the file, adds the optional XML
declaration and <svg> root, and reports write failures as
DocumentWriteError.
"""

import io
import time
from pathlib import Path
from typing import NoReturn, TextIO

from svgdoc.config.settings import RenderConfig
from svgdoc.core.document import Document
from svgdoc.domain.context import RenderContext
from svgdoc.exceptions import DocumentWriteError
from svgdoc.utils.logging import RenderLogger

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" ?>'
SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def render_framed(document: Document, out: TextIO, config: RenderConfig) -> None:
    """Render a document with the framing selected in config.

    Without framing this is exactly Document.render(). With standalone
    framing the elements are rendered one level inside an <svg> root.

    Args:
        document: Document to render
        out: Text sink
        config: Render configuration
    """
    if config.xml_declaration:
        out.write(XML_DECLARATION + "\n")

    if not config.standalone:
        document.render(out, indent_step=config.indent_step, indent=config.indent)
        return

    root = RenderContext(out, config.indent_step, config.indent)
    root.render_indent()
    out.write(f'<svg xmlns="{SVG_NAMESPACE}" version="1.1">\n')
    body = root.indented()
    document.render(out, indent_step=body.indent_step, indent=body.indent)
    root.render_indent()
    out.write("</svg>\n")


def render_to_string(document: Document, config: RenderConfig | None = None) -> str:
    """Render a document into a string.

    Args:
        document: Document to render
        config: Render configuration (defaults if None)

    Returns:
        Rendered markup
    """
    buffer = io.StringIO()
    render_framed(document, buffer, config or RenderConfig())
    return buffer.getvalue()


class DocumentWriter:
    """Writes rendered documents to files.

    Example:
        writer = DocumentWriter(document, Path("drawing.svg"))
        writer.save()
    """

    def __init__(
        self,
        document: Document,
        output_path: Path | None = None,
        config: RenderConfig | None = None,
        render_logger: RenderLogger | None = None,
    ) -> None:
        """Initialize the document writer.

        Args:
            document: Document to write
            output_path: Path where the markup will be saved; only needed by save()
            config: Render configuration (defaults if None)
            render_logger: Optional logger collecting render statistics
        """
        self._document = document
        self._output_path = output_path
        self._config = config or RenderConfig()
        self._render_logger = render_logger

    def write_to(self, out: TextIO, destination: str = "<stream>") -> None:
        """Render the document into an already open sink.

        Args:
            out: Text sink; not closed by the writer
            destination: Name of the sink used in log events
        """
        if self._render_logger is not None:
            self._render_logger.log_render_start(len(self._document), self._config.indent_step)

        start = time.perf_counter()
        render_framed(self._document, out, self._config)
        duration_ms = (time.perf_counter() - start) * 1000

        if self._render_logger is not None:
            for obj in self._document:
                self._render_logger.log_element(type(obj).__name__.lower())
            self._render_logger.log_render_complete(destination, duration_ms)

    def save(self) -> None:
        """Render the document into the output file.

        A file left incomplete by a failed render is removed.

        Raises:
            ValueError: If the writer has no output path
            DocumentWriteError: If the file cannot be written
        """
        if self._output_path is None:
            raise ValueError("No output path set")

        try:
            out = open(self._output_path, "w", encoding="utf-8", newline="\n")
        except OSError as e:
            self._raise_write_error(e)

        try:
            with out:
                self.write_to(out, destination=str(self._output_path))
        except OSError as e:
            self._output_path.unlink(missing_ok=True)
            self._raise_write_error(e)
        except Exception as e:
            self._output_path.unlink(missing_ok=True)
            if self._render_logger is not None:
                self._render_logger.log_render_error(str(self._output_path), e)
            raise

    def _raise_write_error(self, error: OSError) -> NoReturn:
        if self._render_logger is not None:
            self._render_logger.log_render_error(str(self._output_path), error)
        raise DocumentWriteError(str(self._output_path), error.strerror or str(error)) from error

    @staticmethod
    def get_output_path(input_path: Path) -> Path:
        """Generate the default output path for a scene file.

        Converts: scene.json -> scene.svg
                  drawings/logo.json -> drawings/logo.svg

        Args:
            input_path: Scene file path

        Returns:
            Path with the .svg extension
        """
        return input_path.with_suffix(".svg")
