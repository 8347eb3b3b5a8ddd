"""Document-writing collaborators.

PdfDocument writes one fixed-size PDF page with reportlab; vector assets
are converted with svglib and drawn under an affine transform.
RecordingDocument keeps the primitives it receives.
"""
import logging
import os
import tempfile

from reportlab.graphics import renderPDF
from reportlab.lib import colors
from reportlab.pdfgen import canvas
from svglib.svglib import svg2rlg

from pagegeom.types import Rect, Line, AssetOverlay, AssetTransform
from pagegeom.page import PageFormat
from floorplan.constants import WALL_LINE_WIDTH, WALL_COLOR

logger = logging.getLogger(__name__)


class DocumentWriteFailure(RuntimeError):
    """Raised when the document backend cannot draw or persist the page."""


class PdfDocument:
    """Single-page PDF canvas in absolute page points (origin bottom-left)."""

    def __init__(self, path: str, page: PageFormat = PageFormat.A4):
        self.path = path
        self.page = page
        # invariant=1 drops creation timestamps and random IDs
        self._canvas = canvas.Canvas(path, pagesize=page.value, invariant=1)
        self._canvas.setStrokeColor(colors.toColor(WALL_COLOR))
        self._canvas.setLineWidth(WALL_LINE_WIDTH)

    def draw_rectangle(self, x: float, y: float, width: float, height: float):
        self._canvas.rect(x, y, width, height, stroke=1, fill=0)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, color: str, width: float):
        c = self._canvas
        c.saveState()
        c.setStrokeColor(colors.toColor(color))
        c.setLineWidth(width)
        c.line(x1, y1, x2, y2)
        c.restoreState()

    def draw_vector_asset(self, data: bytes, transform: AssetTransform):
        # svglib reads from a path; go through a temporary file
        with tempfile.NamedTemporaryFile(suffix=".svg", delete=False) as tmp:
            tmp.write(data)
            tmp_path = tmp.name
        try:
            drawing = svg2rlg(tmp_path)
        finally:
            os.unlink(tmp_path)
        if drawing is None:
            raise DocumentWriteFailure("draw_vector_asset: svglib could not parse the asset")
        c = self._canvas
        c.saveState()
        c.translate(transform.translate_x, transform.translate_y)
        c.scale(transform.scale_x, transform.scale_y)
        renderPDF.draw(drawing, c, 0, 0)
        c.restoreState()

    def finalize(self) -> str:
        """Write the page; return the absolute output path."""
        try:
            self._canvas.showPage()
            self._canvas.save()
        except OSError as exc:
            raise DocumentWriteFailure(f"finalize: cannot write {self.path}: {exc}") from exc
        out = os.path.abspath(self.path)
        logger.debug("wrote %s", out)
        return out


class RecordingDocument:
    """Collaborator that records primitives instead of drawing them."""

    def __init__(self, page: PageFormat = PageFormat.A4):
        self.page = page
        self.primitives = []
        self.finalized = False

    def draw_rectangle(self, x, y, width, height):
        self.primitives.append(Rect(x, y, width, height))

    def draw_line(self, x1, y1, x2, y2, color, width):
        self.primitives.append(Line(x1, y1, x2, y2, color, width))

    def draw_vector_asset(self, data, transform):
        self.primitives.append(AssetOverlay(data, transform))

    def finalize(self):
        self.finalized = True
        return None
