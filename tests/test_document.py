"""Tests for floorplan/document.py collaborators."""
import os
import pytest
from pagegeom.types import Rect, Line, AssetOverlay, AssetTransform
from pagegeom.page import PageFormat
from floorplan.document import DocumentWriteFailure, PdfDocument, RecordingDocument


class TestRecordingDocument:
    def test_records_in_order(self):
        doc = RecordingDocument()
        xf = AssetTransform(2, 2, 10, 20)
        doc.draw_rectangle(0, 0, 10, 5)
        doc.draw_line(0, 0, 1, 1, "#ff0000", 4)
        doc.draw_vector_asset(b"<svg/>", xf)
        assert doc.primitives == [
            Rect(0, 0, 10, 5),
            Line(0, 0, 1, 1, "#ff0000", 4),
            AssetOverlay(b"<svg/>", xf),
        ]

    def test_finalize(self):
        doc = RecordingDocument()
        assert doc.finalize() is None
        assert doc.finalized


class TestPdfDocument:
    def test_writes_pdf(self, tmp_path, icon_svg):
        path = tmp_path / "out.pdf"
        doc = PdfDocument(str(path), PageFormat.A4)
        doc.draw_rectangle(10, 10, 100, 50)
        doc.draw_line(10, 60, 40, 60, "#ff0000", 4)
        doc.draw_vector_asset(icon_svg, AssetTransform(1.5, 1.5, 200, 300))
        out = doc.finalize()
        assert out == os.path.abspath(str(path))
        assert path.read_bytes().startswith(b"%PDF")

    def test_bad_asset(self, tmp_path):
        doc = PdfDocument(str(tmp_path / "out.pdf"))
        with pytest.raises(DocumentWriteFailure, match="draw_vector_asset"):
            doc.draw_vector_asset(b"not svg at all", AssetTransform(1, 1, 0, 0))

    def test_unwritable_path(self, tmp_path):
        doc = PdfDocument(str(tmp_path / "missing-dir" / "out.pdf"))
        doc.draw_rectangle(0, 0, 10, 10)
        with pytest.raises(DocumentWriteFailure, match="finalize"):
            doc.finalize()
