import os

# must be set before skill_checker.utils.config is imported
os.environ["ENVIRONMENT"] = "testing"

import pytest
from typing import List, Optional


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def _text_ops(lines: List[str], top: int) -> bytes:
    return "".join(
        f"BT /F1 12 Tf 72 {top - 14 * n} Td ({_escape(line)}) Tj ET\n"
        for n, line in enumerate(lines)
    ).encode("latin-1")


def _stream(content: bytes, extra: bytes = b"") -> bytes:
    return b"<< %s/Length %d >>\nstream\n" % (extra, len(content)) + content + b"\nendstream"


def make_pdf(pages: List[List[str]], forms: Optional[List[List[str]]] = None) -> bytes:
    """Build a minimal PDF in memory: one list of text lines per page, Helvetica 12pt.

    ``forms`` optionally gives, per page, lines drawn through a form XObject
    (``/X1 Do``) instead of the page's own content stream.
    """
    forms = forms or [[] for _ in pages]
    # 1 catalog, 2 page tree, 3 font, then page / content / form objects
    objects = {
        3: b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    }
    next_id = 4
    page_ids = []
    for lines, form_lines in zip(pages, forms):
        pid, cid = next_id, next_id + 1
        next_id += 2
        page_ids.append(pid)

        content = _text_ops(lines, 720)
        xobjects = ""
        if form_lines:
            fid = next_id
            next_id += 1
            objects[fid] = _stream(
                _text_ops(form_lines, 400),
                b"/Type /XObject /Subtype /Form /BBox [0 0 612 792] "
                b"/Resources << /Font << /F1 3 0 R >> >> ",
            )
            xobjects = f" /XObject << /X1 {fid} 0 R >>"
            content += b"/X1 Do\n"

        objects[pid] = (
            "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            f"/Resources << /Font << /F1 3 0 R >>{xobjects} >> /Contents {cid} 0 R >>"
        ).encode()
        objects[cid] = _stream(content)

    objects[1] = b"<< /Type /Catalog /Pages 2 0 R >>"
    objects[2] = ("<< /Type /Pages /Kids [%s] /Count %d >>" % (
        " ".join(f"{pid} 0 R" for pid in page_ids), len(page_ids))).encode()

    out = bytearray(b"%PDF-1.4\n")
    offsets = {}
    for num in sorted(objects):
        offsets[num] = len(out)
        out += b"%d 0 obj\n" % num + objects[num] + b"\nendobj\n"

    xref_at = len(out)
    size = max(objects) + 1
    out += b"xref\n0 %d\n" % size
    out += b"0000000000 65535 f \n"
    for num in range(1, size):
        out += b"%010d 00000 n \n" % offsets[num]
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (size, xref_at)
    return bytes(out)


@pytest.fixture
def pdf_builder():
    return make_pdf


@pytest.fixture
def resume_pdf():
    """Two-page resume mentioning node.js and SQL but not MongoDB"""
    return make_pdf([
        ["Jane Doe - Backend Engineer"],
        ["Built APIs with Node.js and Express, tuned SQL queries"],
    ])


@pytest.fixture
def session_manager():
    from skill_checker.services.session_manager import ScanSessionManager
    return ScanSessionManager()


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from skill_checker.main import app
    return TestClient(app)
