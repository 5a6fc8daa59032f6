import pytest

from skill_checker.helpers.parsing import extract_pdf_text, iter_page_texts, join_page_items
from skill_checker.services.matching import match_keywords
from skill_checker.utils.exceptions import ParseError


class TestExtractPdfText:
    """Test cases for PDF text extraction"""

    def test_single_page(self, pdf_builder):
        data = pdf_builder([["Skilled in Python"]])
        assert extract_pdf_text(data) == "Skilled in Python"

    def test_pages_concatenated_without_separator(self, pdf_builder):
        data = pdf_builder([["Skilled in Python"], ["Also knows Docker"]])
        assert extract_pdf_text(data) == "Skilled in PythonAlso knows Docker"

    def test_lines_within_page_joined_by_space(self, pdf_builder):
        data = pdf_builder([["Python developer", "Knows SQL"]])
        text = extract_pdf_text(data)
        assert "\n" not in text
        assert "Python developer" in text
        assert "Knows SQL" in text
        assert text.index("Python developer") < text.index("Knows SQL")

    def test_iter_page_texts_in_page_order(self, pdf_builder):
        data = pdf_builder([["first"], ["second"], ["third"]])
        assert list(iter_page_texts(data)) == ["first", "second", "third"]

    def test_form_xobject_text_is_extracted(self, pdf_builder):
        """Text drawn through a form XObject belongs to the page too"""
        data = pdf_builder([["Jane Doe"]], forms=[["Expert in Kubernetes"]])
        text = extract_pdf_text(data)
        assert "Jane Doe" in text
        assert "Expert in Kubernetes" in text
        assert "\n" not in text
        assert match_keywords(text, ["kubernetes"]).percentage == 100

    def test_form_xobject_only_page(self, pdf_builder):
        data = pdf_builder([[], ["Page two"]], forms=[["Docker and AWS"], []])
        assert extract_pdf_text(data) == "Docker and AWSPage two"

    def test_blank_page(self, pdf_builder):
        data = pdf_builder([[], ["only text"]])
        assert extract_pdf_text(data) == "only text"

    def test_pure_function(self, resume_pdf):
        assert extract_pdf_text(resume_pdf) == extract_pdf_text(resume_pdf)

    def test_not_a_pdf(self):
        with pytest.raises(ParseError) as exc_info:
            extract_pdf_text(b"this is plain text, not a document")
        assert exc_info.value.error_code == "PARSE_ERROR"
        assert exc_info.value.cause is not None

    def test_empty_bytes(self):
        with pytest.raises(ParseError):
            extract_pdf_text(b"")

    def test_truncated_pdf(self, resume_pdf):
        with pytest.raises(ParseError):
            extract_pdf_text(resume_pdf[:40])


class TestJoinPageItems:
    """Test cases for joining the text items of one page"""

    def test_space_joined(self):
        assert join_page_items(["a", "b", "c"]) == "a b c"

    def test_empty(self):
        assert join_page_items([]) == ""
