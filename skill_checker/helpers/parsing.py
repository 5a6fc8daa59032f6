from io import BytesIO
from typing import Iterable, Iterator
from pdfminer.high_level import extract_pages
from pdfminer.layout import LAParams, LTContainer, LTFigure, LTTextBox, LTTextLine
from skill_checker.utils.exceptions import ExceptionContext, ParseError
from skill_checker.utils.logging_config import get_logger, log_function_call
import logging
logging.getLogger("pdfminer").setLevel(logging.ERROR)

logger = get_logger(__name__)


def page_items(container: LTContainer) -> Iterator[str]:
    """Text lines of a page, in the order pdfminer reports them.

    Figures (form XObjects) are walked too, so text drawn from them counts.
    """
    for element in container:
        if isinstance(element, LTTextBox):
            for line in element:
                if isinstance(line, LTTextLine):
                    yield line.get_text().rstrip("\n")
        elif isinstance(element, LTTextLine):
            yield element.get_text().rstrip("\n")
        elif isinstance(element, LTFigure):
            yield from page_items(element)


def join_page_items(items: Iterable[str]) -> str:
    return " ".join(items)


def iter_page_texts(data: bytes) -> Iterator[str]:
    """Yield the text of each page in ascending page order.

    Parser failures surface as ParseError while iterating.
    """
    with ExceptionContext("pdf_extraction", logger, wrap_as=ParseError, document_size=len(data)):
        for page in extract_pages(BytesIO(data), laparams=LAParams(all_texts=True)):
            yield join_page_items(page_items(page))


@log_function_call
def extract_pdf_text(data: bytes) -> str:
    """
    Extract the full text of a PDF held in memory.

    Pages are concatenated with no separator, so page boundaries are not
    marked in the result. Raises ParseError for bytes that are not a
    well-formed PDF.
    """
    if not data:
        raise ParseError("Document is empty", details={"document_size": 0})

    pages = list(iter_page_texts(data))
    logger.debug(f"Extracted {len(pages)} page(s) from {len(data)} bytes")
    return "".join(pages)
