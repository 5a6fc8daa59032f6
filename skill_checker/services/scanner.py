from typing import Sequence

from starlette.concurrency import run_in_threadpool

from skill_checker.helpers.parsing import extract_pdf_text
from skill_checker.models.models import MatchResult
from skill_checker.services.matching import match_keywords
from skill_checker.utils.exceptions import InvalidArgumentError
from skill_checker.utils.logging_config import get_logger, PerformanceMonitor

logger = get_logger(__name__)


async def scan_document(data: bytes, keywords: Sequence[str]) -> MatchResult:
    """Extract every page of the document, then score the text against ``keywords``."""
    if not keywords:
        raise InvalidArgumentError("Keyword list must not be empty", field="keywords")

    with PerformanceMonitor("scan_document", logger):
        # pdfminer is synchronous and CPU bound
        text = await run_in_threadpool(extract_pdf_text, data)
        result = match_keywords(text, keywords)

    logger.info(
        f"Scan matched {len(result.matched)}/{len(keywords)} keywords ({result.percentage}%)",
        extra={"text_length": len(text), "keyword_count": len(keywords)}
    )
    return result
