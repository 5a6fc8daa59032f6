from typing import Sequence
from skill_checker.models.models import MatchResult
from skill_checker.utils.exceptions import InvalidArgumentError


def round_half_up_percent(part: int, total: int) -> int:
    # exact integer form of floor(100 * part / total + 0.5)
    return (200 * part + total) // (2 * total)


def match_keywords(text: str, keywords: Sequence[str]) -> MatchResult:
    """Score ``text`` against ``keywords`` by case-insensitive substring containment.

    Every keyword is tested on its own, so duplicates count twice in both the
    matched list and the denominator. There is no word-boundary check: "java"
    matches inside "javascript".
    """
    if not keywords:
        raise InvalidArgumentError("Keyword list must not be empty", field="keywords")

    lower_text = text.lower()
    matched = [word for word in keywords if word.lower() in lower_text]
    return MatchResult(
        matched=tuple(matched),
        percentage=round_half_up_percent(len(matched), len(keywords)),
    )
