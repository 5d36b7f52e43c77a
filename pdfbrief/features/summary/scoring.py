import logging
import re

from pdfbrief.domain.enums import SummaryFocus
from pdfbrief.features.summary.models import Candidate, PageText
from pdfbrief.features.summary.segmentation import split_sentences
from pdfbrief.features.summary.textutils import NUMBER_RE, P_VALUE_PATTERN

logger = logging.getLogger(__name__)

FOCUS_KEYWORDS: dict[SummaryFocus, tuple[str, ...]] = {
    SummaryFocus.overview: (
        "important", "significant", "key", "main", "primary", "conclude", "result", "finding",
    ),
    SummaryFocus.data: (
        "result", "data", "found", "showed", "demonstrated", "percent", "increase", "decrease", "significant",
    ),
    SummaryFocus.methods: (
        "method", "methodology", "approach", "procedure", "technique", "protocol", "measured", "analyzed",
    ),
}

KEYWORD_POINTS = 15
NUMBER_POINTS = 10
SIGNIFICANCE_POINTS = 12
PROPER_NOUN_POINTS = 3
STRUCTURE_POINTS = 5
EDGE_PAGE_FACTOR = 1.1
MIN_CANDIDATE_SCORE = 20

# ASCII mode keeps \b on Latin letters only.
_SIGNIFICANCE_RE = re.compile(rf"{P_VALUE_PATTERN}|significant", re.ASCII)
_PROPER_NOUN_RE = re.compile(r"\b[A-Z][a-z]+\b", re.ASCII)
_STRUCTURE_RE = re.compile(r"[:,;]")


def keywords_for(focus: SummaryFocus | str) -> tuple[str, ...]:
    return FOCUS_KEYWORDS[SummaryFocus.parse(focus)]


def score_sentence(sentence: str, page_index: int, total_pages: int, keywords: tuple[str, ...]) -> float:
    lower = sentence.lower()
    score: float = 0

    # Each distinct keyword counts once, however often it occurs.
    for keyword in keywords:
        if keyword in lower:
            score += KEYWORD_POINTS

    score += len(NUMBER_RE.findall(sentence)) * NUMBER_POINTS

    if _SIGNIFICANCE_RE.search(lower):
        score += SIGNIFICANCE_POINTS

    score += len(_PROPER_NOUN_RE.findall(sentence)) * PROPER_NOUN_POINTS

    if _STRUCTURE_RE.search(sentence):
        score += STRUCTURE_POINTS

    if page_index == 0 or page_index == total_pages - 1:
        score *= EDGE_PAGE_FACTOR

    return score


def extract_candidates(pages: list[PageText], focus: SummaryFocus | str) -> list[Candidate]:
    """Score every segmented sentence and keep those above the threshold.

    Candidates come out page-major then position-major; the selector relies on
    this order to break score ties.
    """

    keywords = keywords_for(focus)
    total_pages = len(pages)
    candidates: list[Candidate] = []

    for page_index, page in enumerate(pages):
        for position, sentence in enumerate(split_sentences(page)):
            score = score_sentence(sentence, page_index, total_pages, keywords)
            if score > MIN_CANDIDATE_SCORE:
                candidates.append(
                    Candidate(sentence=sentence, score=score, page=page.page_number, position=position)
                )

    logger.debug("Extracted %d candidate(s) from %d page(s)", len(candidates), total_pages)
    return candidates
