import pytest

from pdfbrief.domain.enums import SummaryFocus
from pdfbrief.features.summary.models import PageText
from pdfbrief.features.summary.scoring import (
    FOCUS_KEYWORDS,
    extract_candidates,
    keywords_for,
    score_sentence,
)

OVERVIEW = FOCUS_KEYWORDS[SummaryFocus.overview]
METHODS = FOCUS_KEYWORDS[SummaryFocus.methods]

HEADLINE = (
    "The study demonstrated a significant 42% increase in output, "
    "which was the key finding of this research project overall"
)


def test_headline_sentence_on_first_page() -> None:
    # key + finding + significant (45), 42% (10), significance (12),
    # "The" (3), comma (5) -> 75, times 1.1 on an edge page.
    assert score_sentence(HEADLINE, 0, 3, OVERVIEW) == pytest.approx(82.5)


def test_headline_sentence_on_middle_page_has_no_edge_bonus() -> None:
    assert score_sentence(HEADLINE, 1, 3, OVERVIEW) == pytest.approx(75)


def test_last_page_gets_edge_bonus() -> None:
    assert score_sentence(HEADLINE, 2, 3, OVERVIEW) == pytest.approx(82.5)


def test_single_page_bonus_applies_once() -> None:
    assert score_sentence(HEADLINE, 0, 1, OVERVIEW) == pytest.approx(82.5)


def test_keyword_counts_once_per_sentence() -> None:
    sentence = "the key point is that the key idea and the key claim all matter here"

    assert score_sentence(sentence, 1, 3, OVERVIEW) == 15


def test_numbers_and_currency_each_score() -> None:
    sentence = "revenue rose by 12% to $4,500 in 2021 across 3 regions"

    # four numeric tokens (40) and the comma inside $4,500 (5)
    assert score_sentence(sentence, 1, 3, METHODS) == 45


def test_p_value_counts_as_significance() -> None:
    sentence = "the effect held with p < 0.05 in the sample"

    assert score_sentence(sentence, 1, 3, METHODS) == 22


def test_p_value_is_matched_case_insensitively() -> None:
    sentence = "the effect held with P=.01 in the sample"

    assert score_sentence(sentence, 1, 3, METHODS) == 22


def test_proper_nouns_score_three_each() -> None:
    sentence = "yesterday Alice met Bob in Paris to talk"

    assert score_sentence(sentence, 1, 3, METHODS) == 9


def test_score_is_never_negative() -> None:
    for sentence in ["", "nothing to see here at all", HEADLINE, "p = .5; Q: $,"]:
        for focus in SummaryFocus:
            assert score_sentence(sentence, 1, 3, FOCUS_KEYWORDS[focus]) >= 0


def test_unknown_focus_falls_back_to_overview() -> None:
    assert keywords_for("nonsense") == OVERVIEW
    assert keywords_for("data") == FOCUS_KEYWORDS[SummaryFocus.data]


def test_extract_candidates_filters_by_threshold_and_keeps_positions() -> None:
    low = "the cat sat on the mat and looked out of the window for a while"
    pages = [PageText(page_number=7, text=f"Tiny. {low}. {HEADLINE}.")]

    candidates = extract_candidates(pages, SummaryFocus.overview)

    assert len(candidates) == 1
    c = candidates[0]
    assert c.sentence == HEADLINE
    assert c.page == 7
    assert c.position == 1
    assert c.score == pytest.approx(82.5)


def test_extract_candidates_is_page_major(sample_page_texts: list[str]) -> None:
    pages = [PageText(page_number=i + 1, text=t) for i, t in enumerate(sample_page_texts)]

    candidates = extract_candidates(pages, "overview")

    assert len(candidates) == 8
    keys = [(c.page, c.position) for c in candidates]
    assert keys == sorted(keys)
    assert all(c.score > 20 for c in candidates)


def test_extract_candidates_with_no_pages() -> None:
    assert extract_candidates([], SummaryFocus.data) == []
