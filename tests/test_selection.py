from pdfbrief.features.summary.models import Candidate
from pdfbrief.features.summary.selection import select_points
from pdfbrief.features.summary.textutils import is_near_duplicate


def _unique_sentence(tag: str) -> str:
    return " ".join(f"{word}{tag}" for word in ("alpha", "bravo", "charlie", "delta", "echo", "foxtrot", "golf", "hotel"))


def _cand(tag: str, score: float, page: int, position: int) -> Candidate:
    return Candidate(sentence=_unique_sentence(tag), score=score, page=page, position=position)


def test_two_pages_three_candidates_each_all_selected_in_document_order() -> None:
    candidates = [
        _cand("a", 30, 1, 0),
        _cand("b", 60, 1, 1),
        _cand("c", 45, 1, 2),
        _cand("d", 25, 2, 0),
        _cand("e", 50, 2, 1),
        _cand("f", 35, 2, 2),
    ]

    selected = select_points(candidates, target_points=7, total_pages=2)

    assert [(c.page, c.position) for c in selected] == [(1, 0), (1, 1), (1, 2), (2, 0), (2, 1), (2, 2)]


def test_coverage_pass_reaches_low_scoring_pages() -> None:
    candidates = [
        _cand("a", 90, 1, 0),
        _cand("b", 80, 1, 1),
        _cand("c", 70, 1, 2),
        _cand("d", 50, 2, 0),
        _cand("e", 30, 3, 0),
    ]

    selected = select_points(candidates, target_points=3, total_pages=3)

    assert [c.sentence for c in selected] == [
        _unique_sentence("a"),
        _unique_sentence("d"),
        _unique_sentence("e"),
    ]


def test_selection_never_exceeds_target_even_with_many_pages() -> None:
    candidates = [_cand(str(i), 100 - i, i + 1, 0) for i in range(10)]

    selected = select_points(candidates, target_points=7, total_pages=10)

    assert len(selected) == 7
    assert [c.page for c in selected] == [1, 2, 3, 4, 5, 6, 7]


def test_near_duplicate_keeps_higher_score() -> None:
    base = "the quick brown fox jumps over the lazy dog near the river bank"
    candidates = [
        Candidate(sentence=base, score=40, page=1, position=0),
        Candidate(sentence=base + " today", score=50, page=1, position=1),
        _cand("x", 30, 1, 2),
    ]

    selected = select_points(candidates, target_points=7, total_pages=1)

    assert [c.position for c in selected] == [1, 2]


def test_ties_break_by_generation_order() -> None:
    candidates = [_cand("first", 30, 1, 0), _cand("second", 30, 2, 0)]

    selected = select_points(candidates, target_points=1, total_pages=2)

    assert [c.sentence for c in selected] == [_unique_sentence("first")]


def test_fewer_candidates_than_target_is_fine() -> None:
    candidates = [_cand("a", 30, 1, 0), _cand("b", 40, 1, 1)]

    selected = select_points(candidates, target_points=22, total_pages=1)

    assert len(selected) == 2


def test_no_candidates() -> None:
    assert select_points([], target_points=7, total_pages=0) == []


def test_selected_set_has_no_near_duplicates() -> None:
    words = "one two three four five six seven eight nine ten".split()
    candidates = []
    for i in range(12):
        variant = words[: 10 - i % 4] + [f"extra{i}"]
        candidates.append(Candidate(sentence=" ".join(variant), score=20 + i, page=1 + i % 3, position=i))

    selected = select_points(candidates, target_points=14, total_pages=3)

    for i, a in enumerate(selected):
        for b in selected[i + 1 :]:
            assert not is_near_duplicate(a.sentence, b.sentence)
    keys = [(c.page, c.position) for c in selected]
    assert keys == sorted(keys)
