from pdfbrief.features.summary.models import Candidate
from pdfbrief.features.summary.textutils import is_near_duplicate


def select_points(candidates: list[Candidate], target_points: int, total_pages: int) -> list[Candidate]:
    """Pick up to `target_points` candidates, covering as many pages as possible.

    A coverage pass first takes the best candidate of each page, then a fill
    pass tops up by score. Near-duplicates of anything already picked are
    skipped in both passes. The result is in document order.
    """

    # sorted() is stable: equal scores keep generation order.
    ranked = sorted(candidates, key=lambda c: -c.score)

    selected: list[Candidate] = []
    picked: set[int] = set()
    pages_used: set[int] = set()

    coverage_limit = min(total_pages, target_points)
    for idx, candidate in enumerate(ranked):
        if len(selected) >= coverage_limit:
            break
        if candidate.page in pages_used:
            continue
        if _duplicates_any(candidate, selected):
            continue
        selected.append(candidate)
        picked.add(idx)
        pages_used.add(candidate.page)

    for idx, candidate in enumerate(ranked):
        if len(selected) >= target_points:
            break
        if idx in picked or _duplicates_any(candidate, selected):
            continue
        selected.append(candidate)
        picked.add(idx)

    return sorted(selected, key=lambda c: (c.page, c.position))


def _duplicates_any(candidate: Candidate, selected: list[Candidate]) -> bool:
    return any(is_near_duplicate(candidate.sentence, s.sentence) for s in selected)
