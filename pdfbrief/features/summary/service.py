import logging

from pdfbrief.features.summary.models import PageText, RenderedOutput, SelectionSettings
from pdfbrief.features.summary.rendering import render_points, to_points
from pdfbrief.features.summary.scoring import extract_candidates
from pdfbrief.features.summary.selection import select_points

logger = logging.getLogger(__name__)


def generate_summary(pages: list[PageText], settings: SelectionSettings) -> RenderedOutput:
    """Run segment -> score -> select -> render over the given pages.

    Pure and deterministic: the same pages and settings always give the same
    output. No pages, or no sentence scoring above the threshold, gives an
    output with no blocks.
    """

    candidates = extract_candidates(pages, settings.focus)
    selected = select_points(candidates, settings.length.target_points, len(pages))
    output = render_points(to_points(selected), settings.style)

    logger.debug(
        "Summary length=%s style=%s focus=%s: %d candidate(s), %d selected, %d block(s)",
        settings.length.value,
        settings.style.value,
        settings.focus.value,
        len(candidates),
        len(selected),
        len(output.blocks),
    )
    return output
