import math

from pdfbrief.domain.enums import BlockKind, SummaryStyle
from pdfbrief.features.summary.models import Block, Candidate, RenderedOutput, SummaryPoint
from pdfbrief.features.summary.textutils import emphasize, ensure_terminal_punctuation, strip_emphasis

PARAGRAPH_GROUP_SIZE = 3
OUTLINE_POINTS_PER_PART = 4


def to_points(selected: list[Candidate]) -> list[SummaryPoint]:
    return [
        SummaryPoint(text=emphasize(ensure_terminal_punctuation(c.sentence)), page=c.page)
        for c in selected
    ]


def render_points(points: list[SummaryPoint], style: SummaryStyle | str) -> RenderedOutput:
    style = SummaryStyle.parse(style)
    if style == SummaryStyle.paragraphs:
        blocks = _paragraphs(points)
    elif style == SummaryStyle.outline:
        blocks = _outline(points)
    else:
        blocks = _bullets(points)
    return RenderedOutput(style=style, blocks=tuple(blocks))


def _bullets(points: list[SummaryPoint]) -> list[Block]:
    return [Block(kind=BlockKind.point, text=p.text, pages=(p.page,)) for p in points]


def _paragraphs(points: list[SummaryPoint]) -> list[Block]:
    blocks: list[Block] = []
    for idx, start in enumerate(range(0, len(points), PARAGRAPH_GROUP_SIZE), start=1):
        group = points[start : start + PARAGRAPH_GROUP_SIZE]
        text = " ".join(strip_emphasis(p.text) for p in group)
        pages = tuple(dict.fromkeys(p.page for p in group))
        blocks.append(Block(kind=BlockKind.section, text=text, pages=pages, label=f"Section {idx}"))
    return blocks


def _outline(points: list[SummaryPoint]) -> list[Block]:
    total = len(points)
    if not total:
        return []

    sections = math.ceil(total / OUTLINE_POINTS_PER_PART)
    per_section = math.ceil(total / sections)

    blocks: list[Block] = []
    for i in range(sections):
        label = f"Part {i + 1}"
        blocks.append(Block(kind=BlockKind.heading, text=label, pages=(), label=label))
        blocks.extend(_bullets(points[i * per_section : (i + 1) * per_section]))
    return blocks
