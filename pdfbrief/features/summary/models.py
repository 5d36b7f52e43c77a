from __future__ import annotations

from dataclasses import dataclass

from pdfbrief.domain.enums import BlockKind, SummaryFocus, SummaryLength, SummaryStyle


@dataclass(frozen=True)
class PageText:
    page_number: int
    text: str


@dataclass(frozen=True)
class Candidate:
    sentence: str
    score: float
    page: int
    position: int  # index among the retained sentences of its page


@dataclass(frozen=True)
class SelectionSettings:
    length: SummaryLength = SummaryLength.medium
    style: SummaryStyle = SummaryStyle.bullets
    focus: SummaryFocus = SummaryFocus.overview

    @classmethod
    def from_values(
        cls,
        *,
        length: str | None = None,
        style: str | None = None,
        focus: str | None = None,
    ) -> SelectionSettings:
        return cls(
            length=SummaryLength.parse(length),
            style=SummaryStyle.parse(style),
            focus=SummaryFocus.parse(focus),
        )


@dataclass(frozen=True)
class SummaryPoint:
    text: str
    page: int


@dataclass(frozen=True)
class Block:
    kind: BlockKind
    text: str
    pages: tuple[int, ...]
    label: str | None = None


@dataclass(frozen=True)
class RenderedOutput:
    style: SummaryStyle
    blocks: tuple[Block, ...]

    @property
    def page_references(self) -> list[int]:
        return sorted({p for b in self.blocks for p in b.pages})

    def to_dict(self) -> dict[str, object]:
        return {
            "style": self.style.value,
            "blocks": [
                {
                    "kind": b.kind.value,
                    "label": b.label,
                    "text": b.text,
                    "pages": list(b.pages),
                }
                for b in self.blocks
            ],
            "page_references": self.page_references,
        }
