from enum import Enum


class SummaryLength(str, Enum):
    short = "short"
    medium = "medium"
    detailed = "detailed"

    @classmethod
    def parse(cls, value: str | None) -> "SummaryLength":
        try:
            return cls(value)
        except ValueError:
            return cls.medium

    @property
    def target_points(self) -> int:
        return _TARGET_POINTS[self]


_TARGET_POINTS = {
    SummaryLength.short: 7,
    SummaryLength.medium: 14,
    SummaryLength.detailed: 22,
}


class SummaryStyle(str, Enum):
    bullets = "bullets"
    paragraphs = "paragraphs"
    outline = "outline"

    @classmethod
    def parse(cls, value: str | None) -> "SummaryStyle":
        try:
            return cls(value)
        except ValueError:
            return cls.bullets


class SummaryFocus(str, Enum):
    overview = "overview"
    data = "data"
    methods = "methods"

    @classmethod
    def parse(cls, value: str | None) -> "SummaryFocus":
        try:
            return cls(value)
        except ValueError:
            return cls.overview


class BlockKind(str, Enum):
    point = "point"
    section = "section"
    heading = "heading"
