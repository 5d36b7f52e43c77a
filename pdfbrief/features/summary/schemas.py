from __future__ import annotations

from pydantic import BaseModel, Field

from pdfbrief.features.summary.models import SelectionSettings


class SummaryRequest(BaseModel):
    # Unknown values fall back to the defaults instead of being rejected.
    length: str = Field(default="medium", max_length=32)
    style: str = Field(default="bullets", max_length=32)
    focus: str = Field(default="overview", max_length=32)

    def to_settings(self) -> SelectionSettings:
        return SelectionSettings.from_values(length=self.length, style=self.style, focus=self.focus)
