from __future__ import annotations


class InputError(Exception):
    """Raised before the summary pipeline runs when an upload cannot be used."""

    code = "invalid_input"
    status_code = 400

    def __init__(self, message: str | None = None):
        super().__init__(message or self.code)


class ExtractionError(InputError):
    code = "pdf_not_parseable"
    status_code = 422


class NoTextLayerError(ExtractionError):
    code = "pdf_has_no_text"


class DocumentTooLargeError(InputError):
    code = "file_too_large"
    status_code = 413


class TooManyPagesError(InputError):
    code = "too_many_pages"
    status_code = 413
