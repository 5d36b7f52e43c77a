import logging

import fitz  # PyMuPDF

from pdfbrief.domain.errors import ExtractionError, NoTextLayerError, TooManyPagesError
from pdfbrief.features.summary.models import PageText

logger = logging.getLogger(__name__)


def extract_pages(data: bytes, *, max_pages: int | None = None) -> list[PageText]:
    """Read the text layer of every page, in page order.

    Pages without text are kept (as empty strings) so page numbers and the
    first/last page positions stay aligned with the source document.
    """

    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except (RuntimeError, ValueError) as e:
        logger.warning("PDF could not be opened: %s", e)
        raise ExtractionError(str(e)) from e

    with doc:
        if doc.needs_pass:
            logger.warning("PDF is password protected")
            raise ExtractionError("document is encrypted")
        if doc.page_count == 0:
            raise ExtractionError("document has no pages")
        if max_pages is not None and doc.page_count > max_pages:
            raise TooManyPagesError(f"{doc.page_count} pages, limit is {max_pages}")

        pages: list[PageText] = []
        for i in range(doc.page_count):
            page = doc.load_page(i)
            text = page.get_text("text") or ""
            pages.append(PageText(page_number=i + 1, text=text))

    if not any(p.text.strip() for p in pages):
        logger.warning("PDF has %d page(s) but no extractable text", len(pages))
        raise NoTextLayerError()

    return pages
