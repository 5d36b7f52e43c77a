import hashlib
import logging
import sqlite3

from fastapi import HTTPException, UploadFile

from pdfbrief.config import AppConfig
from pdfbrief.domain.errors import DocumentTooLargeError
from pdfbrief.infra.pdf_text import extract_pages
from pdfbrief.infra.repo_documents import DocumentRepo, DocumentRow
from pdfbrief.infra.repo_pages import PageRepo

logger = logging.getLogger(__name__)


def document_to_dict(doc: DocumentRow) -> dict[str, object]:
    return {
        "document_id": doc.id,
        "filename": doc.filename,
        "sha256": doc.sha256,
        "page_count": doc.page_count,
        "word_count": doc.word_count,
        "created_at": doc.created_at,
    }


class DocumentsService:
    def __init__(self, *, conn: sqlite3.Connection, cfg: AppConfig) -> None:
        self._conn = conn
        self._cfg = cfg

    async def upload(self, *, file: UploadFile) -> dict[str, object]:
        data = await file.read()
        if not data:
            raise HTTPException(status_code=400, detail="empty_file")

        filename = file.filename or "document.pdf"
        if not filename.lower().endswith(".pdf"):
            raise HTTPException(status_code=400, detail="only_pdf_supported")

        if len(data) > self._cfg.max_upload_bytes:
            raise DocumentTooLargeError(f"{len(data)} bytes, limit is {self._cfg.max_upload_bytes}")

        pages = extract_pages(data, max_pages=self._cfg.max_pages)
        word_count = len(" ".join(p.text for p in pages).split())

        doc = DocumentRepo(self._conn).create(
            filename=filename,
            sha256=hashlib.sha256(data).hexdigest(),
            page_count=len(pages),
            word_count=word_count,
        )
        PageRepo(self._conn).insert_many(doc.id, pages)

        logger.info("Stored document %d (%s): %d page(s), %d word(s)", doc.id, filename, len(pages), word_count)
        return document_to_dict(doc)

    def get(self, *, document_id: int) -> DocumentRow:
        try:
            return DocumentRepo(self._conn).get(document_id)
        except KeyError:
            raise HTTPException(status_code=404, detail="document_not_found")

    def delete(self, *, document_id: int) -> dict[str, object]:
        try:
            DocumentRepo(self._conn).delete(document_id)
        except KeyError:
            raise HTTPException(status_code=404, detail="document_not_found")
        logger.info("Deleted document %d", document_id)
        return {"document_id": document_id, "deleted": True}
