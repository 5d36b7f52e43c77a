import re
import sqlite3
from pathlib import Path
from urllib.parse import quote

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from fastapi.templating import Jinja2Templates
from markupsafe import Markup

from pdfbrief.features.documents.service import document_to_dict
from pdfbrief.features.summary.export import (
    DOCX_MIME_TYPE,
    build_docx_export,
    build_txt_export,
    export_filename,
)
from pdfbrief.features.summary.models import RenderedOutput, SelectionSettings
from pdfbrief.features.summary.schemas import SummaryRequest
from pdfbrief.features.summary.service import generate_summary
from pdfbrief.features.summary.textutils import EMPHASIS_CLOSE, EMPHASIS_OPEN
from pdfbrief.infra.repo_documents import DocumentRepo, DocumentRow
from pdfbrief.infra.repo_pages import PageRepo

router = APIRouter(prefix="/documents", tags=["summary"])

# Anything outside printable ASCII, plus quote and backslash, cannot go in a quoted filename.
_UNSAFE_FILENAME_RE = re.compile(r"[^\x20-\x7e]|[\"\\]")

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[2] / "templates"))


def _emphasis_html(text: str) -> Markup:
    # Point text is already escaped; only the markers become tags.
    return Markup(text.replace(EMPHASIS_OPEN, '<span class="highlight">').replace(EMPHASIS_CLOSE, "</span>"))


templates.env.filters["emphasis"] = _emphasis_html


def _summarize(conn: sqlite3.Connection, document_id: int, settings: SelectionSettings) -> tuple[DocumentRow, RenderedOutput]:
    try:
        doc = DocumentRepo(conn).get(document_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="document_not_found")
    pages = PageRepo(conn).list_for_document(document_id)
    return doc, generate_summary(pages, settings)


def _attachment(filename: str) -> dict[str, str]:
    fallback = _UNSAFE_FILENAME_RE.sub("_", filename)
    return {"Content-Disposition": f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"}


@router.post("/{document_id}/summary")
def create_summary(request: Request, document_id: int, body: SummaryRequest | None = None) -> dict[str, object]:
    settings = (body or SummaryRequest()).to_settings()
    doc, output = _summarize(request.app.state.db, document_id, settings)
    return {
        "document": document_to_dict(doc),
        "settings": {
            "length": settings.length.value,
            "style": settings.style.value,
            "focus": settings.focus.value,
        },
        "summary": output.to_dict(),
    }


@router.get("/{document_id}/summary.txt", response_class=PlainTextResponse)
def download_txt(
    request: Request,
    document_id: int,
    length: str = "medium",
    style: str = "bullets",
    focus: str = "overview",
) -> PlainTextResponse:
    settings = SelectionSettings.from_values(length=length, style=style, focus=focus)
    doc, output = _summarize(request.app.state.db, document_id, settings)
    text = build_txt_export(output, filename=doc.filename, page_count=doc.page_count, word_count=doc.word_count)
    return PlainTextResponse(text, headers=_attachment(export_filename(doc.filename, ".txt")))


@router.get("/{document_id}/summary.docx")
def download_docx(
    request: Request,
    document_id: int,
    length: str = "medium",
    style: str = "bullets",
    focus: str = "overview",
) -> Response:
    settings = SelectionSettings.from_values(length=length, style=style, focus=focus)
    doc, output = _summarize(request.app.state.db, document_id, settings)
    data = build_docx_export(output, filename=doc.filename, page_count=doc.page_count, word_count=doc.word_count)
    return Response(
        content=data,
        media_type=DOCX_MIME_TYPE,
        headers=_attachment(export_filename(doc.filename, ".docx")),
    )


@router.get("/{document_id}/summary.html", response_class=HTMLResponse)
def view_summary(
    request: Request,
    document_id: int,
    length: str = "medium",
    style: str = "bullets",
    focus: str = "overview",
) -> HTMLResponse:
    settings = SelectionSettings.from_values(length=length, style=style, focus=focus)
    doc, output = _summarize(request.app.state.db, document_id, settings)
    return templates.TemplateResponse(
        request,
        "summary.html",
        {
            "title": f"Summary: {doc.filename}",
            "document": doc,
            "settings": settings,
            "output": output,
        },
    )
