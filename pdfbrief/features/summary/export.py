import io

from docx import Document

from pdfbrief.domain.enums import BlockKind
from pdfbrief.features.summary.models import Block, RenderedOutput
from pdfbrief.features.summary.textutils import strip_emphasis

TXT_RULE_WIDTH = 60
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def block_to_line(block: Block) -> str:
    text = strip_emphasis(block.text)
    if block.kind == BlockKind.heading:
        return block.label or text
    page_ref = f"p.{','.join(str(p) for p in block.pages)}"
    if block.kind == BlockKind.section:
        return f"{block.label}: {text} {page_ref}"
    return f"{text} {page_ref}"


def to_plain_text(output: RenderedOutput) -> str:
    return "\n".join(block_to_line(b) for b in output.blocks)


def metadata_line(*, page_count: int, word_count: int) -> str:
    return f"Pages: {page_count} | Words: {word_count}"


def build_txt_export(output: RenderedOutput, *, filename: str, page_count: int, word_count: int) -> str:
    header = (
        f"SUMMARY: {filename}\n"
        f"{'=' * TXT_RULE_WIDTH}\n"
        f"{metadata_line(page_count=page_count, word_count=word_count)}\n\n"
    )
    return header + to_plain_text(output)


def build_docx_export(output: RenderedOutput, *, filename: str, page_count: int, word_count: int) -> bytes:
    doc = Document()
    doc.add_heading(f"Summary: {filename}", level=1)
    doc.add_paragraph(metadata_line(page_count=page_count, word_count=word_count))
    doc.add_paragraph("")

    for block in output.blocks:
        if block.kind == BlockKind.heading:
            doc.add_heading(block_to_line(block), level=2)
        else:
            doc.add_paragraph(block_to_line(block))

    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()


def export_filename(filename: str, ext: str) -> str:
    return f"{filename}_summary{ext}"
