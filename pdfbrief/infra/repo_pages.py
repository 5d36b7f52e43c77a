import sqlite3
from typing import Iterable

from pdfbrief.features.summary.models import PageText


class PageRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def insert_many(self, document_id: int, pages: Iterable[PageText]) -> None:
        self._conn.executemany(
            """
            INSERT INTO pages(document_id, page_number, text)
            VALUES(?, ?, ?)
            ON CONFLICT(document_id, page_number) DO UPDATE SET
              text=excluded.text
            """,
            [(document_id, p.page_number, p.text) for p in pages],
        )
        self._conn.commit()

    def list_for_document(self, document_id: int) -> list[PageText]:
        rows = self._conn.execute(
            "SELECT page_number, text FROM pages WHERE document_id = ? ORDER BY page_number ASC",
            (document_id,),
        ).fetchall()
        return [PageText(page_number=int(r["page_number"]), text=str(r["text"])) for r in rows]
