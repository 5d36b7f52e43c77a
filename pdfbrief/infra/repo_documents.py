import sqlite3
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class DocumentRow:
    id: int
    filename: str
    sha256: str
    page_count: int
    word_count: int
    created_at: str


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class DocumentRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def create(self, filename: str, sha256: str, page_count: int, word_count: int) -> DocumentRow:
        now = utc_now_iso()
        cur = self._conn.execute(
            """
            INSERT INTO documents(filename, sha256, page_count, word_count, created_at)
            VALUES(?, ?, ?, ?, ?)
            """,
            (filename, sha256, page_count, word_count, now),
        )
        self._conn.commit()
        if cur.lastrowid is None:
            raise RuntimeError("Failed to create document: missing lastrowid")
        return self.get(int(cur.lastrowid))

    def get(self, document_id: int) -> DocumentRow:
        row = self._conn.execute("SELECT * FROM documents WHERE id = ?", (document_id,)).fetchone()
        if row is None:
            raise KeyError(f"Document not found: {document_id}")
        return DocumentRow(
            id=int(row["id"]),
            filename=str(row["filename"]),
            sha256=str(row["sha256"]),
            page_count=int(row["page_count"]),
            word_count=int(row["word_count"]),
            created_at=str(row["created_at"]),
        )

    def delete(self, document_id: int) -> None:
        cur = self._conn.execute("DELETE FROM documents WHERE id = ?", (document_id,))
        self._conn.commit()
        if cur.rowcount == 0:
            raise KeyError(f"Document not found: {document_id}")
