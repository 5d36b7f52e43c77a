import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AppConfig:
    data_dir: Path
    max_upload_bytes: int = 30 * 1024 * 1024
    max_pages: int = 100
    log_level: str = "INFO"

    @property
    def db_path(self) -> Path:
        return self.data_dir / "app.sqlite3"


def load_config() -> AppConfig:
    return AppConfig(
        data_dir=Path(os.environ.get("PDFBRIEF_DATA_DIR", "data")),
        max_upload_bytes=int(os.environ.get("PDFBRIEF_MAX_UPLOAD_MB", "30")) * 1024 * 1024,
        max_pages=int(os.environ.get("PDFBRIEF_MAX_PAGES", "100")),
        log_level=os.environ.get("PDFBRIEF_LOG_LEVEL", "INFO").upper(),
    )
