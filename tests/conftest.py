import sys
from pathlib import Path

import fitz  # PyMuPDF
import pytest


def pytest_configure() -> None:
    # Ensure `import pdfbrief...` works without installing the package.
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))


SAMPLE_SENTENCES = [
    "Researchers in Boston reported that 42% of participants preferred the redesigned interface, a key outcome",
    "Annual revenue climbed to $3,400 per customer during 2019, which remains the main commercial highlight",
    "Soil samples collected near Denver contained 17 distinct bacterial strains, an important ecological signal",
    "Patients receiving the higher dose recovered within 9 days on average, a significant clinical improvement",
    "Survey responses from Kenya favoured solar microgrids as the primary energy source, with 63 villages participating",
    "Engineers in Oslo reduced turbine vibration by 30 percent, and that reduction was their final finding",
    "Teachers across Ohio observed reading scores rise by 12 points, the most important classroom trend",
    "Fishermen along Chile's coast caught 25 tonnes less anchovy, a key warning for regional fisheries",
]

FILLER = "Short line. the cat sat on the mat and looked out of the window for a while"


@pytest.fixture
def sample_sentences() -> list[str]:
    return list(SAMPLE_SENTENCES)


@pytest.fixture
def sample_page_texts() -> list[str]:
    s = SAMPLE_SENTENCES
    return [
        f"{s[0]}. {FILLER}. {s[1]}.",
        f"{s[2]}. {s[3]}! {s[4]}?",
        f"{s[5]}. {s[6]}. {FILLER}. {s[7]}.",
    ]


@pytest.fixture
def make_pdf():
    def _make(page_texts: list[str], *, user_pw: str | None = None) -> bytes:
        doc = fitz.open()
        for text in page_texts:
            page = doc.new_page()
            if text:
                page.insert_textbox(fitz.Rect(50, 50, 550, 800), text, fontsize=10)
        if user_pw:
            data = doc.tobytes(encryption=fitz.PDF_ENCRYPT_AES_256, user_pw=user_pw, owner_pw=user_pw + "-owner")
        else:
            data = doc.tobytes()
        doc.close()
        return data

    return _make
