import re
from typing import Iterator

from pdfbrief.features.summary.models import PageText

_WS_RE = re.compile(r"\s+")
_TERMINATORS_RE = re.compile(r"[.!?]+")

MIN_CHARS = 40
MIN_WORDS = 8
MAX_WORDS = 50


def split_sentences(page: PageText) -> Iterator[str]:
    """Yield the sentence-like fragments of a page that are long enough to summarize.

    Whitespace is collapsed, the text is cut on runs of ``.``, ``!`` and ``?``,
    and each trimmed fragment is kept only if it has at least 40 characters and
    8 to 50 space-separated words. Call again to restart.
    """

    text = _WS_RE.sub(" ", page.text)
    for fragment in _TERMINATORS_RE.split(text):
        fragment = fragment.strip()
        if len(fragment) < MIN_CHARS:
            continue
        words = len(fragment.split(" "))
        if MIN_WORDS <= words <= MAX_WORDS:
            yield fragment
