import re

from markupsafe import Markup, escape

EMPHASIS_OPEN = "<mark>"
EMPHASIS_CLOSE = "</mark>"

NEAR_DUPLICATE_RATIO = 0.7

# ASCII mode keeps \d and \b on Latin digits/letters only.
NUMBER_RE = re.compile(r"\d+(?:[.,]\d+)?%?|\$[\d,]+", re.ASCII)
P_VALUE_PATTERN = r"p\s*[<>=]\s*0?\.\d+"

# p-values first so "p < 0.05" is wrapped whole instead of just "0.05".
_EMPHASIS_RE = re.compile(rf"{P_VALUE_PATTERN}|{NUMBER_RE.pattern}", re.ASCII | re.IGNORECASE)
_TERMINAL_RE = re.compile(r"[.!?]$")


def is_near_duplicate(a: str, b: str) -> bool:
    words_a = set(a.lower().split())
    words_b = set(b.lower().split())
    largest = max(len(words_a), len(words_b))
    if not largest:
        return False
    return len(words_a & words_b) / largest > NEAR_DUPLICATE_RATIO


def ensure_terminal_punctuation(text: str) -> str:
    text = text.strip()
    if not _TERMINAL_RE.search(text):
        text += "."
    return text


def emphasize(text: str) -> str:
    """Wrap numbers, amounts and p-values in emphasis markers.

    The result is an HTML-safe fragment: source text is escaped, so a literal
    "<mark>" coming from the PDF can never be mistaken for a marker.
    """
    parts: list[str] = []
    last = 0
    for m in _EMPHASIS_RE.finditer(text):
        parts.append(escape(text[last:m.start()]))
        parts.append(f"{EMPHASIS_OPEN}{escape(m.group(0))}{EMPHASIS_CLOSE}")
        last = m.end()
    parts.append(escape(text[last:]))
    return "".join(parts)


def strip_emphasis(text: str) -> str:
    return Markup(text.replace(EMPHASIS_OPEN, "").replace(EMPHASIS_CLOSE, "")).unescape()
