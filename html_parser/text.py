"""html_parser/text.py — normalizacja tekstu wyciągniętego z elementów."""

from __future__ import annotations

import re

# Puste linie (również z białymi znakami) między dwoma \n
_BLANK_LINES_RE = re.compile(r"\n\s*\n")


def clean_text_content(text: str) -> str:
    """Zwija każdy ciąg pustych linii do pojedynczego \\n."""
    return _BLANK_LINES_RE.sub("\n", text)
