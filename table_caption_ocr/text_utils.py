from __future__ import annotations

import re
from typing import Dict, List, Optional

from . import config

_OCR_FIXES = str.maketrans(config.OCR_CHAR_SUBSTITUTIONS)
_LINE_BREAK_RE = re.compile(r"\r\n|\n|\r")


def apply_ocr_substitutions(text: str, table: Optional[Dict[str, str]] = None) -> str:
    """
    Replace characters Tesseract commonly confuses in captions (`|` read instead of `1`).

    Applied to the whole text at once; everything else is preserved.
    """
    trans = _OCR_FIXES if table is None else str.maketrans(table)
    return (text or "").translate(trans)


def trim(s: Optional[str]) -> str:
    return (s or "").strip()


def split_lines(text: str) -> List[str]:
    # Only CR/LF end a line; form feeds and other separators stay inside it.
    if not text:
        return []
    return _LINE_BREAK_RE.split(text)
