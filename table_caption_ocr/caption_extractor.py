from __future__ import annotations

import logging
import re
from typing import List, Optional

from . import config
from .text_utils import apply_ocr_substitutions, split_lines, trim
from .types import TableRecord

log = logging.getLogger("table_caption_ocr")


def caption_pattern(marker: str = config.CAPTION_MARKER) -> "re.Pattern[str]":
    # marker, whitespace, digits/periods identifier, optional whitespace + title to end of line
    return re.compile(re.escape(marker) + r"\s+([\d.]+)(?:\s+(.*))?")


class CaptionExtractor:
    """
    Find "Таблица N Title" caption lines in OCR text.

    One record per matching line, in line order. Captions broken across two lines
    by OCR are not stitched back together.
    """

    def __init__(self, *, marker: str = config.CAPTION_MARKER) -> None:
        self.marker = str(marker)
        self._pattern = caption_pattern(self.marker)

    def extract(self, text: str) -> List[TableRecord]:
        fixed = apply_ocr_substitutions(text)
        out: List[TableRecord] = []
        for line in split_lines(fixed):
            rec = self.parse_line(line)
            if rec is not None:
                out.append(rec)
        log.debug("Extracted %d caption(s)", len(out))
        return out

    def parse_line(self, line: str) -> Optional[TableRecord]:
        m = self._pattern.search(line)
        if not m:
            return None
        return TableRecord(identifier=m.group(1), title=trim(m.group(2)))


def extract(text: str) -> List[TableRecord]:
    return CaptionExtractor().extract(text)
