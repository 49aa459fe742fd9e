from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


@dataclass(frozen=True)
class TableRecord:
    """One caption line: dotted identifier (verbatim) and trimmed title."""

    identifier: str
    title: str = ""


@dataclass(frozen=True)
class RecognizedText:
    image_id: str
    text: str
    languages: str
    provider: Literal["tesseract", "unknown"] = "unknown"


@dataclass(frozen=True)
class CaptionReport:
    tables: list[TableRecord] = field(default_factory=list)
    misordered: list[str] = field(default_factory=list)
    strategy: str = "string"

    @property
    def has_anomalies(self) -> bool:
        return bool(self.misordered)
