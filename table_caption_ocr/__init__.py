"""
Table caption OCR checker.

Extracts "Таблица N Title" captions from OCR-recognized text and flags tables whose
numbering does not increase.
"""

from .caption_extractor import CaptionExtractor, extract
from .main import analyze_text, process_image, process_inputs
from .order_validator import OrderValidator, find_misordered
from .types import CaptionReport, TableRecord

__all__ = [
    "CaptionExtractor",
    "CaptionReport",
    "OrderValidator",
    "TableRecord",
    "analyze_text",
    "extract",
    "find_misordered",
    "process_image",
    "process_inputs",
]
