"""
Central configuration for the caption OCR pipeline.

All "magic numbers" and fixed strings live here so tuning for new scan batches is easy.
"""

from __future__ import annotations

# -------------------------
# Input
# -------------------------
DEFAULT_IMAGE_PATH: str = "4.png"
IMAGE_SUFFIXES: tuple[str, ...] = (".png", ".jpg", ".jpeg", ".tif", ".tiff", ".bmp")

# -------------------------
# OCR (Tesseract)
# -------------------------
OCR_LANGUAGES: list[str] = ["eng", "rus"]
OCR_ENGINE_MODE: int = 1  # LSTM only
OCR_PAGE_SEG_MODE: int = 3  # fully automatic page segmentation
TESSDATA_ENV: str = "TESSDATA_PREFIX"
TESSERACT_CMD_ENV: str = "TESSERACT_CMD"

# -------------------------
# Caption parsing
# -------------------------
CAPTION_MARKER: str = "Таблица"
# Single OCR confusion fix applied to the whole text before matching.
OCR_CHAR_SUBSTITUTIONS: dict[str, str] = {"|": "1"}

# -------------------------
# Order validation
# -------------------------
ORDER_START_IDENTIFIER: str = "0"
ORDER_STRATEGY: str = "string"  # supported: "string" or "dotted"

# -------------------------
# Batch processing
# -------------------------
BATCH_WORKERS: int = 1

# -------------------------
# Debugging
# -------------------------
DEBUG_ENV: str = "TABLE_CAPTION_OCR_DEBUG"
