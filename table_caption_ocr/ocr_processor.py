from __future__ import annotations

import logging
import os
from typing import Dict, List, Optional

import cv2
import numpy as np

from . import config
from .errors import RecognitionEngineError
from .types import RecognizedText

log = logging.getLogger("table_caption_ocr")

_LANG_ALIASES = {"en": "eng", "ru": "rus"}


def tesseract_languages(langs: List[str]) -> str:
    """
    Map ISO-ish hints to Tesseract language packs and join them ("eng+rus").
    """
    mapped: List[str] = []
    for lang in (langs or []):
        x = str(lang or "").strip().lower()
        if not x:
            continue
        x = _LANG_ALIASES.get(x, x)
        if x not in mapped:
            mapped.append(x)
    return "+".join(mapped) if mapped else "eng+rus"


class TextRecognizer:
    """
    Tesseract OCR via pytesseract.

    Returns the raw UTF-8 text; caption parsing is left to CaptionExtractor.
    """

    def __init__(
        self,
        *,
        languages: Optional[List[str]] = None,
        oem: int = config.OCR_ENGINE_MODE,
        psm: int = config.OCR_PAGE_SEG_MODE,
        tessdata_dir: Optional[str] = None,
        tesseract_cmd: Optional[str] = None,
    ) -> None:
        self.languages = tesseract_languages(list(languages or config.OCR_LANGUAGES))
        self.oem = int(oem)
        self.psm = int(psm)
        self.tessdata_dir = tessdata_dir or (os.environ.get(config.TESSDATA_ENV) or "").strip() or None
        self.tesseract_cmd = tesseract_cmd or (os.environ.get(config.TESSERACT_CMD_ENV) or "").strip() or None

    def tesseract_config(self) -> str:
        parts = [f"--oem {self.oem}", f"--psm {self.psm}"]
        if self.tessdata_dir:
            parts.append(f'--tessdata-dir "{self.tessdata_dir}"')
        return " ".join(parts)

    def recognize(self, image: np.ndarray, image_id: str = "image") -> RecognizedText:
        pytesseract = self._import_pytesseract()

        if image.ndim == 3 and image.shape[2] == 3:
            img = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
        elif image.ndim == 3 and image.shape[2] == 4:
            img = cv2.cvtColor(image, cv2.COLOR_BGRA2RGB)
        else:
            img = image

        try:
            txt = pytesseract.image_to_string(img, lang=self.languages, config=self.tesseract_config())
        except pytesseract.TesseractNotFoundError as e:
            raise RecognitionEngineError(
                f"Tesseract binary not found (set {config.TESSERACT_CMD_ENV} or add it to PATH): {e}"
            ) from e
        except pytesseract.TesseractError as e:
            raise RecognitionEngineError(f"Tesseract failed for {image_id} (lang={self.languages}): {e}") from e

        log.info("Recognized %d character(s) from %s", len(txt or ""), image_id)
        return RecognizedText(image_id=str(image_id), text=str(txt or ""), languages=self.languages, provider="tesseract")

    def batch_recognize(self, images: List[np.ndarray], image_ids: List[str]) -> Dict[str, RecognizedText]:
        if len(images) != len(image_ids):
            raise ValueError("images and image_ids length mismatch")
        return {img_id: self.recognize(img, img_id) for img, img_id in zip(images, image_ids)}

    def _import_pytesseract(self):
        try:
            import pytesseract  # type: ignore
        except ModuleNotFoundError as e:  # pragma: no cover
            raise RecognitionEngineError("pytesseract is not installed") from e
        if self.tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = self.tesseract_cmd
        return pytesseract
