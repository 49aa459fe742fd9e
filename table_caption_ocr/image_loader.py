from __future__ import annotations

import logging
from pathlib import Path

import cv2
import numpy as np

from .errors import InputUnavailableError

log = logging.getLogger("table_caption_ocr")


class ImageLoader:
    """
    Image file → OpenCV BGR array. No preprocessing beyond decoding.
    """

    def __init__(self, *, flags: int = cv2.IMREAD_COLOR) -> None:
        self.flags = int(flags)

    def load_image(self, image_path: str | Path) -> np.ndarray:
        p = Path(image_path)
        if not p.is_file():
            raise InputUnavailableError(f"Image not found: {p}")

        # cv2.imread can't open non-ASCII paths on Windows; decode from bytes instead.
        try:
            buf = np.fromfile(str(p), dtype=np.uint8)
        except OSError as e:
            raise InputUnavailableError(f"Failed to read image: {p} ({e})") from e

        img = cv2.imdecode(buf, self.flags) if buf.size else None
        if img is None or img.size == 0:
            raise InputUnavailableError(f"Image could not be decoded: {p}")

        h, w = img.shape[:2]
        log.info("Loaded image %s: %d×%dpx", p.name, w, h)
        return img
