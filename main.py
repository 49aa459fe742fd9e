#!/usr/bin/env python3
"""
Convenience entrypoint for the table caption checker.

This file delegates to `table_caption_ocr.main` so you can run:

  python main.py --input 4.png
  python main.py --input path/to/folder --json
  python main.py --text-file recognized.txt --strategy dotted
"""

from __future__ import annotations

try:
    from table_caption_ocr.main import _cli
except ModuleNotFoundError as e:  # pragma: no cover
    if getattr(e, "name", "") == "cv2":
        raise SystemExit(
            "Missing dependency: OpenCV (cv2).\n"
            "Install project deps (in your venv):\n"
            "  python -m pip install -e .\n"
        ) from e
    raise

if __name__ == "__main__":
    raise SystemExit(_cli())
