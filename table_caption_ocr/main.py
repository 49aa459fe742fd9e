from __future__ import annotations

import argparse
import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from . import config
from .caption_extractor import CaptionExtractor
from .errors import CaptionOCRError, InputUnavailableError, RecognitionEngineError
from .image_loader import ImageLoader
from .ocr_processor import TextRecognizer
from .order_validator import STRATEGIES, OrderValidator
from .types import CaptionReport, TableRecord
from .utils import Timer, dump_json, env_flag, setup_logging, to_jsonable

log = logging.getLogger("table_caption_ocr")


def _get_tqdm():
    """
    Optional progress bar dependency.
    If tqdm isn't installed, return None and we fall back to simple progress logs.
    """
    try:
        from tqdm import tqdm  # type: ignore

        return tqdm
    except Exception:
        return None


def _iter_images(root: Path) -> List[Path]:
    suffixes = tuple(config.IMAGE_SUFFIXES)
    if root.is_file():
        return [root] if root.suffix.lower() in suffixes else []
    return [p for p in sorted(root.rglob("*")) if p.is_file() and p.suffix.lower() in suffixes]


def analyze_text(text: str, *, strategy: str = config.ORDER_STRATEGY) -> CaptionReport:
    """
    Run caption extraction + numbering validation over already-recognized text.
    """
    tables = CaptionExtractor().extract(text)
    validator = OrderValidator(strategy=strategy)
    return CaptionReport(tables=tables, misordered=validator.find_misordered(tables), strategy=validator.strategy)


def format_report(report: CaptionReport) -> str:
    lines: List[str] = []
    for t in report.tables:
        lines.append(f"Номер таблицы: {t.identifier}")
        lines.append(f"Название таблицы: {t.title}")
        lines.append("----")
    if report.misordered:
        lines.append("")
        lines.append("Неправильно пронумерованы таблицы: " + " ".join(report.misordered))
    return "\n".join(lines)


def _report_payload(report: CaptionReport) -> Dict[str, Any]:
    return {
        "tables": to_jsonable(report.tables),
        "misordered": list(report.misordered),
        "strategy": report.strategy,
    }


def process_image(
    image_path: str,
    *,
    strategy: str = config.ORDER_STRATEGY,
    recognizer: Optional[TextRecognizer] = None,
    loader: Optional[ImageLoader] = None,
) -> Dict[str, Any]:
    """
    Load one scan, OCR it and analyze the captions.

    Loader/recognizer failures propagate as InputUnavailableError / RecognitionEngineError.
    """
    timings: Dict[str, float] = {}
    recognizer = recognizer or TextRecognizer()
    loader = loader or ImageLoader()

    with Timer() as t:
        img = loader.load_image(image_path)
    timings["step1_load_image_s"] = float(t.dt or 0.0)

    with Timer() as t:
        recognized = recognizer.recognize(img, Path(image_path).name)
    timings["step2_ocr_s"] = float(t.dt or 0.0)

    with Timer() as t:
        report = analyze_text(recognized.text, strategy=strategy)
    timings["step3_analyze_s"] = float(t.dt or 0.0)

    log.info(
        "%s: %d caption(s), %d numbering violation(s)",
        Path(image_path).name,
        len(report.tables),
        len(report.misordered) // 2,
    )
    if env_flag(config.DEBUG_ENV):
        log.debug("Recognized text for %s:\n%s", image_path, recognized.text)

    return {
        "status": "ok",
        "metadata": {
            "image_path": str(image_path),
            "languages": recognized.languages,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "timings": {k: round(float(v), 3) for k, v in timings.items()},
        },
        **_report_payload(report),
    }


def process_inputs(
    input_path: str,
    *,
    strategy: str = config.ORDER_STRATEGY,
    recognizer: Optional[TextRecognizer] = None,
    workers: int = config.BATCH_WORKERS,
    progress: bool = True,
) -> Dict[str, Any]:
    """
    Run `process_image()` for one image or every image under a directory.

    Each image is independent; a failing image is recorded with status="error"
    and does not stop the batch.
    """
    in_root = Path(input_path)
    if not in_root.exists():
        raise InputUnavailableError(f"Input not found: {in_root}")
    images = _iter_images(in_root)
    if not images:
        raise InputUnavailableError(f"No images found under: {in_root}")

    recognizer = recognizer or TextRecognizer()
    OrderValidator(strategy=strategy)  # fail fast on a bad strategy name

    def _one(p: Path) -> Dict[str, Any]:
        try:
            return process_image(str(p), strategy=strategy, recognizer=recognizer)
        except CaptionOCRError as e:
            log.error("%s: %s", p, e)
            return {"status": "error", "kind": e.kind, "error": str(e), "metadata": {"image_path": str(p)}}

    tqdm_mod = _get_tqdm() if progress else None
    items: List[Dict[str, Any]] = []
    with ThreadPoolExecutor(max_workers=max(1, int(workers))) as ex:
        it = ex.map(_one, images)
        if tqdm_mod is not None:
            it = tqdm_mod(it, total=len(images), desc="Processing images", unit="img")
        for i, r in enumerate(it, start=1):
            items.append(r)
            if tqdm_mod is None and progress and (i % 5 == 0 or i == len(images)):
                log.info("Progress %d/%d", i, len(images))

    ok = sum(1 for r in items if r.get("status") == "ok")
    return {
        "input": str(in_root),
        "total": int(len(images)),
        "ok": int(ok),
        "failed": int(len(items) - ok),
        "items": items,
    }


def _print_item(item: Dict[str, Any]) -> None:
    if item.get("status") != "ok":
        return
    report = CaptionReport(
        tables=[TableRecord(identifier=str(t["identifier"]), title=str(t["title"])) for t in item.get("tables") or []],
        misordered=list(item.get("misordered") or []),
        strategy=str(item.get("strategy") or config.ORDER_STRATEGY),
    )
    out = format_report(report)
    if out:
        print(out)


def _batch_exit_code(summary: Dict[str, Any]) -> int:
    """
    0 when every image succeeded, 1 if any image hit a recognition engine failure,
    otherwise 2 (only unreadable inputs failed).
    """
    kinds = {str(item.get("kind") or "") for item in summary.get("items") or [] if item.get("status") != "ok"}
    if not kinds:
        return 0
    if RecognitionEngineError.kind in kinds:
        return 1
    return 2


def _cli(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Extract table captions from a scanned page and flag out-of-order numbering.")
    ap.add_argument("--input", default=config.DEFAULT_IMAGE_PATH, help="Image path OR a directory to scan recursively. Default: %(default)s")
    ap.add_argument("--text-file", default=None, help="Analyze an already-recognized UTF-8 text file instead of running OCR.")
    ap.add_argument("--strategy", choices=sorted(STRATEGIES), default=config.ORDER_STRATEGY, help="Identifier comparison. Default: %(default)s")
    ap.add_argument("--lang", default="+".join(config.OCR_LANGUAGES), help="Tesseract languages. Default: %(default)s")
    ap.add_argument("--tessdata-dir", default=None, help=f"Tesseract tessdata directory. Default: ${config.TESSDATA_ENV}")
    ap.add_argument("--json", action="store_true", help="Print a JSON report instead of the console listing.")
    ap.add_argument("--workers", type=int, default=config.BATCH_WORKERS, help="Parallel images in directory mode.")
    ap.add_argument("--no-progress", action="store_true", help="Disable progress bar / progress logs.")
    ap.add_argument("--verbose", action="store_true", help="Debug logging.")
    args = ap.parse_args(argv)

    setup_logging(level=logging.DEBUG if (args.verbose or env_flag(config.DEBUG_ENV)) else logging.INFO)

    try:
        if args.text_file:
            p = Path(args.text_file)
            try:
                text = p.read_text(encoding="utf-8")
            except OSError as e:
                raise InputUnavailableError(f"Text file not readable: {p} ({e})") from e
            report = analyze_text(text, strategy=args.strategy)
            if args.json:
                print(dump_json(_report_payload(report)))
            else:
                out = format_report(report)
                if out:
                    print(out)
            return 0

        recognizer = TextRecognizer(languages=str(args.lang).split("+"), tessdata_dir=args.tessdata_dir)
        in_path = Path(args.input)
        if in_path.is_dir():
            summary = process_inputs(
                str(in_path),
                strategy=args.strategy,
                recognizer=recognizer,
                workers=int(args.workers),
                progress=not bool(args.no_progress),
            )
            if args.json:
                print(dump_json(summary))
            else:
                for item in summary["items"]:
                    print(f"=== {item['metadata']['image_path']}")
                    _print_item(item)
            return _batch_exit_code(summary)

        result = process_image(str(in_path), strategy=args.strategy, recognizer=recognizer)
        if args.json:
            print(dump_json(result))
        else:
            _print_item(result)
        return 0
    except InputUnavailableError as e:
        log.error("Input unavailable: %s", e)
        return 2
    except RecognitionEngineError as e:
        log.error("Recognition engine failure: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(_cli())
