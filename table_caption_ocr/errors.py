from __future__ import annotations


class CaptionOCRError(RuntimeError):
    """Base class for failures raised before caption analysis can start."""

    kind: str = "error"


class InputUnavailableError(CaptionOCRError):
    kind = "input_unavailable"


class RecognitionEngineError(CaptionOCRError):
    kind = "recognition_engine_failure"
