import cv2
import numpy as np
import pytest

from table_caption_ocr.errors import InputUnavailableError
from table_caption_ocr.image_loader import ImageLoader


def test_load_png_as_bgr(tmp_path):
    p = tmp_path / "page.png"
    img = np.full((40, 60, 3), 255, dtype=np.uint8)
    img[10:20, 10:30] = (0, 0, 255)
    assert cv2.imwrite(str(p), img)

    out = ImageLoader().load_image(p)
    assert out.shape == (40, 60, 3)
    assert tuple(int(v) for v in out[15, 15]) == (0, 0, 255)


def test_non_ascii_path(tmp_path):
    p = tmp_path / "скан.png"
    ok, buf = cv2.imencode(".png", np.zeros((5, 5, 3), dtype=np.uint8))
    assert ok
    p.write_bytes(buf.tobytes())
    assert ImageLoader().load_image(str(p)).shape == (5, 5, 3)


def test_missing_file(tmp_path):
    with pytest.raises(InputUnavailableError) as ei:
        ImageLoader().load_image(tmp_path / "4.png")
    assert ei.value.kind == "input_unavailable"


def test_directory_is_not_an_image(tmp_path):
    with pytest.raises(InputUnavailableError):
        ImageLoader().load_image(tmp_path)


def test_undecodable_file(tmp_path):
    p = tmp_path / "broken.png"
    p.write_bytes(b"not an image")
    with pytest.raises(InputUnavailableError):
        ImageLoader().load_image(p)


def test_empty_file(tmp_path):
    p = tmp_path / "empty.png"
    p.write_bytes(b"")
    with pytest.raises(InputUnavailableError):
        ImageLoader().load_image(p)
