from table_caption_ocr.text_utils import apply_ocr_substitutions, split_lines, trim


def test_pipe_becomes_one_everywhere():
    assert apply_ocr_substitutions("Таб|ица 3|1 |") == "Таб1ица 311 1"


def test_other_characters_untouched():
    assert apply_ocr_substitutions("Таблица 3.1 — Итог\n") == "Таблица 3.1 — Итог\n"


def test_custom_substitution_table():
    assert apply_ocr_substitutions("O1", {"O": "0"}) == "01"


def test_none_inputs():
    assert apply_ocr_substitutions(None) == ""
    assert trim(None) == ""
    assert split_lines(None) == []
    assert split_lines("") == []


def test_trim_and_split():
    assert trim("  Итог \t") == "Итог"
    assert split_lines("a\r\nb\nc\rd") == ["a", "b", "c", "d"]


def test_split_lines_keeps_other_separators_inside_line():
    assert split_lines("a\x0cb\x85c\u2028d\ne") == ["a\x0cb\x85c\u2028d", "e"]
