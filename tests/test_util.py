import re

import pytest

from desktools.status.util import fmt_human, read_int, read_text, warn


def test_fmt_human_zero():
    assert fmt_human(0, 1000) == "0.0 "


def test_fmt_human_binary_kilo():
    assert fmt_human(1024, 1024) == "1.0 Ki"


def test_fmt_human_decimal():
    assert fmt_human(1500, 1000) == "1.5 k"


def test_fmt_human_invalid_base():
    with pytest.raises(ValueError):
        fmt_human(10, 512)


def test_fmt_human_largest_prefix():
    assert fmt_human(10**30, 1000).endswith("Y")
    assert fmt_human(2**90, 1024).endswith("Yi")


@pytest.mark.parametrize("base", [1000, 1024])
@pytest.mark.parametrize("num", [1, 7, 999, 1023, 12345, 10**7, 2**40 + 5])
def test_fmt_human_scaled_below_base(num, base):
    result = fmt_human(num, base)
    number, _, prefix = result.partition(" ")
    assert re.fullmatch(r"\d+\.\d", number)
    assert float(number) < base + 1
    if num < base:
        assert prefix == ""
    else:
        assert prefix != "" and prefix[0] in "kKMGTPEZY"


def test_read_int(tmp_path):
    path = tmp_path / "value"
    path.write_text("42\n")
    assert read_int(path) == 42


def test_read_int_negative_with_trailing(tmp_path):
    path = tmp_path / "value"
    path.write_text("  -17 extra")
    assert read_int(path) == -17


def test_read_int_not_a_number(tmp_path):
    path = tmp_path / "value"
    path.write_text("abc")
    assert read_int(path) is None


def test_read_int_missing(tmp_path, capsys):
    assert read_int(tmp_path / "missing") is None
    assert "fopen" in capsys.readouterr().err


def test_read_text_round_trip(tmp_path):
    path = tmp_path / "text"
    path.write_text("line one\nline two\n")
    assert read_text(path) == "line one\nline two\n"


def test_warn_writes_message(capsys):
    warn("something odd")
    assert capsys.readouterr().err.rstrip("\n").endswith("something odd")


def test_warn_usage_has_no_prefix(capsys):
    warn("usage: prog [-s]")
    assert capsys.readouterr().err == "usage: prog [-s]\n"