"""
End-to-end tests for the factorio-bp command line.

Tests:
- decode to JSON and debug text
- encode, then decode back
- validate exit status
- failures exit non-zero and write nothing
"""
import json

import pytest

from factorio_bp.cli import main
from factorio_bp.codec import encode


@pytest.fixture
def infile(tmp_path, blueprint_string):
    path = tmp_path / "bp.txt"
    path.write_text(blueprint_string, encoding="utf-8")
    return path


def test_decode_json(infile, tmp_path, blueprint_json):
    out = tmp_path / "out.json"
    code = main(["decode", "-i", str(infile), "-o", str(out), "--outform", "json"])

    assert code == 0
    assert out.read_text(encoding="utf-8") == blueprint_json


def test_decode_debug(infile, tmp_path):
    out = tmp_path / "out.txt"
    code = main(["decode", "-i", str(infile), "-o", str(out), "--outform", "debug", "-v"])

    assert code == 0
    assert out.read_text(encoding="utf-8").startswith("Blueprint(")


def test_encode_round_trip(tmp_path, book_json):
    source = tmp_path / "book.json"
    source.write_text(book_json, encoding="utf-8")
    encoded = tmp_path / "book.txt"
    decoded = tmp_path / "book.out.json"

    assert main(["encode", "-i", str(source), "-o", str(encoded), "--line-width", "60"]) == 0
    assert max(len(line) for line in encoded.read_text(encoding="utf-8").splitlines()) <= 60

    assert main(["decode", "-i", str(encoded), "-o", str(decoded), "--outform", "json"]) == 0
    assert json.loads(decoded.read_text(encoding="utf-8")) == json.loads(book_json)


def test_validate(infile, capsys):
    assert main(["validate", "-i", str(infile)]) == 0
    assert "PASSED" in capsys.readouterr().out


def test_validate_bad_active_index(tmp_path, capsys):
    book = {"blueprint_book": {"blueprints": [], "active_index": 0, "version": 0}}
    path = tmp_path / "book.txt"
    path.write_text(encode(json.dumps(book)), encoding="utf-8")

    assert main(["validate", "-i", str(path)]) == 1
    assert "active_index" in capsys.readouterr().out


def test_decode_with_validate_flag_fails(tmp_path):
    book = {"blueprint_book": {"blueprints": [], "active_index": 3, "version": 0}}
    path = tmp_path / "book.txt"
    path.write_text(encode(json.dumps(book)), encoding="utf-8")
    out = tmp_path / "out.json"

    code = main(["decode", "-i", str(path), "-o", str(out), "--outform", "json", "--validate"])
    assert code == 1
    assert not out.exists()


@pytest.mark.parametrize("content,message", [
    ("0not-base64!!", "base64"),
    (None, "not a blueprint or blueprint book"),
])
def test_decode_failures_write_nothing(tmp_path, capsys, content, message):
    if content is None:
        content = encode('{"something_else": {}}')
    path = tmp_path / "bad.txt"
    path.write_text(content, encoding="utf-8")
    out = tmp_path / "out.json"

    for outform in ("json", "debug"):
        code = main(["decode", "-i", str(path), "-o", str(out), "--outform", outform])
        assert code == 1
        assert not out.exists()
        assert message in capsys.readouterr().err


def test_missing_input(tmp_path, capsys):
    code = main(["decode", "-i", str(tmp_path / "nope.txt"), "-o", str(tmp_path / "o"), "--outform", "json"])
    assert code == 1
    assert "File error" in capsys.readouterr().err


def test_unknown_outform_is_usage_error(infile, tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main(["decode", "-i", str(infile), "-o", str(tmp_path / "o"), "--outform", "yaml"])
    assert exc_info.value.code == 2
