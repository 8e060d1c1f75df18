"""
Tests for text file IO.

Tests:
- Reading missing files raises FileNotFoundError
- Atomic write creates parents and leaves no temp files
- Failed write leaves no artifact
"""
import os

import pytest

from factorio_bp.io import read_text, write_text_atomic
from factorio_bp.io import text_write


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="Input file not found"):
        read_text(str(tmp_path / "missing.txt"))


def test_write_then_read(tmp_path):
    target = tmp_path / "nested" / "dir" / "out.json"
    write_text_atomic(str(target), '{"blueprint": {}}')

    assert read_text(str(target)) == '{"blueprint": {}}'
    assert os.listdir(target.parent) == ["out.json"]


def test_write_replaces_existing(tmp_path):
    target = tmp_path / "out.txt"
    target.write_text("old", encoding="utf-8")
    write_text_atomic(str(target), "new")
    assert target.read_text(encoding="utf-8") == "new"


def test_failed_write_leaves_nothing(tmp_path, monkeypatch):
    target = tmp_path / "out.txt"

    def boom(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(text_write.os, "replace", boom)

    with pytest.raises(OSError, match="disk full"):
        write_text_atomic(str(target), "data")

    assert not target.exists()
    assert os.listdir(tmp_path) == []
