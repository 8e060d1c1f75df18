"""Shared fixtures: known-good exchange strings and their JSON payloads."""
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# Wire version stored in every fixture document
FIXTURE_VERSION = 281479276527616


@pytest.fixture
def blueprint_string() -> str:
    return (FIXTURES_DIR / "blueprint.txt").read_text(encoding="utf-8")


@pytest.fixture
def blueprint_json() -> str:
    return (FIXTURES_DIR / "blueprint.json").read_text(encoding="utf-8")


@pytest.fixture
def book_string() -> str:
    return (FIXTURES_DIR / "blueprint_book.txt").read_text(encoding="utf-8")


@pytest.fixture
def book_json() -> str:
    return (FIXTURES_DIR / "blueprint_book.json").read_text(encoding="utf-8")
