"""Tests for output rendering."""
import json

import pytest

from factorio_bp.errors import DataError
from factorio_bp.render import OutputFormat, render_debug, render_json, render_output


def test_json_output_is_decompressed_text(blueprint_json):
    assert render_output(blueprint_json, OutputFormat.JSON) == blueprint_json


def test_pretty_json_is_same_value(blueprint_json):
    pretty = render_json(blueprint_json, pretty=True)
    assert "\n  " in pretty
    assert json.loads(pretty) == json.loads(blueprint_json)


def test_debug_output(blueprint_json, book_json):
    assert render_output(blueprint_json, OutputFormat.DEBUG).startswith("Blueprint(")
    book_text = render_output(book_json, "debug")
    assert book_text.startswith("BlueprintBook(")
    assert "Starter book" in book_text


@pytest.mark.parametrize("fmt", list(OutputFormat))
def test_unrecognized_document_fails_for_every_format(fmt):
    with pytest.raises(DataError):
        render_output('{"upgrade_planner": {}}', fmt)


def test_unknown_format():
    with pytest.raises(ValueError):
        render_output("{}", "yaml")


def test_render_debug_is_repr(blueprint_json):
    from factorio_bp.codec import parse_document

    doc = parse_document(blueprint_json)
    assert render_debug(doc) == repr(doc) + "\n"
