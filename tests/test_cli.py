"""Tests for the command line interface."""

import orjson
import pytest

from calendar_rich.cli import build_parser, main


def test_enrich_prints_json(capsys):
    main(["enrich", "Morning :run: :check:"])

    payload = orjson.loads(capsys.readouterr().out)
    assert payload == {
        "original_title": "Morning :run: :check:",
        "title": "Morning 🏃‍♂️ ✅",
        "category": "RUN",
        "tags": [":run:", ":check:"],
    }


def test_tags_lists_the_table(capsys):
    main(["tags"])

    lines = capsys.readouterr().out.splitlines()
    assert ":run:\t🏃‍♂️\tRUN" in lines
    assert ":star:\t⭐\tnone" in lines


def test_command_is_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
