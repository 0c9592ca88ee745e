import json

import pytest

from chip_solver.chips import ChipParseError, ChipSet, ColorChip
from chip_solver.colors import Color


@pytest.mark.parametrize("text", ["blue", "BLUE", "  Blue ", "bLuE"])
def test_color_parse_is_case_insensitive(text):
    assert Color.parse(text) is Color.Blue


def test_color_parse_rejects_unknown_names():
    with pytest.raises(ValueError, match="Unknown color"):
        Color.parse("Magenta")


def test_chip_str():
    assert str(ColorChip(Color.Blue, Color.Red)) == "Blue, Red"


def test_from_text_parses_the_inline_form():
    chip_set = ChipSet.from_text(" [Blue, Yellow] [red,Green]  [Yellow,   Red] ")
    assert chip_set.chips == [
        ColorChip(Color.Blue, Color.Yellow),
        ColorChip(Color.Red, Color.Green),
        ColorChip(Color.Yellow, Color.Red),
    ]
    assert chip_set.initial is None and chip_set.final is None


def test_from_text_single_chip():
    assert ChipSet.from_text("[Blue, Green]").chips == [ColorChip(Color.Blue, Color.Green)]


@pytest.mark.parametrize(
    "text",
    [
        "",
        "[]",
        "Blue, Green",
        "[Blue, Green",
        "[Blue]",
        "[Blue, Green, Red]",
        "[Blue, Magenta]",
        "[Blue, Green] Red",
        "[Blue; Green]",
    ],
)
def test_from_text_rejects_malformed_input(text):
    with pytest.raises(ChipParseError):
        ChipSet.from_text(text)


def test_parse_error_is_a_value_error():
    assert issubclass(ChipParseError, ValueError)


def test_from_json_with_endpoints_and_meta():
    text = json.dumps({"chips": [["blue", "red"], ["Red", "Orange"]], "initial": "Blue", "final": "orange", "meta": {"name": "demo"}})
    chip_set = ChipSet.from_json(text)
    assert chip_set.chips == [ColorChip(Color.Blue, Color.Red), ColorChip(Color.Red, Color.Orange)]
    assert chip_set.initial is Color.Blue
    assert chip_set.final is Color.Orange
    assert chip_set.meta == {"name": "demo"}


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        json.dumps({"chips": [["Blue"]]}),
        json.dumps({"chips": [["Blue", 3]]}),
        json.dumps({"chips": [["Blue", "Teal"]]}),
        json.dumps({"chips": [["Blue", "Red"]], "final": "Teal"}),
        json.dumps({"initial": "Blue"}),
    ],
)
def test_from_json_rejects_invalid_documents(text):
    with pytest.raises(ChipParseError):
        ChipSet.from_json(text)


def test_to_json_reads_back():
    chip_set = ChipSet.from_text("[Blue, Red] [Red, Green]")
    chip_set.final = Color.Green
    again = ChipSet.from_json(chip_set.to_json())
    assert again.chips == chip_set.chips
    assert again.final is Color.Green


def test_from_file_text_skips_comments_and_blank_lines(tmp_path):
    path = tmp_path / "chips.txt"
    path.write_text("# panel 7\n\n[Blue, Red]\n[Red, Green]\n", encoding="utf-8")
    chip_set = ChipSet.from_file(path)
    assert chip_set.chips == [ColorChip(Color.Blue, Color.Red), ColorChip(Color.Red, Color.Green)]
    assert chip_set.meta["source"] == str(path)


def test_from_file_json(tmp_path):
    path = tmp_path / "chips.json"
    path.write_text(json.dumps({"chips": [["Purple", "Green"]], "initial": "Purple"}), encoding="utf-8")
    chip_set = ChipSet.from_file(path)
    assert chip_set.initial is Color.Purple
    assert chip_set.meta["source"] == str(path)
    assert chip_set.chips == [ColorChip(Color.Purple, Color.Green)]


def test_from_file_missing(tmp_path):
    with pytest.raises(ChipParseError, match="Cannot read"):
        ChipSet.from_file(tmp_path / "nope.txt")
