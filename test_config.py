"""Tests for configuration models and deck loading."""

import pytest
from pydantic import ValidationError

from timelinegen.api import validate_fonts
from timelinegen.config import Config, Layout, Theme
from timelinegen.loader import load_deck, parse_deck
from timelinegen.models import EventRecord

TOML_DECK = """
[config]
output_file = "out/cards.pdf"

[config.layout]
page_size = "A5"
card_width_mm = 50

[config.theme]
debug = true

[categories.art]
name = "Art"
color = "#8E24AA"

[[data]]
event = "Mona Lisa"
description = "Leonardo starts the portrait."
attribution = "Louvre"
year = 1503
category = "art"
"""


def test_defaults():
    config = Config()
    assert config.layout.page_size == "a4"
    assert config.layout.card_width_mm == 60
    assert config.theme.description_font == "Helvetica"
    assert config.theme.crop_marks


def test_page_size_is_normalized():
    assert Layout(page_size="Letter").page_size == "letter"


def test_unknown_page_size_rejected():
    with pytest.raises(ValidationError, match="unknown page size"):
        Layout(page_size="b7")


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        Layout(card_width_mm=0)


def test_load_json_deck(write_deck, deck_data, deck_dir):
    deck = load_deck(write_deck(deck_data))

    assert len(deck.events) == 4
    assert deck.events[0].event == "First crewed Moon landing"
    assert deck.events[3].image is None
    assert deck.categories["science"].color == "#1E88E5"
    assert deck.config.images_dir == deck_dir / "images"


def test_load_toml_deck(deck_dir):
    path = deck_dir / "deck.toml"
    path.write_text(TOML_DECK, encoding="utf-8")

    deck = load_deck(path)

    assert deck.config.layout.page_size == "a5"
    assert deck.config.layout.card_width_mm == 50
    assert deck.config.theme.debug
    assert deck.events[0].year == "1503"
    assert deck.category_for(deck.events[0]).name == "Art"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_deck(tmp_path / "nope.json")


def test_unsupported_format(tmp_path):
    path = tmp_path / "deck.yaml"
    path.write_text("data: []", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported deck format"):
        load_deck(path)


def test_missing_event_field(deck_data):
    del deck_data["data"][1]["year"]
    with pytest.raises(ValueError, match="Event 1 is missing field"):
        parse_deck(deck_data)


def test_missing_category_field(deck_data):
    del deck_data["categories"]["science"]["color"]
    with pytest.raises(ValueError, match="Category 'science'"):
        parse_deck(deck_data)


def test_unknown_category(deck_data):
    deck = parse_deck(deck_data)
    event = EventRecord(event="x", description="y", attribution="", year="1", category="sport")
    with pytest.raises(ValueError, match="Unknown category 'sport'"):
        deck.category_for(event)


def test_event_without_category(deck_data):
    deck = parse_deck(deck_data)
    assert deck.category_for(deck.events[3]) is None


def test_invalid_config_in_deck(deck_data):
    deck_data["config"]["layout"]["gap_mm"] = -1
    with pytest.raises(ValueError):
        parse_deck(deck_data)


def test_absolute_images_dir_kept(deck_data, tmp_path):
    deck_data["config"]["images_dir"] = str(tmp_path / "elsewhere")
    deck = parse_deck(deck_data, base_dir=tmp_path / "decks")
    assert deck.config.images_dir == tmp_path / "elsewhere"


def test_validate_fonts_accepts_defaults():
    validate_fonts(Theme())


def test_validate_fonts_rejects_unknown():
    with pytest.raises(ValueError, match="Missing-Font"):
        validate_fonts(Theme(year_font="Missing-Font"))


def test_register_fonts_empty_dir(tmp_path):
    from timelinegen.fonts import register_fonts

    assert register_fonts(tmp_path) == 0


def test_register_fonts_skips_broken_file(tmp_path, caplog):
    from timelinegen.fonts import register_fonts

    (tmp_path / "broken-regular.ttf").write_bytes(b"not a font")

    assert register_fonts(tmp_path) == 0
    assert "Broken-Regular" in caplog.text
