"""End-to-end rendering tests: builder, PDF renderer and CLI."""

import pytest
from click.testing import CliRunner

from timelinegen.api import create_card, create_cards, render_deck_to_pdf
from timelinegen.cli import main
from timelinegen.errors import (
    InsufficientHorizontalSpaceError,
    InsufficientVerticalSpaceError,
    WordTooLongError,
    ZeroCapacityGridError,
)
from timelinegen.loader import load_deck, parse_deck
from timelinegen.utils.image import WHITE_BACKGROUND


def test_render_deck(write_deck, deck_data, deck_dir):
    deck = load_deck(write_deck(deck_data))
    output = deck_dir / "timeline.pdf"

    plan = render_deck_to_pdf(deck, output)

    assert (plan.cards_per_row, plan.cards_per_column) == (1, 3)
    assert plan.total_pages == 2
    assert output.read_bytes().startswith(b"%PDF")


def test_render_debug_without_guides(write_deck, deck_data, deck_dir):
    deck_data["config"]["theme"].update(debug=True, crop_marks=False, summary_page=False)
    deck = load_deck(write_deck(deck_data))
    output = deck_dir / "debug.pdf"

    render_deck_to_pdf(deck, output)

    assert output.exists()


def test_card_background_from_image(write_deck, deck_data):
    deck = load_deck(write_deck(deck_data))

    card = create_card(deck, 0)

    assert card.background.hex == "#141E78"
    assert card.background.is_dark
    assert card.category.name == "Science"
    assert [section.name for section in card.get_sections()] == ["front", "back"]
    assert card.get_fold_lines() == [deck.config.layout.card_width_mm]


def test_card_without_image_is_white(write_deck, deck_data):
    deck = load_deck(write_deck(deck_data))
    cards = create_cards(deck)
    assert cards[1].background == WHITE_BACKGROUND
    assert cards[1].image is None


def test_missing_image(write_deck, deck_data):
    deck_data["data"][0]["image"] = "missing.png"
    deck = load_deck(write_deck(deck_data))
    with pytest.raises(FileNotFoundError):
        create_card(deck, 0)


def test_zero_capacity_writes_nothing(write_deck, deck_data, deck_dir):
    deck_data["config"]["layout"]["card_width_mm"] = 200
    deck = load_deck(write_deck(deck_data))
    output = deck_dir / "never.pdf"

    with pytest.raises(ZeroCapacityGridError):
        render_deck_to_pdf(deck, output)
    assert not output.exists()


def test_word_too_long(deck_data, tmp_path):
    deck_data["data"][3]["event"] = "Pneumonoultramicroscopicsilicovolcanoconiosis"
    deck = parse_deck(deck_data, base_dir=tmp_path)
    deck.events = deck.events[3:]

    with pytest.raises(WordTooLongError) as exc_info:
        render_deck_to_pdf(deck, tmp_path / "out.pdf")
    assert exc_info.value.word == "Pneumonoultramicroscopicsilicovolcanoconiosis"


def test_card_too_short_for_description(deck_data, tmp_path):
    deck_data["config"]["layout"]["card_height_mm"] = 20
    deck = parse_deck(deck_data, base_dir=tmp_path)
    deck.events = deck.events[3:]

    with pytest.raises(InsufficientVerticalSpaceError, match="card 0"):
        render_deck_to_pdf(deck, tmp_path / "out.pdf")


def test_padding_leaves_no_width(deck_data, tmp_path):
    deck_data["config"]["layout"]["padding_mm"] = 30
    deck = parse_deck(deck_data, base_dir=tmp_path)
    deck.events = deck.events[3:]

    with pytest.raises(InsufficientHorizontalSpaceError):
        render_deck_to_pdf(deck, tmp_path / "out.pdf")


# ============================================================================
# CLI
# ============================================================================

def test_cli_plan(write_deck, deck_data):
    path = write_deck(deck_data)

    result = CliRunner().invoke(main, ["plan", str(path), "--page-size", "a3"])

    assert result.exit_code == 0, result.output
    assert "Page size:        a3" in result.output
    assert "Total cards:      4" in result.output


def test_cli_render(write_deck, deck_data, deck_dir):
    path = write_deck(deck_data)
    output = deck_dir / "cli.pdf"

    result = CliRunner().invoke(main, ["render", str(path), "-o", str(output), "--no-summary", "--debug"])

    assert result.exit_code == 0, result.output
    assert "saved to" in result.output
    assert output.exists()


def test_cli_images_dir_override(write_deck, deck_data, deck_dir, tmp_path_factory):
    path = write_deck(deck_data)
    empty = tmp_path_factory.mktemp("empty")

    result = CliRunner().invoke(
        main, ["render", str(path), "-o", str(deck_dir / "x.pdf"), "--images-dir", str(empty)]
    )

    assert result.exit_code == 1
    assert "Image file not found" in result.output


def test_cli_missing_deck(tmp_path):
    result = CliRunner().invoke(main, ["render", str(tmp_path / "missing.json")])

    assert result.exit_code == 1
    assert "Error: Deck file not found" in result.output


def test_cli_reports_layout_errors(write_deck, deck_data, deck_dir):
    deck_data["config"]["layout"]["margin_mm"] = 200
    path = write_deck(deck_data)

    result = CliRunner().invoke(main, ["render", str(path), "-o", str(deck_dir / "x.pdf")])

    assert result.exit_code == 1
    assert "No card fits on the page" in result.output


def test_bold_description_font(write_deck, deck_data, deck_dir):
    deck_data["config"]["theme"]["description_font"] = "Times-Bold"
    deck = load_deck(write_deck(deck_data))
    output = deck_dir / "bold.pdf"

    render_deck_to_pdf(deck, output)

    assert output.read_bytes().startswith(b"%PDF")
