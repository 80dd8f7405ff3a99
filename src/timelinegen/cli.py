"""CLI interface for the timeline card generator."""

import logging
from pathlib import Path

import click

from timelinegen.api.builder import render_deck_to_pdf
from timelinegen.fonts import register_fonts
from timelinegen.loader import load_deck
from timelinegen.models import Deck
from timelinegen.render import PDFRenderer
from timelinegen.utils.dimensions import PAGE_SIZES


@click.group()
@click.version_option(package_name="timelinegen")
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr.")
def main(verbose: bool) -> None:
    """Lay out historical event cards on printable PDF pages."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    # Register custom fonts at startup
    register_fonts()


def _apply_overrides(deck: Deck, page_size: str | None, **theme_updates) -> Deck:
    """Return the deck with CLI option overrides applied to its config."""
    config = deck.config
    if page_size:
        config = config.model_copy(update={"layout": config.layout.model_copy(update={"page_size": page_size.lower()})})
    updates = {key: value for key, value in theme_updates.items() if value is not None}
    if updates:
        config = config.model_copy(update={"theme": config.theme.model_copy(update=updates)})
    deck.config = config
    return deck


@main.command()
@click.argument("deck_path", type=click.Path(path_type=Path))
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path),
    help="Output PDF file path. Defaults to output_file from the deck config.",
)
@click.option(
    "--images-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory containing card images. Defaults to images_dir from the deck config.",
)
@click.option(
    "--page-size",
    type=click.Choice(list(PAGE_SIZES.keys()), case_sensitive=False),
    help="Page size for printing.",
)
@click.option("--debug", is_flag=True, help="Outline computed text and image boxes.")
@click.option("--no-crop-marks", is_flag=True, help="Disable crop marks and fold guides.")
@click.option("--no-summary", is_flag=True, help="Skip the summary page.")
def render(
    deck_path: Path,
    output: Path | None,
    images_dir: Path | None,
    page_size: str | None,
    debug: bool,
    no_crop_marks: bool,
    no_summary: bool,
) -> None:
    """
    Render a deck (JSON or TOML) to PDF.

    Each card is printed as front and back side by side; cards are tiled
    into a grid computed from the page size, margins and gaps.
    """
    try:
        deck = load_deck(deck_path)
        deck = _apply_overrides(
            deck,
            page_size,
            debug=True if debug else None,
            crop_marks=False if no_crop_marks else None,
            summary_page=False if no_summary else None,
        )
        if images_dir is not None:
            deck.config = deck.config.model_copy(update={"images_dir": images_dir})

        click.echo(f"Rendering {len(deck.events)} card(s) from {deck_path}...")
        output_path = output or deck.config.output_file
        plan = render_deck_to_pdf(deck, output_path)

        click.echo(
            f"✓ {plan.card_count} card(s) on {plan.total_pages} page(s) "
            f"({plan.cards_per_row}×{plan.cards_per_column} per page) saved to: {output_path}"
        )

    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


@main.command()
@click.argument("deck_path", type=click.Path(path_type=Path))
@click.option(
    "--page-size",
    type=click.Choice(list(PAGE_SIZES.keys()), case_sensitive=False),
    help="Page size for printing.",
)
def plan(deck_path: Path, page_size: str | None) -> None:
    """Print the page grid for a deck without rendering it."""
    try:
        deck = _apply_overrides(load_deck(deck_path), page_size)
        grid = PDFRenderer(deck.config).plan(len(deck.events))
    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"Page size:        {deck.config.layout.page_size}")
    click.echo(f"Cards per row:    {grid.cards_per_row}")
    click.echo(f"Cards per column: {grid.cards_per_column}")
    click.echo(f"Cards per page:   {grid.page_capacity}")
    click.echo(f"Total cards:      {grid.card_count}")
    click.echo(f"Total pages:      {grid.total_pages}")


if __name__ == "__main__":
    main()
