"""Shared fixtures: small decks written to a temporary directory."""

import json

import pytest
from PIL import Image


SAMPLE_DECK = {
    "config": {
        "layout": {"page_size": "a4"},
        "theme": {"summary_page": True},
    },
    "categories": {
        "science": {"name": "Science", "color": "#1E88E5"},
        "politics": {"name": "Politics", "color": "#FDD835"},
    },
    "data": [
        {
            "event": "First crewed Moon landing",
            "description": "Apollo 11 lands in the **Sea of Tranquility** and two astronauts walk on the surface.",
            "attribution": "Photo: NASA, public domain",
            "year": "1969",
            "category": "science",
            "image": "moon.png",
        },
        {
            "event": "Fall of the Berlin Wall",
            "description": "The border opens and the wall is taken down __piece by piece__.",
            "attribution": "",
            "year": "1989",
            "category": "politics",
        },
        {
            "event": "Printing press",
            "description": "Movable type ~~replaces~~ speeds up the copying of books.",
            "attribution": "Engraving, unknown artist",
            "year": "c. 1440",
            "category": "science",
            "image": "press.jpg",
        },
        {
            "event": "Magna Carta",
            "description": "A charter of liberties is sealed at Runnymede.",
            "attribution": "",
            "year": "1215",
        },
    ],
}


@pytest.fixture
def deck_data():
    return json.loads(json.dumps(SAMPLE_DECK))


@pytest.fixture
def deck_dir(tmp_path):
    images = tmp_path / "images"
    images.mkdir()
    Image.new("RGB", (40, 30), (20, 30, 120)).save(images / "moon.png")
    Image.new("RGB", (30, 40), (230, 220, 200)).save(images / "press.jpg")
    return tmp_path


@pytest.fixture
def write_deck(deck_dir):
    def write(data, name="deck.json"):
        path = deck_dir / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return write
