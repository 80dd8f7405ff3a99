"""Tests for inline style segmentation."""

from timelinegen.fonts import FontFamily, font_family
from timelinegen.utils.text import StyledRun, StyleSegmenter, segment_lines, strip_markers


def test_nested_styles():
    [runs] = segment_lines(["**bold __both__ word**"])
    assert runs == [
        StyledRun("bold", bold=True),
        StyledRun("both", bold=True, italic=True),
        StyledRun("word", bold=True),
    ]


def test_plain_line_is_one_run():
    assert segment_lines(["just plain words"]) == [[StyledRun("just plain words")]]


def test_marked_single_word():
    [runs] = segment_lines(["a **word** here"])
    assert runs == [StyledRun("a"), StyledRun("word", bold=True), StyledRun("here")]


def test_same_style_words_merge():
    [runs] = segment_lines(["~~struck out text~~ then"])
    assert runs == [StyledRun("struck out text", strikethrough=True), StyledRun("then")]


def test_style_persists_across_lines():
    lines = segment_lines(["start **bold", "still bold**", "plain"])
    assert lines == [
        [StyledRun("start"), StyledRun("bold", bold=True)],
        [StyledRun("still bold", bold=True)],
        [StyledRun("plain")],
    ]


def test_unclosed_style_runs_to_end():
    lines = segment_lines(["__never", "closed"])
    assert lines == [[StyledRun("never", italic=True)], [StyledRun("closed", italic=True)]]


def test_stacked_markers_on_one_word():
    [runs] = segment_lines(["**~~x~~** y"])
    assert runs == [StyledRun("x", bold=True, strikethrough=True), StyledRun("y")]


def test_runs_round_trip_to_stripped_text():
    lines = ["The **Treaty of __Westphalia__** ended", "the ~~Thirty~~ Years' War"]
    for line, runs in zip(lines, segment_lines(lines)):
        assert " ".join(run.text for run in runs) == strip_markers(line)


def test_segmenter_state_is_per_instance():
    first = StyleSegmenter()
    first.segment_line("**open")
    second = StyleSegmenter()
    assert second.segment_line("fresh") == [StyledRun("fresh")]
    assert first.segment_line("fresh") == [StyledRun("fresh", bold=True)]


def test_family_selects_face():
    family = FontFamily("R", "B", "I", "BI")
    assert family.select(StyledRun("x")) == "R"
    assert family.select(StyledRun("x", bold=True)) == "B"
    assert family.select(StyledRun("x", italic=True)) == "I"
    assert family.select(StyledRun("x", bold=True, italic=True)) == "BI"
    assert family.select(StyledRun("x", strikethrough=True)) == "R"


def test_builtin_family_lookup():
    assert font_family("Helvetica") == FontFamily(
        "Helvetica", "Helvetica-Bold", "Helvetica-Oblique", "Helvetica-BoldOblique"
    )
    assert font_family("Times-Roman").italic == "Times-Italic"


def test_configured_face_is_kept_for_plain_text():
    family = font_family("Helvetica-Bold")
    assert family == FontFamily(
        "Helvetica-Bold", "Helvetica-Bold", "Helvetica-BoldOblique", "Helvetica-BoldOblique"
    )
    assert family.select(StyledRun("plain")) == "Helvetica-Bold"
    assert font_family("Courier-Oblique").bold == "Courier-BoldOblique"
