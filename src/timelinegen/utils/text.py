"""Text utilities: fitting, greedy line wrapping and inline style runs."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from timelinegen.errors import WordTooLongError
from timelinegen.types import FitPredicate

if TYPE_CHECKING:
    from timelinegen.fonts import FontMetrics


# ============================================================================
# Inline style markers
# ============================================================================

BOLD_MARKER = "**"
ITALIC_MARKER = "__"
STRIKE_MARKER = "~~"
STYLE_MARKERS = (BOLD_MARKER, ITALIC_MARKER, STRIKE_MARKER)


def strip_markers(text: str) -> str:
    """
    Remove every inline style marker from text.

    Args:
        text: Text that may contain ``**``, ``__`` or ``~~``.

    Returns:
        Text as it will be rendered.
    """
    for marker in STYLE_MARKERS:
        text = text.replace(marker, "")
    return text


# ============================================================================
# Fit predicate
# ============================================================================

def make_fit_predicate(metrics: FontMetrics, size: float, max_width: float) -> FitPredicate:
    """
    Build a predicate telling whether a line fits the available width.

    Style markers are stripped before measuring, since they are never drawn.

    Args:
        metrics: Font metrics provider for the field's font.
        size: Font size in points.
        max_width: Available width in points.

    Returns:
        Callable taking a candidate line and returning True if it fits.
    """
    def fits(line: str) -> bool:
        return metrics.width_of_text_at_size(strip_markers(line), size) <= max_width

    return fits


# ============================================================================
# Greedy line wrapping
# ============================================================================

def wrap_words(
    words: Sequence[str],
    fits: FitPredicate,
    reverse: bool = False,
    origin: str = "text",
) -> list[str]:
    """
    Greedily pack words into lines that each satisfy ``fits``.

    Every line is filled as far as it goes before a new one is started. This
    does not balance raggedness; it is a single pass over the words.

    With ``reverse=True`` the words are consumed last to first, so the first
    returned line holds the *last* words and each line's words come out in
    reverse order. Use wrap_bottom_up() for ready-to-draw lines.

    Args:
        words: Tokens in reading order.
        fits: Fit predicate (see make_fit_predicate()).
        reverse: Pack from the last word backwards.
        origin: Field name used in error messages.

    Returns:
        Completed lines, words joined by single spaces.

    Raises:
        WordTooLongError: If a word does not fit even on an empty line.
    """
    tokens = list(reversed(words)) if reverse else list(words)
    lines: list[str] = []
    current = ""

    for word in tokens:
        candidate = f"{current} {word}" if current else word

        if fits(candidate):
            current = candidate
        elif not fits(word):
            raise WordTooLongError(word, origin)
        else:
            if current:
                lines.append(current)
            current = word

    if current:
        lines.append(current)

    return lines


def wrap_text(text: str, fits: FitPredicate, origin: str = "text") -> list[str]:
    """
    Wrap whitespace-separated text top to bottom.

    Args:
        text: Text to wrap.
        fits: Fit predicate.
        origin: Field name used in error messages.

    Returns:
        Lines in reading order.
    """
    return wrap_words(text.split(), fits, origin=origin)


def wrap_bottom_up(text: str, fits: FitPredicate, origin: str = "text") -> list[str]:
    """
    Wrap text so that the last line is the fullest one.

    For blocks anchored to a bottom edge (attributions): the words are packed
    from the end, then each line's words and the line order are flipped back.

    Args:
        text: Text to wrap.
        fits: Fit predicate.
        origin: Field name used in error messages.

    Returns:
        Lines in reading order (top to bottom).
    """
    packed = wrap_words(text.split(), fits, reverse=True, origin=origin)
    return [" ".join(reversed(line.split(" "))) for line in reversed(packed)]


# ============================================================================
# Style segmentation
# ============================================================================

@dataclass(frozen=True)
class StyleState:
    """Which inline styles are currently switched on."""

    bold: bool = False
    italic: bool = False
    strikethrough: bool = False


@dataclass(frozen=True)
class StyledRun:
    """A span of text drawn with one set of style flags."""

    text: str
    bold: bool = False
    italic: bool = False
    strikethrough: bool = False

    @property
    def style(self) -> StyleState:
        return StyleState(self.bold, self.italic, self.strikethrough)


class StyleSegmenter:
    """
    Split wrapped lines into runs of bold/italic/strikethrough text.

    Markers act as per-word toggles, not as balanced pairs: a word *starting*
    with a marker switches the style on, and a marker still *contained* in the
    word after that switches it off once the word has been emitted. So
    ``**word**`` is bold on its own, ``**two words**`` is bold across both
    words, and an unclosed marker keeps its style into the next line.

    One instance holds the style state for one text field; create a new
    segmenter for every field.
    """

    def __init__(self) -> None:
        self.state = StyleState()

    def _open(self, word: str) -> str:
        """Switch on styles whose marker starts the word, return the rest."""
        bold, italic, strike = self.state.bold, self.state.italic, self.state.strikethrough

        # Checked in this order; each check sees the word left by the previous one.
        if word.startswith(BOLD_MARKER):
            bold = True
            word = word[len(BOLD_MARKER):]
        if word.startswith(STRIKE_MARKER):
            strike = True
            word = word[len(STRIKE_MARKER):]
        if word.startswith(ITALIC_MARKER):
            italic = True
            word = word[len(ITALIC_MARKER):]

        self.state = StyleState(bold, italic, strike)
        return word

    def _close(self, word: str) -> None:
        """Switch off styles whose marker is still inside the word."""
        self.state = StyleState(
            bold=self.state.bold and BOLD_MARKER not in word,
            italic=self.state.italic and ITALIC_MARKER not in word,
            strikethrough=self.state.strikethrough and STRIKE_MARKER not in word,
        )

    def segment_line(self, line: str) -> list[StyledRun]:
        """
        Segment one line, carrying style state in from the previous line.

        Args:
            line: Wrapped line, words separated by single spaces.

        Returns:
            Runs in drawing order; neighbouring runs never share a style.
        """
        runs: list[StyledRun] = []

        for word in line.split(" "):
            rest = self._open(word)
            text = strip_markers(rest)
            state = self.state

            if runs and runs[-1].style == state:
                last = runs[-1]
                runs[-1] = StyledRun(f"{last.text} {text}", state.bold, state.italic, state.strikethrough)
            else:
                runs.append(StyledRun(text, state.bold, state.italic, state.strikethrough))

            self._close(rest)

        return runs

    def segment(self, lines: Sequence[str]) -> list[list[StyledRun]]:
        """
        Segment consecutive lines of one field.

        Args:
            lines: Wrapped lines in reading order.

        Returns:
            One run list per line.
        """
        return [self.segment_line(line) for line in lines]


def segment_lines(lines: Sequence[str]) -> list[list[StyledRun]]:
    """
    Segment the wrapped lines of one field into styled runs.

    Args:
        lines: Wrapped lines in reading order.

    Returns:
        One run list per line.
    """
    return StyleSegmenter().segment(lines)
