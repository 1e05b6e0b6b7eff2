"""Word extraction and direction-run reordering."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List

from pdfrtl.layout.direction import ClassificationContext

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class TextFragment:
    """
    A contiguous span of text sharing one weight.

    Attributes:
        text: The text content. May contain several words.
        is_bold: Whether the span is drawn in the bold weight.
    """
    text: str
    is_bold: bool = False


@dataclass(frozen=True)
class Word:
    """
    A whitespace-delimited token ready for layout.

    Attributes:
        text: The word itself, never empty.
        is_bold: Weight inherited from the source fragment.
        is_rtl: Direction of the word's own script.
    """
    text: str
    is_bold: bool = False
    is_rtl: bool = False


def split_words(text: str) -> List[str]:
    """Split text on runs of whitespace, dropping empty tokens."""
    return [token for token in _WHITESPACE.split(text) if token]


async def extract_words(fragments: Iterable[TextFragment], context: ClassificationContext) -> List[Word]:
    """
    Convert text fragments into a flat list of words with direction.

    Fragment order and word order within each fragment are preserved.
    Words are classified one at a time, in order.

    Args:
        fragments: Fragments making up the paragraph.
        context: Classification context holding the direction cache.

    Returns:
        Words with weight and direction attached. Whitespace-only fragments
        contribute nothing.
    """
    words: List[Word] = []

    for fragment in fragments:
        for token in split_words(fragment.text):
            words.append(Word(
                text=token,
                is_bold=bool(fragment.is_bold),
                is_rtl=await context.classify(token),
            ))

    return words


def split_runs(words: Iterable[Word]) -> List[List[Word]]:
    """
    Partition words into maximal runs sharing the same direction.

    Args:
        words: Words in extracted order.

    Returns:
        Runs in order; concatenated they give back the input.
    """
    runs: List[List[Word]] = []

    for word in words:
        if runs and runs[-1][0].is_rtl == word.is_rtl:
            runs[-1].append(word)
        else:
            runs.append([word])

    return runs


def reorder_runs(words: List[Word], paragraph_is_rtl: bool) -> List[Word]:
    """
    Reverse runs whose direction is foreign to the paragraph.

    In an RTL paragraph LTR runs are reversed; in an LTR paragraph RTL runs
    are reversed. Runs matching the paragraph direction keep their order.
    Combined with the whole-line mirroring done when an RTL line is drawn,
    this makes every run read in its own direction.

    Args:
        words: Words in extracted order. Not modified.
        paragraph_is_rtl: Overall paragraph direction.

    Returns:
        New list in final logical order.
    """
    result: List[Word] = []

    for run in split_runs(words):
        run_is_foreign = run[0].is_rtl != paragraph_is_rtl
        if run_is_foreign:
            result.extend(reversed(run))
        else:
            result.extend(run)

    return result
