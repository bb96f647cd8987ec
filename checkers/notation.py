# checkers/notation.py
# Translates board coordinates to the labels shown to players ("C3") and back.
import re

from .constants import COLUMN_LABELS, ROW_LABELS

LABEL_PATTERN = re.compile(r'^[a-h][1-8]$', re.IGNORECASE)


def to_label(coord):
    if not coord:
        return None
    return f"{COLUMN_LABELS[coord[1]]}{ROW_LABELS[coord[0]]}"


def from_label(text):
    if not text or not LABEL_PATTERN.match(text.strip()):
        return None
    text = text.strip().upper()
    return ROW_LABELS.index(text[1]), COLUMN_LABELS.index(text[0])


def find_label_index(coords, text):
    """Index of the coordinate labelled `text` in `coords`, or -1."""
    coord = from_label(text)
    if coord is None or coord not in coords:
        return -1
    return coords.index(coord)


def format_move(piece, move):
    sep = 'x' if move.captured else '-'
    text = f"{to_label(piece)}{sep}{to_label(move.coordinate)}"
    if move.captured:
        text += f" (captures {', '.join(to_label(c) for c in move.captured)})"
    return text
