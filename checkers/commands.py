# checkers/commands.py
# Words a player can type at any console prompt instead of an answer.
from enum import Enum


class Command(Enum):
    HELP = 'help'
    BOARD = 'board'


def parse_command(text):
    """Returns the Command for `text`, or None if it is an ordinary answer."""
    try:
        return Command(text.strip().lower())
    except ValueError:
        return None


HELP_TEXT = """
* HELP *

- To move a piece, select the option number or type the square name (e.g. "c3")
- To go back in the menu, type "0"
- The uppercase symbols (e.g. "X", "O") represent KING pieces
- To exit, press `Ctrl + C`
- To print the board again, type "board"
- To print this help again, type "help"
"""
