# checkers/debug.py
import logging
import sys
import os
from datetime import datetime

LOGGERS = {
    'gameflow': logging.getLogger('gameflow'),
    'moves': logging.getLogger('moves'),
    'bot': logging.getLogger('bot'),
    'board': logging.getLogger('board')
}

LOGGER_DESCRIPTIONS = {
    'gameflow': 'turns, promotions and game results',
    'moves': 'move generation and capture chains',
    'bot': 'bot scoring, tie-breaks and chosen moves',
    'board': 'custom board loading',
}


def add_debug_arguments(parser):
    for name in LOGGERS:
        parser.add_argument(f'--debug-{name}', action='store_true',
                            help=f'Write DEBUG logs for {LOGGER_DESCRIPTIONS[name]} to logs/.')


def setup_logging(args):
    """
    Configures all loggers. INFO goes to console, DEBUG (if flagged) goes to file.
    """
    root_logger = logging.getLogger()
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    # Let all messages flow up to the root logger
    root_logger.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter('%(asctime)s - %(message)s'))
    console_handler.setLevel(logging.INFO)
    root_logger.addHandler(console_handler)

    has_debug_flags = any(getattr(args, f"debug_{name}", False) for name in LOGGERS)
    if has_debug_flags:
        if not os.path.exists('logs'):
            os.makedirs('logs')
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_filename = f"logs/debug_{timestamp}.log"
        file_handler = logging.FileHandler(log_filename, mode='w')
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)-10s - %(levelname)-8s - %(message)s'))
        file_handler.setLevel(logging.DEBUG)
        file_handler.addFilter(DebugFlagFilter(args))
        root_logger.addHandler(file_handler)


class DebugFlagFilter(logging.Filter):
    """Lets a record through only if its logger's --debug-<name> flag is set."""

    def __init__(self, args):
        super().__init__()
        self.args = args

    def filter(self, record):
        for name in LOGGERS:
            if record.name.startswith(name) and getattr(self.args, f"debug_{name}", False):
                return True
        return False
