import os
from pathlib import Path

DATA_DIR = Path(__file__).resolve().parent / "datasets" / "data"


class Config:
    # Root words drawn at the start of each round (one per line)
    START_WORDS_PATH = os.environ.get('WORDSCRAMBLE_START_WORDS') or str(DATA_DIR / 'start.txt')
    # Dictionary word list backing the real-word check
    DICTIONARY_PATH = os.environ.get('WORDSCRAMBLE_DICTIONARY') or str(DATA_DIR / 'words.txt')
    LANGUAGE = os.environ.get('WORDSCRAMBLE_LANGUAGE', 'en')
    # Optional: fixed RNG seed for root word draws, parsed by the CLI. Empty = random.
    SEED = os.environ.get('WORDSCRAMBLE_SEED') or None
    LOG_LEVEL = os.environ.get('WORDSCRAMBLE_LOG_LEVEL', 'WARNING').upper()
    REPORTS_DIR = os.environ.get('WORDSCRAMBLE_REPORTS_DIR', 'reports')
