"""
Settings and configuration for Slovoform.

Every path can be overridden through an environment variable.
"""

import os
from pathlib import Path

# Data directory paths
PACKAGE_DIR = Path(__file__).parent
DATA_DIR = PACKAGE_DIR / "data"

# Bundled dictionaries: one "word<TAB>schema" record per line
DEFAULT_ADJECTIVES_PATH = DATA_DIR / "adjectives.tsv"
DEFAULT_ADVERBS_PATH = DATA_DIR / "adverbs.tsv"

ADJECTIVES_PATH = Path(os.environ.get("SLOVOFORM_ADJECTIVES_PATH", DEFAULT_ADJECTIVES_PATH))
ADVERBS_PATH = Path(os.environ.get("SLOVOFORM_ADVERBS_PATH", DEFAULT_ADVERBS_PATH))

# Text encoding of dictionary files (the historical dumps are cp1251)
DICT_ENCODING = os.environ.get("SLOVOFORM_DICT_ENCODING", "utf-8")

# Default target of `slovoform export`
DB_PATH = Path(os.environ.get("SLOVOFORM_DB_PATH", "slovoform.db"))

# Debug mode
DEBUG = os.environ.get("SLOVOFORM_DEBUG", "").lower() in ("1", "true", "yes")

# A similarity candidate is accepted only when its score is above this
SIMILARITY_THRESHOLD = 1

# Rows per commit during export
EXPORT_BATCH_SIZE = 500
