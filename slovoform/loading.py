"""
Dictionary loading for Slovoform.

Dictionaries are tab-separated text files, one record per line:

    быстрый<TAB>2|ый,ого,ому,...

Files ending in .gz are read through gzip. Blank lines are skipped; any other
malformed line aborts loading.
"""

import gzip
import logging
from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

from slovoform.settings import DICT_ENCODING

logger = logging.getLogger(__name__)

Record = Tuple[str, str]


class LexiconFormatError(ValueError):
    """A dictionary record could not be parsed."""

    def __init__(self, message: str, path: Optional[str] = None, line_no: Optional[int] = None):
        self.path = path
        self.line_no = line_no
        location = ""
        if path is not None:
            location = f"{path}:{line_no}: " if line_no is not None else f"{path}: "
        elif line_no is not None:
            location = f"line {line_no}: "
        super().__init__(f"{location}{message}")


def parse_record(line: str, line_no: Optional[int] = None, path: Optional[str] = None) -> Record:
    """
    Split a dictionary line into (word, descriptor).

    Raises:
        LexiconFormatError: If the line does not have exactly two fields or
            the word is empty.
    """
    parts = line.rstrip("\r\n").split("\t")
    if len(parts) != 2:
        raise LexiconFormatError(f"expected 2 tab-separated fields, got {len(parts)}", path, line_no)
    word, descriptor = parts
    if not word:
        raise LexiconFormatError("empty headword", path, line_no)
    return word, descriptor


def _open(path: Path, encoding: str):
    if path.suffix == ".gz":
        return gzip.open(path, "rt", encoding=encoding)
    return open(path, "r", encoding=encoding)


def iter_records(path: Union[str, Path], encoding: Optional[str] = None) -> Iterator[Record]:
    """
    Read (word, descriptor) records from a dictionary file.

    Args:
        path: Dictionary file, plain or gzipped.
        encoding: Text encoding. Defaults to settings.DICT_ENCODING.

    Raises:
        FileNotFoundError: If the file does not exist.
        LexiconFormatError: On the first malformed line.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dictionary not found at: {path}")

    logger.info(f"Reading dictionary {path}")
    count = 0
    with _open(path, encoding or DICT_ENCODING) as f:
        for line_no, line in enumerate(f, start=1):
            if not line.strip():
                continue
            count += 1
            yield parse_record(line, line_no, str(path))
    logger.info(f"Read {count} records from {path.name}")
