"""Word list loading and parsing for passphrase generation."""

import logging
from importlib import resources
from typing import Iterable, List, Optional
from passforge.domain.errors import RankParseError, WordListError, WordListIOError
from passforge.domain.models import ExternalWordSource, WordSource

logger = logging.getLogger(__name__)

BUILTIN_WORD_LIST = "wordlist.txt"


def parse_rank(token: str) -> int:
    """Parse the leading rank column of a two-column line.
    
    A rank is an optional "-" followed by ASCII digits. Forms int() would
    also take ("+5", "1_000", non-ASCII digits) are rejected.
    
    Raises:
        RankParseError: If the token is not such an integer
    """
    digits = token[1:] if token.startswith("-") else token
    if not (digits.isascii() and digits.isdigit()):
        raise RankParseError(f"Invalid rank token: {token!r}")
    return int(token)


def parse_line(line: str) -> Optional[str]:
    """
    Extract the word from one line, or None if the line is malformed.
    
    Accepted shapes (whitespace separated):
    - "word"
    - "<rank> word" where rank is an integer
    
    Lines with any other token count, or a non-integer rank, yield None.
    """
    parts = line.split()
    if len(parts) == 1:
        return parts[0]
    if len(parts) == 2:
        try:
            parse_rank(parts[0])
        except RankParseError:
            return None
        return parts[1]
    return None


def parse_word_list(lines: Iterable[str]) -> List[str]:
    """
    Parse line-oriented text into an ordered list of words.
    
    Malformed lines are skipped. Words are neither deduplicated nor
    case-normalized.
    
    Raises:
        WordListError: If no usable words remain
    """
    words = []
    skipped = 0
    
    for line_num, line in enumerate(lines, 1):
        word = parse_line(line)
        if word is None:
            if line.strip():
                logger.debug(f"Line {line_num}: skipping malformed word list entry")
            skipped += 1
            continue
        words.append(word)
    
    if not words:
        raise WordListError("Word list is empty or invalid")
    
    logger.debug(f"Parsed {len(words)} words ({skipped} lines skipped)")
    return words


def _read_builtin_lines() -> List[str]:
    """Read the bundled word list shipped as package data."""
    resource = resources.files("passforge") / "resources" / BUILTIN_WORD_LIST
    return resource.read_text(encoding="utf-8").splitlines()


def _load_external(source: ExternalWordSource) -> List[str]:
    """Load and parse a word list file, releasing the handle on every path."""
    try:
        with open(source.path, "r", encoding="utf-8") as f:
            return parse_word_list(f)
    except OSError as e:
        raise WordListIOError(f"Cannot read word list {source.path}: {e}") from e
    except UnicodeDecodeError as e:
        raise WordListError(f"Word list {source.path} is not valid UTF-8 text") from e


def load_word_list(source: WordSource) -> List[str]:
    """
    Load the words for a passphrase from the configured source.
    
    A missing or unreadable external file is reported to the caller; there
    is no fallback to the bundled list.
    
    Raises:
        WordListIOError: If an external file cannot be read
        WordListError: If the source yields no usable words
    """
    if isinstance(source, ExternalWordSource):
        logger.debug(f"Loading word list from {source.path}")
        return _load_external(source)
    
    logger.debug("Loading bundled word list")
    return parse_word_list(_read_builtin_lines())
