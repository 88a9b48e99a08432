"""Passphrase generator joining distinct words from a word list."""

import logging
import random
import secrets
from typing import List, Optional
from passforge.domain.errors import InvalidWordCountError
from passforge.domain.models import PassphraseConfig
from passforge.interfaces.generator import Generator
from passforge.services.batch import run_batch, validate_amount
from passforge.services.word_list import load_word_list

logger = logging.getLogger(__name__)


class PassphraseGenerator(Generator[PassphraseConfig]):
    """Passphrases of distinct words sampled without replacement.
    
    A single-word passphrase is rejected: the minimum is two words.
    """
    
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or secrets.SystemRandom()
    
    @staticmethod
    def validate_word_count(word_count: int) -> None:
        """Reject word counts below 2.
        
        Raises:
            InvalidWordCountError: If word_count <= 1
        """
        if word_count <= 1:
            raise InvalidWordCountError(
                f"Passphrase needs at least 2 words (got {word_count})"
            )
    
    def create_passphrase(self, words: List[str], word_count: int, separator: str) -> str:
        """
        Sample `word_count` words without replacement and join them in draw order.
        
        Raises:
            InvalidWordCountError: If word_count exceeds the number of words available
        """
        if word_count > len(words):
            raise InvalidWordCountError(
                f"Cannot draw {word_count} distinct words from a list of {len(words)}"
            )
        return separator.join(self._rng.sample(words, word_count))
    
    def generate(self, config: PassphraseConfig) -> str:
        """Generate one passphrase.
        
        Raises:
            InvalidWordCountError: If the word count is invalid for the loaded list
            WordListError: If the word list cannot be loaded
        """
        self.validate_word_count(config.word_count)
        words = load_word_list(config.word_source)
        return self.create_passphrase(words, config.word_count, config.separator)
    
    def generate_multiple(self, config: PassphraseConfig, amount: int) -> List[str]:
        """Generate `amount` passphrases, loading the word list once for the batch.
        
        Raises:
            InvalidGenAmountError: If amount < 1
            InvalidWordCountError: If the word count is invalid for the loaded list
            WordListError: If the word list cannot be loaded
        """
        validate_amount(amount)
        self.validate_word_count(config.word_count)
        words = load_word_list(config.word_source)
        logger.debug(f"Loaded {len(words)} words for a batch of {amount} passphrases")
        
        return run_batch(
            lambda: self.create_passphrase(words, config.word_count, config.separator),
            amount,
        )
