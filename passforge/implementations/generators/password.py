"""Random password generator built from character class pools."""

import logging
import random
import secrets
from typing import Optional
from passforge.domain.consts import CharacterSets
from passforge.domain.errors import InvalidLengthError
from passforge.domain.models import PasswordConfig, RangeLength
from passforge.interfaces.generator import Generator
from passforge.services.length_resolver import resolve_length

logger = logging.getLogger(__name__)


def build_pool(config: PasswordConfig) -> str:
    """Concatenate the enabled character classes, lowercase first."""
    pool = CharacterSets.LOWERCASE
    if config.include_uppercase:
        pool += CharacterSets.UPPERCASE
    if config.include_digits:
        pool += CharacterSets.DIGITS
    if config.include_symbols:
        pool += CharacterSets.SYMBOLS
    return pool


class PasswordGenerator(Generator[PasswordConfig]):
    """Uniform random passwords drawn with replacement from a character pool.
    
    Every character is drawn independently from the whole pool, so there is
    no guarantee that each enabled class appears in a given password.
    """
    
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or secrets.SystemRandom()
    
    def generate(self, config: PasswordConfig) -> str:
        """Generate one password.
        
        Raises:
            InvalidLengthError: If the range is inverted or the resolved length is < 1
        """
        length_spec = config.length
        if isinstance(length_spec, RangeLength) and length_spec.min_length > length_spec.max_length:
            raise InvalidLengthError(
                f"Minimum length ({length_spec.min_length}) cannot exceed "
                f"maximum length ({length_spec.max_length})"
            )
        
        length = resolve_length(length_spec, self._rng)
        if length < 1:
            raise InvalidLengthError("Length of password cannot be less than 1")
        
        pool = build_pool(config)
        logger.debug(f"Drawing {length} characters from a pool of {len(pool)}")
        return "".join(pool[self._rng.randrange(len(pool))] for _ in range(length))
