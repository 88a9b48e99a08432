"""Factory for creating generator instances."""

import random
from typing import Optional
from passforge.interfaces.generator import Generator
from passforge.implementations.generators import PasswordGenerator, PassphraseGenerator
from passforge.domain.consts import GeneratorKind
from passforge.domain.errors import InvalidConfigError


GENERATORS: dict[str, type[Generator]] = {
    GeneratorKind.PASSWORD: PasswordGenerator,
    GeneratorKind.PASSPHRASE: PassphraseGenerator,
}


def create_generator(kind: str, rng: Optional[random.Random] = None) -> Generator:
    """Factory for creating generators.
    
    Args:
        kind: Generator kind name ("password" or "passphrase")
        rng: Optional randomness source; defaults to the system CSPRNG
        
    Returns:
        Generator instance
        
    Raises:
        InvalidConfigError: If kind is unknown
    """
    try:
        generator_cls = GENERATORS[kind]
    except KeyError:
        raise InvalidConfigError(f"Unknown generator: {kind}")
    return generator_cls(rng)
