"""Generator implementations.

This package contains concrete implementations of the Generator interface.
"""

from passforge.implementations.generators.password import PasswordGenerator
from passforge.implementations.generators.passphrase import PassphraseGenerator

__all__ = ["PasswordGenerator", "PassphraseGenerator"]
