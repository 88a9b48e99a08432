"""Constants to avoid string typos and magic numbers."""

from enum import Enum


class GeneratorKind(str, Enum):
    """Generator kind constants."""
    PASSWORD = "password"
    PASSPHRASE = "passphrase"


class ConfigPreset(str, Enum):
    """Named strength tiers for quick configuration."""
    WEAK = "weak"
    AVERAGE = "average"
    STRONG = "strong"


class EvaluatorName(str, Enum):
    """Strength evaluator name constants."""
    ZXCVBN = "zxcvbn"


class CharacterSets:
    """Character class tables used to assemble the password pool."""
    LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
    UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    DIGITS = "0123456789"
    SYMBOLS = "!@#$%^&*()-_=+[]{}|;:,.<>?"


class StrengthScore:
    """Score bounds shared by all strength evaluators."""
    MIN = 0
    MAX = 4
    MIN_PASS = 3  # passes_threshold() is True at or above this score


class PasswordPresets:
    """Password lengths per preset tier."""
    WEAK_LENGTH = 8
    AVERAGE_LENGTH = 16
    STRONG_LENGTH = 32


class PassphrasePresets:
    """Passphrase word counts per preset tier."""
    WEAK_WORDS = 4
    AVERAGE_WORDS = 8
    STRONG_WORDS = 16
    SEPARATOR = "-"


class OutputFormat:
    """Line formats written by the command-line interface."""
    STRENGTH_LINE = "Strength: {score}/4, Crack time: {crack_time}"
    ERROR_LINE = "Error: {message}"
