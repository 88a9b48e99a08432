"""Domain models, constants and errors."""

from passforge.domain.models import (
    FixedLength,
    RangeLength,
    Length,
    BuiltinWordSource,
    ExternalWordSource,
    WordSource,
    PasswordConfig,
    PassphraseConfig,
    StrengthReport,
)
from passforge.domain.consts import (
    GeneratorKind,
    ConfigPreset,
    EvaluatorName,
    CharacterSets,
    StrengthScore,
    PasswordPresets,
    PassphrasePresets,
    OutputFormat,
)
from passforge.domain.errors import (
    PassForgeError,
    InvalidLengthError,
    InvalidWordCountError,
    InvalidGenAmountError,
    InvalidConfigError,
    WordListError,
    WordListIOError,
    RankParseError,
)

__all__ = [
    "FixedLength",
    "RangeLength",
    "Length",
    "BuiltinWordSource",
    "ExternalWordSource",
    "WordSource",
    "PasswordConfig",
    "PassphraseConfig",
    "StrengthReport",
    "GeneratorKind",
    "ConfigPreset",
    "EvaluatorName",
    "CharacterSets",
    "StrengthScore",
    "PasswordPresets",
    "PassphrasePresets",
    "OutputFormat",
    "PassForgeError",
    "InvalidLengthError",
    "InvalidWordCountError",
    "InvalidGenAmountError",
    "InvalidConfigError",
    "WordListError",
    "WordListIOError",
    "RankParseError",
]
