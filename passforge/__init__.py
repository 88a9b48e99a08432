"""
Password and passphrase generation with pluggable strength evaluation.
"""

from passforge.domain.models import (
    FixedLength,
    RangeLength,
    BuiltinWordSource,
    ExternalWordSource,
    PasswordConfig,
    PassphraseConfig,
    StrengthReport,
)
from passforge.domain.consts import ConfigPreset, GeneratorKind, EvaluatorName
from passforge.domain.errors import PassForgeError
from passforge.implementations.generators import PasswordGenerator, PassphraseGenerator
from passforge.implementations.evaluators import ZxcvbnAnalysis
from passforge.factories.generator_factory import create_generator
from passforge.factories.evaluator_factory import create_evaluator

__all__ = [
    "FixedLength",
    "RangeLength",
    "BuiltinWordSource",
    "ExternalWordSource",
    "PasswordConfig",
    "PassphraseConfig",
    "StrengthReport",
    "ConfigPreset",
    "GeneratorKind",
    "EvaluatorName",
    "PassForgeError",
    "PasswordGenerator",
    "PassphraseGenerator",
    "ZxcvbnAnalysis",
    "create_generator",
    "create_evaluator",
]
