"""Domain models for generator configuration and strength reports."""

from pathlib import Path
from typing import Literal, Union
from pydantic import BaseModel, ConfigDict, Field
from passforge.config.config import config
from passforge.domain.consts import ConfigPreset, PasswordPresets, PassphrasePresets, StrengthScore


class FixedLength(BaseModel):
    """A single, exact password length.
    
    Any integer is accepted here; generation rejects values below 1.
    """
    model_config = ConfigDict(frozen=True)
    
    kind: Literal["fixed"] = "fixed"
    value: int = Field(..., description="Exact password length")


class RangeLength(BaseModel):
    """An inclusive range of acceptable password lengths.
    
    Ordering is not validated on construction; generation rejects
    min_length > max_length.
    """
    model_config = ConfigDict(frozen=True)
    
    kind: Literal["range"] = "range"
    min_length: int = Field(..., description="Minimum length (inclusive)")
    max_length: int = Field(..., description="Maximum length (inclusive)")


Length = Union[FixedLength, RangeLength]


class BuiltinWordSource(BaseModel):
    """Use the word list bundled with the package."""
    model_config = ConfigDict(frozen=True)
    
    kind: Literal["builtin"] = "builtin"


class ExternalWordSource(BaseModel):
    """Use a word list read from a file on disk."""
    model_config = ConfigDict(frozen=True)
    
    kind: Literal["external"] = "external"
    path: Path = Field(..., description="Path to a newline-delimited word list")


WordSource = Union[BuiltinWordSource, ExternalWordSource]


_PASSWORD_PRESET_LENGTHS = {
    ConfigPreset.WEAK: PasswordPresets.WEAK_LENGTH,
    ConfigPreset.AVERAGE: PasswordPresets.AVERAGE_LENGTH,
    ConfigPreset.STRONG: PasswordPresets.STRONG_LENGTH,
}

_PASSPHRASE_PRESET_WORDS = {
    ConfigPreset.WEAK: PassphrasePresets.WEAK_WORDS,
    ConfigPreset.AVERAGE: PassphrasePresets.AVERAGE_WORDS,
    ConfigPreset.STRONG: PassphrasePresets.STRONG_WORDS,
}


class PasswordConfig(BaseModel):
    """Options for password generation. Lowercase letters are always included."""
    model_config = ConfigDict(frozen=True)
    
    length: Length = Field(
        default_factory=lambda: FixedLength(value=config.DEFAULT_LENGTH),
        discriminator="kind",
        description="Fixed length or inclusive length range",
    )
    include_uppercase: bool = Field(True, description="Include A-Z")
    include_digits: bool = Field(True, description="Include 0-9")
    include_symbols: bool = Field(True, description="Include punctuation symbols")
    
    @classmethod
    def from_preset(cls, preset: ConfigPreset) -> "PasswordConfig":
        """Build the fixed configuration for a preset tier.
        
        Weak drops symbols; average and strong enable every class.
        """
        return cls(
            length=FixedLength(value=_PASSWORD_PRESET_LENGTHS[preset]),
            include_uppercase=True,
            include_digits=True,
            include_symbols=preset != ConfigPreset.WEAK,
        )


class PassphraseConfig(BaseModel):
    """Options for passphrase generation."""
    model_config = ConfigDict(frozen=True)
    
    word_count: int = Field(
        default_factory=lambda: config.DEFAULT_WORDS,
        description="Number of words per passphrase",
    )
    separator: str = Field(
        default_factory=lambda: config.DEFAULT_SEPARATOR,
        description="String placed between words",
    )
    word_source: WordSource = Field(
        default_factory=BuiltinWordSource,
        discriminator="kind",
        description="Bundled list or external file",
    )
    
    @classmethod
    def from_preset(cls, preset: ConfigPreset) -> "PassphraseConfig":
        """Build the fixed configuration for a preset tier."""
        return cls(
            word_count=_PASSPHRASE_PRESET_WORDS[preset],
            separator=PassphrasePresets.SEPARATOR,
            word_source=BuiltinWordSource(),
        )


class StrengthReport(BaseModel):
    """Result of scoring one string."""
    model_config = ConfigDict(frozen=True)
    
    score: int = Field(
        ..., ge=StrengthScore.MIN, le=StrengthScore.MAX,
        description="0 = trivially guessable, 4 = very strong",
    )
    crack_time: str = Field(..., description="Human-readable offline crack time estimate")
    
    def describe(self) -> str:
        """Render as 'Score: <score>/4, Crack time: <estimate>'."""
        return f"Score: {self.score}/{StrengthScore.MAX}, Crack time: {self.crack_time}"
    
    def __str__(self) -> str:
        return self.describe()
