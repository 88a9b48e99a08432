"""Exception hierarchy for generation and evaluation failures.

Every error renders as "<label>: <detail>", e.g.
"Invalid password length: Length of password cannot be less than 1".
"""


class PassForgeError(Exception):
    """Base class for every error raised by passforge."""
    label = "PassForge error"
    
    def __str__(self) -> str:
        return f"{self.label}: {super().__str__()}"


class InvalidLengthError(PassForgeError, ValueError):
    """Password length below 1, inverted length range, or empty evaluator input."""
    label = "Invalid password length"


class InvalidWordCountError(PassForgeError, ValueError):
    """Passphrase word count below 2 or above the number of available words."""
    label = "Invalid word count"


class InvalidGenAmountError(PassForgeError, ValueError):
    """Requested number of generated items below 1."""
    label = "Invalid generation amount"


class InvalidConfigError(PassForgeError, ValueError):
    """Unknown preset, generator kind or evaluator name."""
    label = "Invalid configuration"


class WordListError(PassForgeError):
    """Word list source yielded no usable words."""
    label = "Word list error"


class WordListIOError(WordListError):
    """Underlying read failure while loading an external word list."""
    label = "IO error"


class RankParseError(PassForgeError, ValueError):
    """Rank token in a two-column word list line is not an integer.
    
    Raised by the rank parser and handled by the line parser, which skips
    the offending line instead of failing the whole load.
    """
    label = "Parse error"
