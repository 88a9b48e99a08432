"""Main entry point for the PassForge command-line interface."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional
from passforge.config.config import config
from passforge.domain.consts import ConfigPreset, EvaluatorName, GeneratorKind, OutputFormat
from passforge.domain.errors import InvalidConfigError, InvalidLengthError, PassForgeError
from passforge.domain.models import (
    BuiltinWordSource,
    ExternalWordSource,
    FixedLength,
    Length,
    PassphraseConfig,
    PasswordConfig,
    RangeLength,
)
from passforge.factories.evaluator_factory import create_evaluator
from passforge.factories.generator_factory import create_generator
from passforge.interfaces.strength_evaluator import StrengthEvaluator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for password and passphrase generation."""
    parser = argparse.ArgumentParser(
        prog="passforge",
        description="Generate random passwords and passphrases.",
    )
    parser.add_argument(
        "-l", "--length", "--min-length", dest="min_length", type=int,
        default=config.DEFAULT_LENGTH,
        help="Password length; the minimum length when --max-length is given "
             f"(default: {config.DEFAULT_LENGTH})",
    )
    parser.add_argument(
        "--max-length", type=int, default=None,
        help="Maximum password length",
    )
    parser.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passwords or passphrases to generate (default: 1)",
    )
    parser.add_argument(
        "-u", "--no-capitals", "--nc", action="store_true",
        help="Exclude uppercase letters from the password",
    )
    parser.add_argument(
        "-n", "--no-numbers", "--nn", action="store_true",
        help="Exclude digits from the password",
    )
    parser.add_argument(
        "-s", "--no-symbols", "--ns", action="store_true",
        help="Exclude symbols from the password",
    )
    parser.add_argument(
        "-p", "--passphrase", action="store_true",
        help="Generate a passphrase instead of a password",
    )
    parser.add_argument(
        "-w", "--words", type=int, default=config.DEFAULT_WORDS,
        help=f"Number of words in the passphrase (default: {config.DEFAULT_WORDS})",
    )
    parser.add_argument(
        "--separator", default=config.DEFAULT_SEPARATOR,
        help=f"Separator between passphrase words (default: {config.DEFAULT_SEPARATOR!r})",
    )
    parser.add_argument(
        "--word-list", type=Path, default=None, metavar="FILE",
        help="Custom word list file for passphrase generation",
    )
    parser.add_argument(
        "-e", "--evaluate-strength", action="store_true",
        help="Show the strength score and crack time of each result",
    )
    parser.add_argument(
        "--preset", default=None,
        help="Quick configuration overriding all other generation options: "
             "weak, average or strong",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging on stderr",
    )
    return parser


def parse_preset(value: str) -> ConfigPreset:
    """Parse a preset name case-insensitively."""
    try:
        return ConfigPreset(value.lower())
    except ValueError:
        raise InvalidConfigError("Invalid preset. Choices are: Weak, Average, Strong")


def parse_length(min_length: int, max_length: Optional[int]) -> Length:
    """
    Combine --length and --max-length into a length specification.
    
    Raises:
        InvalidLengthError: If max_length is smaller than min_length
    """
    if max_length is None or max_length == min_length:
        return FixedLength(value=min_length)
    if max_length < min_length:
        raise InvalidLengthError(
            "Maximum length must be greater than or equal to minimum length"
        )
    return RangeLength(min_length=min_length, max_length=max_length)


def build_password_config(args: argparse.Namespace) -> PasswordConfig:
    """Build the password configuration from a preset or individual options."""
    if args.preset:
        return PasswordConfig.from_preset(parse_preset(args.preset))
    return PasswordConfig(
        length=parse_length(args.min_length, args.max_length),
        include_uppercase=not args.no_capitals,
        include_digits=not args.no_numbers,
        include_symbols=not args.no_symbols,
    )


def build_passphrase_config(args: argparse.Namespace) -> PassphraseConfig:
    """Build the passphrase configuration from a preset or individual options."""
    if args.preset:
        return PassphraseConfig.from_preset(parse_preset(args.preset))
    word_source = (
        ExternalWordSource(path=args.word_list)
        if args.word_list is not None
        else BuiltinWordSource()
    )
    return PassphraseConfig(
        word_count=args.words,
        separator=args.separator,
        word_source=word_source,
    )


def write_results(items: List[str], evaluator: Optional[StrengthEvaluator]) -> None:
    """Print one item per line, each followed by its strength line if requested."""
    for item in items:
        print(item)
        if evaluator is not None:
            report = evaluator.evaluate(item)
            print(OutputFormat.STRENGTH_LINE.format(
                score=report.score,
                crack_time=report.crack_time,
            ))


def run(args: argparse.Namespace) -> None:
    """
    Generate and print the requested items.
    
    Raises:
        PassForgeError: On any validation or word list failure
    """
    if args.passphrase:
        kind = GeneratorKind.PASSPHRASE
        generator_config = build_passphrase_config(args)
    else:
        kind = GeneratorKind.PASSWORD
        generator_config = build_password_config(args)
    
    logger.info(f"Generating {args.count} {kind.value}(s)")
    generator = create_generator(kind)
    items = generator.generate_multiple(generator_config, args.count)
    
    evaluator = create_evaluator(EvaluatorName.ZXCVBN) if args.evaluate_strength else None
    write_results(items, evaluator)


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s"
    )
    
    try:
        run(args)
    except PassForgeError as e:
        logger.debug("Generation failed", exc_info=True)
        print(OutputFormat.ERROR_LINE.format(message=e), file=sys.stderr)
        return 1
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
