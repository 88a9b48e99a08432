"""Factory for creating strength evaluator instances."""

from passforge.interfaces.strength_evaluator import StrengthEvaluator
from passforge.implementations.evaluators import ZxcvbnAnalysis
from passforge.domain.consts import EvaluatorName
from passforge.domain.errors import InvalidConfigError


EVALUATORS: dict[str, type[StrengthEvaluator]] = {
    EvaluatorName.ZXCVBN: ZxcvbnAnalysis,
}


def register_evaluator(name: str, evaluator_cls: type[StrengthEvaluator]) -> None:
    """Make an additional evaluator available through create_evaluator()."""
    EVALUATORS[name] = evaluator_cls


def create_evaluator(name: str = EvaluatorName.ZXCVBN) -> StrengthEvaluator:
    """Factory for creating strength evaluators.
    
    Returns:
        StrengthEvaluator instance
        
    Raises:
        InvalidConfigError: If name is unknown
    """
    try:
        evaluator_cls = EVALUATORS[name]
    except KeyError:
        raise InvalidConfigError(f"Unknown evaluator: {name}")
    return evaluator_cls()
