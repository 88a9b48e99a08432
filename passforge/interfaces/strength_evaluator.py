"""Abstract strength evaluator interface."""

from abc import ABC, abstractmethod
from passforge.domain.consts import StrengthScore
from passforge.domain.errors import InvalidLengthError
from passforge.domain.models import StrengthReport


class StrengthEvaluator(ABC):
    """Abstract strength evaluator interface.
    
    All evaluators must implement:
    - evaluate: Score a non-empty string and return a StrengthReport
    
    passes_threshold is derived from evaluate, so the two always agree.
    """
    
    MIN_PASS_SCORE = StrengthScore.MIN_PASS
    
    @abstractmethod
    def evaluate(self, text: str) -> StrengthReport:
        """Score the given text.
        
        Args:
            text: Password or passphrase to score
            
        Returns:
            StrengthReport with a 0-4 score and crack time estimate
            
        Raises:
            InvalidLengthError: If text is empty
        """
        pass
    
    def passes_threshold(self, text: str) -> bool:
        """Return True if the text scores at least MIN_PASS_SCORE.
        
        Raises:
            InvalidLengthError: If text is empty
        """
        return self.evaluate(text).score >= self.MIN_PASS_SCORE
    
    @staticmethod
    def require_text(text: str) -> None:
        """Reject empty input before scoring."""
        if not text:
            raise InvalidLengthError("Input password cannot be empty")
