"""Strength evaluator backed by the zxcvbn algorithm."""

import logging
from zxcvbn import zxcvbn
from passforge.config.config import config
from passforge.domain.models import StrengthReport
from passforge.interfaces.strength_evaluator import StrengthEvaluator

logger = logging.getLogger(__name__)

# Attack model used for the reported crack time
CRACK_TIME_SCENARIO = "offline_slow_hashing_1e4_per_second"


class ZxcvbnAnalysis(StrengthEvaluator):
    """zxcvbn pattern, dictionary and brute-force analysis.
    
    Crack times assume an offline attack at 10,000 guesses per second.
    The whole input is scored; zxcvbn's own length limit is raised to fit it.
    """
    
    def evaluate(self, text: str) -> StrengthReport:
        """Score the text with zxcvbn.
        
        Raises:
            InvalidLengthError: If text is empty
        """
        self.require_text(text)
        
        max_length = max(len(text), config.EVALUATOR_MAX_LENGTH)
        if len(text) > config.EVALUATOR_MAX_LENGTH:
            logger.debug(f"Scoring {len(text)} characters (above the default limit)")
        
        result = zxcvbn(text, max_length=max_length)
        return StrengthReport(
            score=result["score"],
            crack_time=str(result["crack_times_display"][CRACK_TIME_SCENARIO]),
        )
