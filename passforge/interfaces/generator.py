"""Abstract generator interface."""

from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar
from passforge.services.batch import run_batch

ConfigT = TypeVar("ConfigT")


class Generator(ABC, Generic[ConfigT]):
    """Abstract generator interface.
    
    All generators must implement:
    - generate: Produce one secret from a configuration
    
    generate_multiple is shared: it validates the amount and runs
    independent generate calls, in parallel for large batches.
    """
    
    @abstractmethod
    def generate(self, config: ConfigT) -> str:
        """Generate one secret.
        
        Args:
            config: Generator-specific configuration
            
        Returns:
            The generated string
            
        Raises:
            PassForgeError: If the configuration is invalid
        """
        pass
    
    def generate_multiple(self, config: ConfigT, amount: int) -> List[str]:
        """Generate `amount` independent secrets.
        
        Raises:
            InvalidGenAmountError: If amount < 1
            PassForgeError: Any error raised by generate()
        """
        return run_batch(lambda: self.generate(config), amount)
