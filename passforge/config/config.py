"""Configuration loaded from environment variables."""

import os


def _get_env_int(key: str, default: str) -> int:
    """Get integer environment variable with validation."""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        raise ValueError(f"Invalid integer value for {key}")


class Config:
    """Centralized configuration from environment variables."""
    
    # Password defaults (used when no preset is selected)
    DEFAULT_LENGTH: int = _get_env_int("PASSFORGE_DEFAULT_LENGTH", "18")
    
    # Passphrase defaults
    DEFAULT_WORDS: int = _get_env_int("PASSFORGE_DEFAULT_WORDS", "6")
    DEFAULT_SEPARATOR: str = os.getenv("PASSFORGE_DEFAULT_SEPARATOR", "-")
    
    # Batch generation: threads used by generate_multiple()
    # 1 = always sequential, >1 = fan out large batches over a thread pool
    WORKER_THREADS: int = _get_env_int("PASSFORGE_WORKER_THREADS", "1")
    
    # Minimum batch size before generate_multiple() switches to the thread pool
    PARALLEL_THRESHOLD: int = _get_env_int("PASSFORGE_PARALLEL_THRESHOLD", "1000")
    
    # Strength evaluation: zxcvbn max_length floor; longer input raises it to fit
    EVALUATOR_MAX_LENGTH: int = _get_env_int("PASSFORGE_EVALUATOR_MAX_LENGTH", "72")
    
    # Logging
    LOG_LEVEL: str = os.getenv("PASSFORGE_LOG_LEVEL", "WARNING").upper()


config = Config()
