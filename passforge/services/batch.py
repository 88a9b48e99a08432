"""Batch generation logic (sequential and parallel)."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List
from passforge.config.config import config
from passforge.domain.errors import InvalidGenAmountError

logger = logging.getLogger(__name__)


def validate_amount(amount: int) -> None:
    """
    Reject batch sizes below 1.
    
    An amount of exactly 1 is valid and equivalent to a single generate call.
    
    Raises:
        InvalidGenAmountError: If amount < 1
    """
    if amount < 1:
        raise InvalidGenAmountError(f"Amount cannot be smaller than 1 (got {amount})")


def run_batch(produce: Callable[[], str], amount: int) -> List[str]:
    """
    Call `produce` `amount` times and collect the results in call order.
    
    Automatically chooses between sequential and parallel processing based on:
    - config.WORKER_THREADS (must be > 1 for parallel)
    - Batch size (must be >= config.PARALLEL_THRESHOLD for parallel)
    
    Each call is independent; `produce` must only read immutable state and
    draw from a thread-safe randomness source.
    
    Any exception raised by `produce` propagates to the caller.
    """
    validate_amount(amount)
    
    num_threads = config.WORKER_THREADS
    use_parallel = (
        num_threads > 1 and
        amount >= config.PARALLEL_THRESHOLD
    )
    
    if use_parallel:
        logger.debug(
            f"Generating {amount} items in parallel mode (threads={num_threads})"
        )
        return _run_batch_parallel(produce, amount, num_threads)
    
    logger.debug(f"Generating {amount} items in sequential mode")
    return [produce() for _ in range(amount)]


def _run_batch_parallel(
    produce: Callable[[], str],
    amount: int,
    num_threads: int,
) -> List[str]:
    """
    Parallel batch implementation using ThreadPoolExecutor.
    
    Results are collected in submission order. If any call raises, the
    remaining futures are cancelled and the exception is re-raised.
    """
    with ThreadPoolExecutor(max_workers=num_threads) as executor:
        futures = [executor.submit(produce) for _ in range(amount)]
        
        results = []
        try:
            for future in futures:
                results.append(future.result())
        except Exception:
            logger.error(f"Batch generation failed after {len(results)} of {amount} items")
            for f in futures:
                f.cancel()
            raise
    
    return results
