from simtok.tokenizer.base import Tokenizer
from simtok.tokenizer.types import BatchTokenizationResult, TokenResult
from concurrent.futures import Future, ThreadPoolExecutor
import multiprocessing
import logging
from typing import Dict, List, Optional

# Configure logging
logger = logging.getLogger(__name__)


def tokenize_batch(
    tokenizer: Tokenizer,
    texts: List[str],
    as_set: bool = False,
    max_workers: Optional[int] = None,
) -> BatchTokenizationResult:
    """
    Tokenize multiple texts in parallel with one tokenizer.

    The tokenizer is shared by all worker threads, so it must not be
    reconfigured until this call returns. A text that raises leaves None in
    its slot and its message in ``errors``; the other texts still complete.

    Args:
        tokenizer: Tokenizer used for every text
        texts: List of input text strings
        as_set: Produce token sets instead of token lists
        max_workers: Maximum number of worker threads (None for CPU count)

    Returns:
        BatchTokenizationResult with one entry per text, in input order

    Raises:
        ValueError: If max_workers is less than 1

    Examples:
        >>> from simtok.tokenizer import WordQGramTokenizer
        >>> batch_result = tokenize_batch(WordQGramTokenizer(), ["ab cd", "ef"])
        >>> batch_result.results
        [['ab', 'cd'], ['ef']]
    """
    if max_workers is not None and max_workers < 1:
        raise ValueError("max_workers must be a positive integer")

    if not texts:
        return BatchTokenizationResult(results=[])

    tokenize_func = tokenizer.tokenize_to_set if as_set else tokenizer.tokenize_to_list
    logger.info(f"Starting batch tokenization of {len(texts)} texts")

    with ThreadPoolExecutor(max_workers=max_workers or multiprocessing.cpu_count()) as executor:
        futures = [executor.submit(tokenize_func, text) for text in texts]

    # The pool has shut down, every future is done.
    results: List[Optional[TokenResult]] = []
    errors: Dict[int, str] = {}
    for index, future in enumerate(futures):
        results.append(_collect(future, index, errors))

    batch_result = BatchTokenizationResult(results=results, errors=errors)
    logger.info(
        f"Batch tokenization complete: {batch_result.succeeded} successful, "
        f"{len(errors)} failed"
    )
    return batch_result


def _collect(
    future: "Future[TokenResult]", index: int, errors: Dict[int, str]
) -> Optional[TokenResult]:
    exc = future.exception()
    if exc is None:
        return future.result()

    logger.error(f"Failed to tokenize text at index {index}: {exc}")
    errors[index] = str(exc)
    return None
