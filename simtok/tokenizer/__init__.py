"""
Tokenizer Component for string similarity metrics.

This module splits text into words and words into overlapping character
q-grams, producing either ordered token lists or token sets.
"""

from simtok.tokenizer.base import Tokenizer, TokenizerBase
from simtok.tokenizer.batch import tokenize_batch
from simtok.tokenizer.qgram_tokenizer import QGramTokenizer
from simtok.tokenizer.types import BatchTokenizationResult, PaddingConfig, QGramConfig
from simtok.tokenizer.word_qgram_tokenizer import WordQGramTokenizer
from simtok.tokenizer.word_tokenizer import WhitespaceTokenizer, WordTokenizer
from typing import Optional


def create_qgram_tokenizer(q: int = 2, padding: Optional[str] = None) -> QGramTokenizer:
    """
    Factory function to create a q-gram tokenizer.

    Args:
        q: Length of each q-gram
        padding: Padding character repeated q - 1 times at both ends
            (None for no padding)

    Returns:
        Configured QGramTokenizer instance

    Examples:
        >>> create_qgram_tokenizer(3)
        QGramTokenizer(q=3)
    """
    if padding is None:
        return QGramTokenizer(q)
    return QGramTokenizer.extended(q, padding)


def create_word_qgram_tokenizer(
    q: int = 2,
    padding: Optional[str] = None,
    word_tokenizer: Optional[Tokenizer] = None,
) -> WordQGramTokenizer:
    """
    Factory function to create a word q-gram tokenizer.

    Args:
        q: Length of each q-gram
        padding: Padding character for the q-gram tokenizer (None for no padding)
        word_tokenizer: Word tokenizer to use (None for WhitespaceTokenizer)

    Returns:
        Configured WordQGramTokenizer instance
    """
    return WordQGramTokenizer(
        word_tokenizer=word_tokenizer,
        qgram_tokenizer=create_qgram_tokenizer(q, padding),
    )


__all__ = [
    "create_qgram_tokenizer",
    "create_word_qgram_tokenizer",
    "tokenize_batch",
    "Tokenizer",
    "TokenizerBase",
    "QGramTokenizer",
    "WordQGramTokenizer",
    "WhitespaceTokenizer",
    "WordTokenizer",
    "QGramConfig",
    "PaddingConfig",
    "BatchTokenizationResult",
]
