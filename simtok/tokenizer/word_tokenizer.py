from simtok.tokenizer.base import TokenizerBase
from typing import List
import re
import logging

# Configure logging
logger = logging.getLogger(__name__)


class WhitespaceTokenizer(TokenizerBase):
    """Tokenizer that splits text on runs of whitespace."""

    def tokenize_to_list(self, text: str) -> List[str]:
        """
        Split text into words separated by whitespace.

        Leading and trailing whitespace never produce empty words.

        Args:
            text: Input text string

        Returns:
            List of words in order of appearance

        Examples:
            >>> tokenizer = WhitespaceTokenizer()
            >>> tokenizer.tokenize_to_list("  hello   world ")
            ['hello', 'world']
        """
        words = text.split()
        logger.debug(f"Split into {len(words)} words")
        return words

    def __repr__(self) -> str:
        return "WhitespaceTokenizer()"


class WordTokenizer(TokenizerBase):
    """Tokenizer for word-level tokenization using a regular expression."""

    DEFAULT_PATTERN = r"\b\w+\b"

    def __init__(self, lowercase: bool = False, pattern: str = DEFAULT_PATTERN):
        """
        Initialize word tokenizer.

        Args:
            lowercase: Whether to convert text to lowercase
            pattern: Regular expression matching a single word

        Raises:
            re.error: If pattern is not a valid regular expression
        """
        self._word_pattern = re.compile(pattern)
        self._lowercase = lowercase
        logger.debug(
            f"Initialized WordTokenizer with lowercase={lowercase}, pattern={pattern!r}"
        )

    def tokenize_to_list(self, text: str) -> List[str]:
        """
        Tokenize text at word level, dropping punctuation.

        Args:
            text: Input text string

        Returns:
            List of words

        Examples:
            >>> tokenizer = WordTokenizer(lowercase=True)
            >>> tokenizer.tokenize_to_list("Hello, world!")
            ['hello', 'world']
        """
        if self._lowercase:
            text = text.lower()

        # Whole match; custom patterns may contain groups.
        tokens = [match.group(0) for match in self._word_pattern.finditer(text)]
        logger.debug(f"Tokenized into {len(tokens)} words")
        return tokens

    def __repr__(self) -> str:
        return (
            f"WordTokenizer(lowercase={self._lowercase}, "
            f"pattern={self._word_pattern.pattern!r})"
        )
