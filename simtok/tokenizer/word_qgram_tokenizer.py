from simtok.tokenizer.base import Tokenizer, TokenizerBase
from simtok.tokenizer.qgram_tokenizer import QGramTokenizer
from simtok.tokenizer.word_tokenizer import WhitespaceTokenizer
from typing import List, Optional, Set
import logging

# Configure logging
logger = logging.getLogger(__name__)


class WordQGramTokenizer(TokenizerBase):
    """
    Q-gram tokenizer for words.

    The input is first broken up into words by a word tokenizer, then each
    word is broken up into q-grams by a QGramTokenizer. Q-grams never span
    two words.

    Both tokenizers can be replaced through their properties between calls.
    Replacing them while another thread is tokenizing with the same instance
    is not supported; no locking is done here.

    Examples:
        >>> tokenizer = WordQGramTokenizer()
        >>> tokenizer.tokenize_to_list("hello world")
        ['he', 'el', 'll', 'lo', 'wo', 'or', 'rl', 'ld']
    """

    def __init__(
        self,
        word_tokenizer: Optional[Tokenizer] = None,
        qgram_tokenizer: Optional[QGramTokenizer] = None,
    ):
        """
        Initialize the word q-gram tokenizer.

        Args:
            word_tokenizer: Splits input into words (default: WhitespaceTokenizer)
            qgram_tokenizer: Splits words into q-grams (default: QGramTokenizer with q=2)
        """
        self._word_tokenizer = (
            word_tokenizer if word_tokenizer is not None else WhitespaceTokenizer()
        )
        self._qgram_tokenizer = (
            qgram_tokenizer if qgram_tokenizer is not None else QGramTokenizer(2)
        )
        logger.debug(f"Initialized {self!r}")

    @property
    def word_tokenizer(self) -> Tokenizer:
        return self._word_tokenizer

    @word_tokenizer.setter
    def word_tokenizer(self, word_tokenizer: Tokenizer) -> None:
        self._word_tokenizer = word_tokenizer

    @property
    def qgram_tokenizer(self) -> QGramTokenizer:
        return self._qgram_tokenizer

    @qgram_tokenizer.setter
    def qgram_tokenizer(self, qgram_tokenizer: QGramTokenizer) -> None:
        self._qgram_tokenizer = qgram_tokenizer

    def tokenize_to_list(self, text: str) -> List[str]:
        """
        Tokenize text into the q-grams of each of its words.

        Args:
            text: Input text string

        Returns:
            Q-grams of every word, concatenated in word order
        """
        words = self._word_tokenizer.tokenize_to_list(text)

        tokens: List[str] = []
        for word in words:
            tokens.extend(self._qgram_tokenizer.tokenize_to_list(word))

        logger.debug(f"Tokenized {len(words)} words into {len(tokens)} q-grams")
        return tokens

    def tokenize_to_set(self, text: str) -> Set[str]:
        """
        Tokenize text into the distinct q-grams of its words.

        tokenize_to_list is not reused here. Duplicate words are removed by
        the word tokenizer first so each distinct word is split into q-grams
        only once.

        Args:
            text: Input text string

        Returns:
            Set of q-grams appearing in any word
        """
        words = self._word_tokenizer.tokenize_to_set(text)

        tokens: Set[str] = set()
        for word in words:
            tokens.update(self._qgram_tokenizer.tokenize_to_list(word))

        logger.debug(f"Tokenized {len(words)} unique words into {len(tokens)} q-grams")
        return tokens

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__} [{self._word_tokenizer!r}, "
            f"{self._qgram_tokenizer!r}]"
        )
