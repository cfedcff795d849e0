from simtok.tokenizer.base import TokenizerBase
from simtok.tokenizer.types import PaddingConfig, QGramConfig
from typing import List
import logging

# Configure logging
logger = logging.getLogger(__name__)


class QGramTokenizer(TokenizerBase):
    """
    Tokenizer that breaks a string into overlapping substrings of length q.

    Padding, when configured, is added to both ends of the input before the
    q-grams are taken. Padding each end with q - 1 characters lets the edge
    characters take part in as many q-grams as the interior ones.

    An input whose padded length is shorter than q yields no q-grams.

    Examples:
        >>> QGramTokenizer(2).tokenize_to_list("hello")
        ['he', 'el', 'll', 'lo']
        >>> QGramTokenizer.extended(2).tokenize_to_list("ab")
        ['#a', 'ab', 'b#']
    """

    DEFAULT_PADDING = "#"

    def __init__(self, q: int = 2, start_padding: str = "", end_padding: str = ""):
        """
        Initialize q-gram tokenizer.

        Args:
            q: Length of each q-gram, must be a positive integer
            start_padding: String prepended to the input
            end_padding: String appended to the input

        Raises:
            pydantic.ValidationError: If q is not a positive integer or a
                padding is not a string
        """
        self._config = QGramConfig(
            q=q, start_padding=start_padding, end_padding=end_padding
        )
        logger.debug(f"Initialized {self!r}")

    @classmethod
    def extended(cls, q: int, padding: str = DEFAULT_PADDING) -> "QGramTokenizer":
        """
        Create a tokenizer that pads both ends with q - 1 copies of padding.

        Args:
            q: Length of each q-gram
            padding: Padding character

        Returns:
            Padded QGramTokenizer instance

        Raises:
            pydantic.ValidationError: If q is not a positive integer or
                padding is not a single character
        """
        config = PaddingConfig(q=q, padding=padding)
        pad = config.padding * (config.q - 1)
        return cls(q=config.q, start_padding=pad, end_padding=pad)

    @property
    def q(self) -> int:
        return self._config.q

    @property
    def start_padding(self) -> str:
        return self._config.start_padding

    @property
    def end_padding(self) -> str:
        return self._config.end_padding

    @property
    def config(self) -> QGramConfig:
        return self._config

    def tokenize_to_list(self, text: str) -> List[str]:
        """
        Tokenize text into q-grams.

        Args:
            text: Input text string

        Returns:
            List of q-grams, left to right, one per offset
        """
        q = self._config.q
        padded = self._config.start_padding + text + self._config.end_padding

        if len(padded) < q:
            logger.debug(f"Input too short for {q}-grams: {len(padded)} < {q}")
            return []

        qgrams = [padded[i : i + q] for i in range(len(padded) - q + 1)]
        logger.debug(f"Generated {len(qgrams)} {q}-grams")
        return qgrams

    def __repr__(self) -> str:
        if self._config.start_padding or self._config.end_padding:
            return (
                f"QGramTokenizer(q={self._config.q}, "
                f"start_padding={self._config.start_padding!r}, "
                f"end_padding={self._config.end_padding!r})"
            )
        return f"QGramTokenizer(q={self._config.q})"
