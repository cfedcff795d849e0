from abc import ABC, abstractmethod
from typing import List, Protocol, Set, runtime_checkable


@runtime_checkable
class Tokenizer(Protocol):
    """
    Capability shared by every tokenizer.

    Any object with these two methods can be plugged in as a word tokenizer.
    The set variant must hold the same tokens as the list variant, deduplicated.
    """

    def tokenize_to_list(self, text: str) -> List[str]:
        ...

    def tokenize_to_set(self, text: str) -> Set[str]:
        ...


class TokenizerBase(ABC):
    """Abstract base class for the bundled tokenizers."""

    @abstractmethod
    def tokenize_to_list(self, text: str) -> List[str]:
        """
        Abstract method for tokenization.

        Args:
            text: Input text to tokenize

        Returns:
            List of tokens in production order
        """
        pass

    def tokenize_to_set(self, text: str) -> Set[str]:
        """
        Tokenize text into its unique tokens.

        Args:
            text: Input text to tokenize

        Returns:
            Set of distinct tokens
        """
        return set(self.tokenize_to_list(text))
