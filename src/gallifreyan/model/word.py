"""
Word Parser
===========
Turns free-form text into the ordered letters of a word.

Digraphs are grouped greedily and case-insensitively: C, P, W, S, T or G
followed by H, Q followed by U, and N followed by G read as one letter.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from gallifreyan.errors import ParseError
from gallifreyan.model.alphabet import Letter

logger = logging.getLogger(__name__)

DiagnosticSink = Callable[[str], None]

DIGRAPH_TAILS: Dict[str, str] = {
    "C": "H",
    "P": "H",
    "W": "H",
    "S": "H",
    "T": "H",
    "G": "H",
    "Q": "U",
    "N": "G",
}


def _log_token(token: str) -> None:
    logger.debug(f"Grouped token: {token}")


def group_tokens(text: str) -> List[Tuple[int, str]]:
    """Split `text` into (index, token) pairs, joining digraphs. Tokens keep the original case."""
    tokens: List[Tuple[int, str]] = []
    i = 0
    while i < len(text):
        tail = DIGRAPH_TAILS.get(text[i].upper())
        if tail is not None and text[i + 1:i + 2].upper() == tail:
            tokens.append((i, text[i:i + 2]))
            i += 2
        else:
            tokens.append((i, text[i]))
            i += 1
    return tokens


@dataclass(frozen=True)
class Word:
    """The letters of a word in reading order."""
    letters: Tuple[Letter, ...] = ()

    def __iter__(self) -> Iterator[Letter]:
        return iter(self.letters)

    def __len__(self) -> int:
        return len(self.letters)

    def __getitem__(self, index: int) -> Letter:
        return self.letters[index]

    def __str__(self) -> str:
        return "".join(letter.value for letter in self.letters)

    @property
    def consonants(self) -> Tuple[Letter, ...]:
        return tuple(letter for letter in self.letters if not letter.is_vowel)

    @classmethod
    def parse(cls, text: str, diagnostics: Optional[DiagnosticSink] = None) -> Word:
        """
        Parse `text` into a word.

        Args:
            text: The input string.
            diagnostics: Receives every grouped token. Defaults to DEBUG logging.

        Raises:
            ParseError: If any token is not a letter. No partial word is returned.
        """
        sink = diagnostics if diagnostics is not None else _log_token
        letters: List[Letter] = []
        for index, token in group_tokens(text):
            sink(token)
            try:
                letters.append(Letter(token.upper()))
            except ValueError:
                raise ParseError(token, index) from None
        return cls(tuple(letters))


def parse(text: str, diagnostics: Optional[DiagnosticSink] = None) -> Word:
    """Parse `text` into a `Word`. See `Word.parse`."""
    return Word.parse(text, diagnostics=diagnostics)
