"""Analyzer pipeline that turns block text into trigram tokens.

Composable tokenizer/filter design: a regex word tokenizer, a lowercase
filter and a trigram filter that slides a 3-character window across each word.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, replace
import re
from typing import Protocol


TRIGRAM_SIZE = 3


@dataclass
class Token:
    """Represents a token emitted by analyzers."""

    text: str
    position: int
    start_char: int
    end_char: int

    def copy_with(self, **updates: object) -> Token:
        return replace(self, **updates)


class Tokenizer(Protocol):
    """Protocol implemented by tokenizers."""

    def __call__(self, text: str) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


class TokenFilter(Protocol):
    """Protocol implemented by token filters."""

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


class RegexTokenizer:
    """Regex-based tokenizer that yields word tokens.

    Words are runs of word characters, so underscores stay inside a word.
    """

    def __init__(self, pattern: str = r"\w+", flags: int = re.UNICODE) -> None:
        self.pattern = re.compile(pattern, flags)

    def __call__(self, text: str) -> Iterator[Token]:
        for position, match in enumerate(self.pattern.finditer(text)):
            yield Token(
                text=match.group(0),
                position=position,
                start_char=match.start(),
                end_char=match.end(),
            )


class LowercaseFilter:
    """Filter that lowercases token text."""

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            if token.text.islower():
                yield token
            else:
                yield token.copy_with(text=token.text.lower())


class TrigramFilter:
    """Replaces each word with its overlapping windows of ``size`` characters.

    Words shorter than the window are emitted whole.
    """

    def __init__(self, size: int = TRIGRAM_SIZE) -> None:
        self.size = size

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            word = token.text
            if len(word) < self.size:
                yield token
                continue
            for offset in range(len(word) - self.size + 1):
                yield token.copy_with(
                    text=word[offset : offset + self.size],
                    start_char=token.start_char + offset,
                    end_char=token.start_char + offset + self.size,
                )


class AnalyzerPipeline:
    """Composable analyzer pipeline (tokenizer + filters)."""

    def __init__(self, tokenizer: Tokenizer, filters: Sequence[TokenFilter] | None = None) -> None:
        self.tokenizer = tokenizer
        self.filters = list(filters or [])

    def __call__(self, text: str) -> list[Token]:
        stream: Iterable[Token] = self.tokenizer(text)
        for token_filter in self.filters:
            stream = token_filter(stream)
        tokens = list(stream)
        for idx, token in enumerate(tokens):  # normalize positions post-filtering
            token.position = idx
        return tokens


class TrigramAnalyzer:
    """Lowercases text and splits it into word trigrams."""

    def __init__(self) -> None:
        self.pipeline = AnalyzerPipeline(RegexTokenizer(), [LowercaseFilter(), TrigramFilter()])

    def __call__(self, text: str) -> list[Token]:
        if not text:
            return []
        return self.pipeline(text)


_DEFAULT_ANALYZER = TrigramAnalyzer()


def generate_trigrams(text: str) -> list[str]:
    """Return the trigrams of ``text`` in word order, then window order.

    Examples:
        >>> generate_trigrams("")
        []
        >>> generate_trigrams("a")
        ['a']
        >>> generate_trigrams("Sort list")
        ['sor', 'ort', 'lis', 'ist']
    """
    return [token.text for token in _DEFAULT_ANALYZER(text)]
