"""Trigram search over toolbox blocks.

- analyzers: word tokenizer and trigram filter
- extraction: searchable text of a block descriptor
- block_searcher: the trigram index and query matcher
"""

from toolbox_search.search.analyzers import generate_trigrams
from toolbox_search.search.block_searcher import BlockSearcher
from toolbox_search.search.extraction import extract_block_text


__all__ = ["BlockSearcher", "extract_block_text", "generate_trigrams"]
