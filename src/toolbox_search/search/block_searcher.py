"""Trigram index over toolbox block descriptors.

Each descriptor is indexed under every trigram of its extracted text. A query
matches a descriptor when the descriptor holds every query trigram except the
last, and holds some trigram that starts with the last one. The last trigram
is treated as a prefix because it may be a word the user has not finished
typing.

Descriptors are arbitrary host objects (usually plain dicts) so posting sets
are keyed by object identity, and results hand back the very objects that were
indexed.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
import logging
from typing import Any

from toolbox_search.blocks.registry import BlockDefinitionRegistry
from toolbox_search.blocks.toolbox import collect_toolbox_blocks
from toolbox_search.observability.metrics import (
    BLOCKS_INDEXED,
    INDEX_TRIGRAM_COUNT,
    OPERATION_LATENCY,
    track_latency,
)
from toolbox_search.observability.tracing import create_span
from toolbox_search.search.analyzers import TRIGRAM_SIZE, generate_trigrams
from toolbox_search.search.extraction import descriptor_data, descriptor_type, extract_block_text


logger = logging.getLogger(__name__)

# Posting set: id(descriptor) -> descriptor
Postings = dict[int, Any]


class BlockSearcher:
    """Append-only trigram search index for toolbox blocks.

    Not thread-safe: callers sharing an instance must serialize
    :meth:`index_blocks` against concurrent queries.
    """

    def __init__(self, registry: BlockDefinitionRegistry | None = None) -> None:
        self.registry = registry if registry is not None else BlockDefinitionRegistry.with_builtins()
        self._trigrams_to_blocks: dict[str, Postings] = {}
        # id(descriptor) -> first-indexed sequence number, for stable result order
        self._index_order: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._index_order)

    @property
    def trigram_count(self) -> int:
        return len(self._trigrams_to_blocks)

    def generate_trigrams(self, text: str) -> list[str]:
        return generate_trigrams(text)

    def index_blocks(self, blocks: Iterable[Any]) -> int:
        """Add ``blocks`` to the index and return how many were indexed.

        Blocks with no extractable text are skipped.
        """
        indexed = 0
        skipped = 0
        with create_span("block_search.index_blocks") as span, track_latency(OPERATION_LATENCY, operation="index"):
            for block in blocks:
                if self._index_block(block):
                    indexed += 1
                else:
                    skipped += 1
            span.set_attribute("block_search.indexed", indexed)
            span.set_attribute("block_search.skipped", skipped)

        BLOCKS_INDEXED.labels(outcome="indexed").inc(indexed)
        BLOCKS_INDEXED.labels(outcome="skipped").inc(skipped)
        INDEX_TRIGRAM_COUNT.set(self.trigram_count)
        logger.debug(
            "Indexed %d blocks (%d skipped); index holds %d trigrams",
            indexed,
            skipped,
            self.trigram_count,
        )
        return indexed

    def index_toolbox(self, toolbox: Mapping[str, Any] | Sequence[Any]) -> int:
        """Index every block entry found in a toolbox definition."""
        return self.index_blocks(collect_toolbox_blocks(toolbox))

    def block_types_matching(self, query: str) -> list[Any]:
        """Return the indexed descriptors matching ``query``.

        Each descriptor appears once, in the order it was first indexed. No
        match yields an empty list.
        """
        with create_span("block_search.query", attributes={"block_search.query_length": len(query)}) as span:
            with track_latency(OPERATION_LATENCY, operation="query"):
                matches = self._match(query)
            span.set_attribute("block_search.matches", len(matches))
        return matches

    def _index_block(self, block: Any) -> bool:
        data = descriptor_data(block)
        definition = self.registry.get(descriptor_type(data))
        trigrams = generate_trigrams(extract_block_text(data, definition))
        if not trigrams:
            return False

        key = id(block)
        for trigram in trigrams:
            self._trigrams_to_blocks.setdefault(trigram, {})[key] = block
        self._index_order.setdefault(key, len(self._index_order))
        return True

    def _match(self, query: str) -> list[Any]:
        trigrams = generate_trigrams(query.lower())
        if not trigrams:
            return []

        *required, last = trigrams
        candidates: Postings | None = None
        for trigram in required:
            postings = self._trigrams_to_blocks.get(trigram)
            if not postings:
                return []
            if candidates is None:
                candidates = dict(postings)
            else:
                candidates = {key: block for key, block in candidates.items() if key in postings}
            if not candidates:
                return []

        prefix_matches = self._prefix_matches(last)
        if candidates is None:
            matches = prefix_matches
        else:
            matches = {key: block for key, block in candidates.items() if key in prefix_matches}

        return [matches[key] for key in sorted(matches, key=self._index_order.__getitem__)]

    def _prefix_matches(self, prefix: str) -> Postings:
        # Keys are at most TRIGRAM_SIZE long, so a full-size prefix can only match itself.
        if len(prefix) >= TRIGRAM_SIZE:
            return self._trigrams_to_blocks.get(prefix, {})

        matches: Postings = {}
        for trigram, postings in self._trigrams_to_blocks.items():
            if trigram.startswith(prefix):
                matches.update(postings)
        return matches
