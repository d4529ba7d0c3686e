"""Trigram search over the blocks of a visual programming toolbox."""

from toolbox_search.blocks import BlockDefinitionError, BlockDefinitionRegistry, ToolboxBlock, collect_toolbox_blocks
from toolbox_search.bootstrap import build_block_searcher
from toolbox_search.search import BlockSearcher, extract_block_text, generate_trigrams


__all__ = [
    "BlockDefinitionError",
    "BlockDefinitionRegistry",
    "BlockSearcher",
    "ToolboxBlock",
    "build_block_searcher",
    "collect_toolbox_blocks",
    "extract_block_text",
    "generate_trigrams",
]
