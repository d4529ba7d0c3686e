"""Collect block entries from a JSON toolbox definition."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
import logging
from typing import Any

from pydantic import BaseModel


logger = logging.getLogger(__name__)

BLOCK_KIND = "block"
CATEGORY_KIND = "category"


def collect_toolbox_blocks(toolbox: Mapping[str, Any] | Sequence[Any]) -> list[Any]:
    """Return every block entry of a toolbox, in document order.

    Accepts a toolbox definition (``{"kind": "categoryToolbox", "contents": [...]}``),
    a single category, or a bare ``contents`` list. Categories are walked
    recursively. Entries are returned by reference so that search results can
    be matched back to the toolbox items that produced them. Dynamic categories
    (``custom``), separators, labels and buttons contribute nothing.
    """
    blocks: list[Any] = []
    _collect(toolbox, blocks)
    return blocks


def _collect(node: Any, blocks: list[Any]) -> None:
    if isinstance(node, (Mapping, BaseModel)):
        kind = _get(node, "kind")
        if isinstance(kind, str) and kind.lower() == BLOCK_KIND:
            blocks.append(node)
            return
        if isinstance(kind, str) and kind.lower() == CATEGORY_KIND and _get(node, "custom"):
            logger.debug("Skipping dynamic category: %s", _get(node, "name"))
            return
        contents = _get(node, "contents")
        if contents is not None:
            _collect(contents, blocks)
        return

    if isinstance(node, Sequence) and not isinstance(node, (str, bytes)):
        for item in node:
            _collect(item, blocks)


def _get(node: Any, key: str) -> Any:
    if isinstance(node, Mapping):
        return node.get(key)
    return getattr(node, key, None) or (node.model_extra or {}).get(key)
