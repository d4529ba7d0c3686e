"""Registry of block definitions keyed by block type."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
import logging
from pathlib import Path
from typing import Any

import orjson
from pydantic import ValidationError

from toolbox_search.blocks.builtin import BUILTIN_BLOCK_DEFINITIONS
from toolbox_search.blocks.models import BlockDefinition


logger = logging.getLogger(__name__)


class BlockDefinitionError(ValueError):
    """Raised when block definitions cannot be registered or loaded."""


class BlockDefinitionRegistry:
    """Mapping of block type id to its JSON definition.

    Each registry is an independent instance; hosts decide whether a single
    registry is shared between searchers.
    """

    def __init__(self, definitions: Iterable[Mapping[str, Any]] | None = None) -> None:
        self._definitions: dict[str, BlockDefinition] = {}
        if definitions is not None:
            self.define_blocks_with_json_array(definitions)

    @classmethod
    def with_builtins(cls) -> BlockDefinitionRegistry:
        """Return a registry preloaded with the stock block definitions."""
        return cls(BUILTIN_BLOCK_DEFINITIONS)

    def define_blocks_with_json_array(self, definitions: Iterable[Mapping[str, Any]]) -> list[str]:
        """Register JSON block definitions and return the registered type ids.

        Redefining an existing type replaces the earlier definition.
        """
        registered: list[str] = []
        for position, raw in enumerate(definitions):
            if not isinstance(raw, Mapping):
                raise BlockDefinitionError(f"Block definition #{position} is not an object: {raw!r}")
            type_id = raw.get("type")
            if not isinstance(type_id, str) or not type_id:
                raise BlockDefinitionError(f"Block definition #{position} is missing a 'type'")
            try:
                definition = BlockDefinition.model_validate(dict(raw))
            except ValidationError as exc:
                raise BlockDefinitionError(f"Invalid definition for block '{type_id}': {exc}") from exc

            if type_id in self._definitions:
                logger.warning("Block definition overwrites existing type: %s", type_id)
            self._definitions[type_id] = definition
            registered.append(type_id)

        logger.debug("Registered %d block definitions", len(registered))
        return registered

    def load_json_file(self, path: Path | str) -> list[str]:
        """Register every definition in a JSON file holding an array of definitions."""
        file_path = Path(path).expanduser()
        try:
            payload = orjson.loads(file_path.read_bytes())
        except FileNotFoundError as exc:
            raise BlockDefinitionError(f"Block definitions file missing: {file_path}") from exc
        except orjson.JSONDecodeError as exc:
            raise BlockDefinitionError(f"Block definitions file is not valid JSON: {file_path}: {exc}") from exc

        if not isinstance(payload, list):
            raise BlockDefinitionError(f"Block definitions file must contain a JSON array: {file_path}")

        registered = self.define_blocks_with_json_array(payload)
        logger.info("Loaded %d block definitions from %s", len(registered), file_path)
        return registered

    def get(self, type_id: str | None) -> BlockDefinition | None:
        if not type_id:
            return None
        return self._definitions.get(type_id)

    def types(self) -> list[str]:
        return list(self._definitions)

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[BlockDefinition]:
        return iter(self._definitions.values())
