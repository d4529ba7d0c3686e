"""Searchable text extraction for block descriptors.

A descriptor contributes text from:

- its type id, underscores turned into spaces;
- message templates with ``%1``-style placeholders and ``%{BKY_...}``
  references removed;
- dropdown option labels (image options through their ``alt`` text), label
  fields and text input fields;
- the type id and string field values of each default stub in ``inputs``.

Missing or malformed parts contribute nothing; extraction never raises for
a bad descriptor.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
import logging
import re
from typing import Any

from pydantic import BaseModel, ValidationError

from toolbox_search.blocks.models import BlockDefinition, BlockStub, InputSlot


logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"%\d+|%\{[^}]*\}")


def normalize_type_id(type_id: str) -> str:
    """Turn ``lists_create_with`` into ``lists create with``."""
    return type_id.replace("_", " ")


def strip_placeholders(message: str) -> str:
    """Remove argument placeholders and message references from a template."""
    return _PLACEHOLDER.sub(" ", message)


def descriptor_data(descriptor: Any) -> Mapping[str, Any]:
    """Return a read-only mapping view of a descriptor (mapping or model)."""
    if isinstance(descriptor, Mapping):
        return descriptor
    if isinstance(descriptor, BaseModel):
        return descriptor.model_dump()
    return {}


def descriptor_type(descriptor: Any) -> str | None:
    type_id = descriptor_data(descriptor).get("type")
    return type_id if isinstance(type_id, str) and type_id else None


def iter_block_texts(descriptor: Any, definition: BlockDefinition | None = None) -> Iterator[str]:
    """Yield every raw text fragment a user might type to find ``descriptor``.

    ``definition`` is the registered definition for the descriptor's type, if
    any. Message templates or arguments carried inline on the descriptor are
    used as well. Pass the result of :func:`descriptor_data` to avoid
    re-serializing a model descriptor.
    """
    data = descriptor_data(descriptor)

    type_id = descriptor_type(data)
    if type_id:
        yield normalize_type_id(type_id)

    for source in (definition, _inline_definition(data, type_id)):
        if source is None:
            continue
        for message in source.messages:
            yield strip_placeholders(message)
        for field in source.fields:
            yield from field.search_texts()

    yield from _default_stub_texts(data.get("inputs"), type_id)


def extract_block_text(descriptor: Any, definition: BlockDefinition | None = None) -> str:
    """Return the combined, lower-cased search text for ``descriptor``."""
    return " ".join(text for text in iter_block_texts(descriptor, definition) if text).lower()


def _inline_definition(data: Mapping[str, Any], type_id: str | None) -> BlockDefinition | None:
    if not any(isinstance(key, str) and key.startswith(("message", "args")) for key in data):
        return None
    try:
        definition = BlockDefinition.model_validate(dict(data))
    except ValidationError as exc:
        logger.debug("Ignoring malformed inline definition on block %s: %s", type_id, exc)
        return None
    return definition if definition.has_content else None


def _default_stub_texts(inputs: Any, type_id: str | None) -> Iterator[str]:
    if not isinstance(inputs, Mapping):
        return
    for name, raw_slot in inputs.items():
        for stub in _slot_stubs(name, raw_slot, type_id):
            if stub.type:
                yield normalize_type_id(stub.type)
            for value in stub.fields.values():
                if isinstance(value, str):
                    yield value


def _slot_stubs(name: str, raw_slot: Any, type_id: str | None) -> list[BlockStub]:
    if isinstance(raw_slot, InputSlot):
        return raw_slot.stubs()
    if not isinstance(raw_slot, Mapping):
        logger.debug("Ignoring malformed input %s on block %s: %r", name, type_id, raw_slot)
        return []

    stubs: list[BlockStub] = []
    for key in ("shadow", "block"):
        raw_stub = raw_slot.get(key)
        if raw_stub is None:
            continue
        try:
            stubs.append(BlockStub.model_validate(raw_stub))
        except ValidationError as exc:
            logger.debug("Ignoring malformed %s in input %s on block %s: %s", key, name, type_id, exc)
    return stubs
