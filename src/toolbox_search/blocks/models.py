"""Structural models for block definitions and toolbox entries.

Block definitions follow the editor's JSON block format: numbered message
templates (``message0``, ``message1``, ...) paired with numbered argument lists
(``args0``, ``args1``, ...). Toolbox entries reference a block by ``type`` and
may carry default ("shadow") stubs for their inputs.

Every field is optional and unknown keys are ignored, so a sparse or partially
malformed record still yields whatever text it does carry.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator


logger = logging.getLogger(__name__)


_NUMBERED_KEY = re.compile(r"^(message|args)(\d+)$")

DROPDOWN_FIELD_TYPES = frozenset({"field_dropdown", "field_grid_dropdown"})
TEXT_FIELD_TYPES = frozenset({"field_label", "field_label_serializable", "field_input"})


def _string_or_blank(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


class ImageLabel(BaseModel):
    """Image shown in place of a text label; ``alt`` is its accessible description."""

    model_config = ConfigDict(extra="ignore")

    src: str = ""
    width: float | None = None
    height: float | None = None
    alt: str = ""

    @field_validator("src", "alt", mode="before")
    @classmethod
    def _coerce_strings(cls, value: Any) -> str:
        return _string_or_blank(value)

    @field_validator("width", "height", mode="before")
    @classmethod
    def _coerce_size(cls, value: Any) -> float | None:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return value
        return None


class DropdownOption(BaseModel):
    """One ``[label, value]`` pair of a dropdown field."""

    model_config = ConfigDict(extra="ignore")

    label: str | ImageLabel
    value: str = ""

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            label = data[0] if data else ""
            value = data[1] if len(data) > 1 else ""
            if not isinstance(label, (str, dict)):
                label = ""
            return {"label": label, "value": _string_or_blank(value)}
        return data

    @property
    def search_text(self) -> str:
        if isinstance(self.label, ImageLabel):
            return self.label.alt
        return self.label


class FieldDefinition(BaseModel):
    """An entry of an ``argsN`` list: a field or an input slot."""

    model_config = ConfigDict(extra="ignore")

    type: str = ""
    name: str = ""
    text: str | None = None
    options: list[DropdownOption] | None = None

    @field_validator("type", "name", mode="before")
    @classmethod
    def _coerce_identifiers(cls, value: Any) -> str:
        return _string_or_blank(value)

    @field_validator("text", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (int, float)):
            return str(value)
        return None

    @field_validator("options", mode="before")
    @classmethod
    def _drop_malformed_options(cls, value: Any) -> Any:
        # Dynamic dropdowns reference a generator function by name; no static labels.
        if not isinstance(value, (list, tuple)):
            return None
        return _validate_each(DropdownOption, value)

    @property
    def is_dropdown(self) -> bool:
        return self.type in DROPDOWN_FIELD_TYPES

    def search_texts(self) -> list[str]:
        """Return the searchable labels this field displays."""
        if self.is_dropdown:
            return [option.search_text for option in self.options or [] if option.search_text]
        if self.type in TEXT_FIELD_TYPES and self.text:
            return [self.text]
        return []


class BlockStub(BaseModel):
    """A block nested in an input slot, usually a shadow default."""

    model_config = ConfigDict(extra="ignore")

    type: str = ""
    fields: dict[str, Any] = Field(default_factory=dict)

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value: Any) -> str:
        return _string_or_blank(value)

    @field_validator("fields", mode="before")
    @classmethod
    def _coerce_fields(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else {}


class InputSlot(BaseModel):
    """Toolbox value for one named input: an optional shadow and/or real block."""

    model_config = ConfigDict(extra="ignore")

    shadow: BlockStub | None = None
    block: BlockStub | None = None

    @field_validator("shadow", "block", mode="before")
    @classmethod
    def _drop_non_mapping_stub(cls, value: Any) -> Any:
        if isinstance(value, (dict, BlockStub)):
            return value
        return None

    def stubs(self) -> list[BlockStub]:
        return [stub for stub in (self.shadow, self.block) if stub is not None]


class BlockDefinition(BaseModel):
    """JSON definition of a block type.

    ``messages`` and ``args`` are gathered from the numbered ``messageN`` and
    ``argsN`` keys, ordered by their index.
    """

    model_config = ConfigDict(extra="ignore")

    type: str = ""
    messages: list[str] = Field(default_factory=list)
    args: list[list[FieldDefinition]] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _collect_numbered_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "messages" in data or "args" in data:
            return data

        messages: dict[int, str] = {}
        args: dict[int, list[Any]] = {}
        for key, value in data.items():
            match = _NUMBERED_KEY.match(str(key))
            if not match:
                continue
            kind, index = match.group(1), int(match.group(2))
            if kind == "message" and isinstance(value, str):
                messages[index] = value
            elif kind == "args" and isinstance(value, list):
                args[index] = _validate_each(FieldDefinition, value)

        collected = {key: value for key, value in data.items() if not _NUMBERED_KEY.match(str(key))}
        collected["messages"] = [messages[index] for index in sorted(messages)]
        collected["args"] = [args[index] for index in sorted(args)]
        if not isinstance(collected.get("type", ""), str):
            collected["type"] = ""
        return collected

    @property
    def fields(self) -> list[FieldDefinition]:
        return [field for arg_list in self.args for field in arg_list]

    @property
    def has_content(self) -> bool:
        return bool(self.messages or self.args)


class ToolboxBlock(BaseModel):
    """Typed toolbox entry referencing a block type.

    Hosts may pass plain mappings instead; both are indexed by reference.
    Extra keys (including inline ``messageN``/``argsN``) are kept.
    """

    model_config = ConfigDict(extra="allow")

    kind: str = "block"
    type: str = ""
    inputs: dict[str, InputSlot] = Field(default_factory=dict)
    fields: dict[str, Any] = Field(default_factory=dict)


def _validate_each(model: type[BaseModel], items: Any) -> list[Any]:
    """Validate list items one by one, dropping those that cannot be read."""
    valid: list[Any] = []
    for item in items:
        if isinstance(item, model):
            valid.append(item)
            continue
        try:
            valid.append(model.model_validate(item))
        except ValidationError as exc:
            logger.debug("Skipping malformed %s: %r (%s)", model.__name__, item, exc.errors()[0]["msg"])
    return valid
