"""Block definitions, toolbox entries and the definition registry."""

from toolbox_search.blocks.models import (
    BlockDefinition,
    BlockStub,
    DropdownOption,
    FieldDefinition,
    ImageLabel,
    InputSlot,
    ToolboxBlock,
)
from toolbox_search.blocks.registry import BlockDefinitionError, BlockDefinitionRegistry
from toolbox_search.blocks.toolbox import collect_toolbox_blocks


__all__ = [
    "BlockDefinition",
    "BlockDefinitionError",
    "BlockDefinitionRegistry",
    "BlockStub",
    "DropdownOption",
    "FieldDefinition",
    "ImageLabel",
    "InputSlot",
    "ToolboxBlock",
    "collect_toolbox_blocks",
]
