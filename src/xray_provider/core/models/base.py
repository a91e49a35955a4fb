"""Base model for configuration blocks."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import NoneType, UnionType
from typing import Any, ClassVar, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, model_validator


@dataclass(frozen=True)
class ExclusiveGroup:
    """A set of fields of which at most one may be supplied.

    A member is a tuple of field names; composite members such as
    ``include_patterns/exclude_patterns`` count as supplied when any of
    their fields is.
    """

    members: tuple[tuple[str, ...], ...]

    @classmethod
    def of(cls, *members: str) -> "ExclusiveGroup":
        return cls(tuple(tuple(member.split("/")) for member in members))

    @property
    def labels(self) -> list[str]:
        return ["/".join(member) for member in self.members]


class BlockModel(BaseModel):
    """A configuration block.

    Single nested blocks are accepted either as a mapping or as a list holding
    at most one mapping, which is how Terraform encodes blocks. An empty list
    means the block is absent.
    """

    model_config = ConfigDict(extra="forbid")

    exclusive_groups: ClassVar[tuple[ExclusiveGroup, ...]] = ()

    @classmethod
    def block_fields(cls) -> dict[str, tuple[type["BlockModel"], bool]]:
        """Map nested block field names to ``(block class, is_set)``."""
        fields = {}
        for name, field in cls.model_fields.items():
            block, is_set = _block_type(field.annotation)
            if block is not None:
                fields[name] = (block, is_set)
        return fields

    @model_validator(mode="before")
    @classmethod
    def _normalize_blocks(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data

        # null is the same as not supplying the field; unknown keys are left for extra="forbid"
        data = {
            key: value
            for key, value in data.items()
            if value is not None or key not in cls.model_fields
        }
        for name, (_, is_set) in cls.block_fields().items():
            value = data.get(name)
            if is_set:
                if isinstance(value, Mapping):
                    data[name] = [value]
                elif value == [] and not cls.model_fields[name].is_required():
                    data[name] = None
            elif isinstance(value, list):
                if len(value) > 1:
                    raise ValueError(f"At most one '{name}' block is allowed")
                data[name] = value[0] if value else None
        return data

    def to_tree(self) -> dict[str, Any]:
        """Render the block as a configuration tree.

        Absent blocks become ``[]``, present single blocks a one-element list.
        """
        blocks = type(self).block_fields()
        tree: dict[str, Any] = {}
        for name in type(self).model_fields:
            value = getattr(self, name)
            if name not in blocks:
                tree[name] = list(value) if isinstance(value, list) else value
            elif value is None:
                tree[name] = []
            elif blocks[name][1]:
                tree[name] = [item.to_tree() for item in value]
            else:
                tree[name] = [value.to_tree()]
        return tree


def _block_type(annotation: Any) -> tuple[type[BlockModel] | None, bool]:
    origin = get_origin(annotation)
    if origin is list:
        (item,) = get_args(annotation)
        block, _ = _block_type(item)
        return block, True
    if origin is Union or origin is UnionType:
        for arg in get_args(annotation):
            if arg is not NoneType:
                return _block_type(arg)
        return None, False
    if isinstance(annotation, type) and issubclass(annotation, BlockModel):
        return annotation, False
    return None, False
