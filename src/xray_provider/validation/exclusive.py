"""Exclusive group checks over raw configuration trees.

Checks run on the tree exactly as it was submitted, before the typed model is
built, because only the raw tree tells apart a field that was supplied with
its zero value from a field that was left out.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import structlog

from xray_provider.core.exceptions import ConflictingFieldsError
from xray_provider.core.models.base import BlockModel, ExclusiveGroup

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Conflict:
    """A violated exclusive group inside one block."""

    path: str
    group: ExclusiveGroup
    supplied: tuple[str, ...]

    @property
    def message(self) -> str:
        where = f" in '{self.path}'" if self.path else ""
        return (
            f"Only one of {_join(self.group.labels)} can be set{where}, "
            f"but {_join(self.supplied, 'and')} were supplied"
        )


def is_supplied(tree: Mapping[str, Any], key: str, is_block: bool = False) -> bool:
    """Whether ``key`` was explicitly supplied in ``tree``.

    ``false``, ``0`` and ``[]`` all count as supplied; only a missing key or
    null does not. For blocks ``[]`` is how an absent block is encoded, and a
    list holding no mapping is read the same way.
    """
    if key not in tree or tree[key] is None:
        return False
    if is_block and isinstance(tree[key], list):
        return bool(_block_items(tree[key]))
    return True


def find_conflicts(
    tree: Mapping[str, Any],
    model: type[BlockModel],
    path: tuple[str, ...] = (),
) -> list[Conflict]:
    """Collect every violated exclusive group in ``tree`` and its nested blocks."""
    conflicts: list[Conflict] = []
    blocks = model.block_fields()

    for group in model.exclusive_groups:
        supplied = tuple(
            label
            for member, label in zip(group.members, group.labels)
            if any(is_supplied(tree, field, field in blocks) for field in member)
        )
        if len(supplied) > 1:
            conflicts.append(Conflict(".".join(path), group, supplied))

    for name, (block, is_set) in blocks.items():
        for index, child in enumerate(_block_items(tree.get(name))):
            segment = f"{name}[{index}]" if is_set else name
            conflicts.extend(find_conflicts(child, block, (*path, segment)))

    return conflicts


def validate_exclusive_groups(tree: Mapping[str, Any], model: type[BlockModel]) -> None:
    """Raise ``ConflictingFieldsError`` if any exclusive group is violated."""
    conflicts = find_conflicts(tree, model)
    if not conflicts:
        return

    logger.debug("Exclusive group violated", model=model.__name__, conflicts=len(conflicts))
    raise ConflictingFieldsError(
        "; ".join(conflict.message for conflict in conflicts),
        details={
            "conflicts": [
                {
                    "path": conflict.path,
                    "members": conflict.group.labels,
                    "supplied": list(conflict.supplied),
                }
                for conflict in conflicts
            ]
        },
    )


def _block_items(value: Any) -> list[Mapping[str, Any]]:
    if isinstance(value, Mapping):
        return [value]
    if isinstance(value, list):
        return [item for item in value if isinstance(item, Mapping)]
    return []


def _join(labels, conjunction: str = "or") -> str:
    quoted = [f"'{label}'" for label in labels]
    if len(quoted) < 2:
        return "".join(quoted)
    return f"{', '.join(quoted[:-1])} {conjunction} {quoted[-1]}"
