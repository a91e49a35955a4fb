"""Turn a submitted configuration tree into a typed model."""

from collections.abc import Mapping
from typing import Any, TypeVar

import pydantic

from xray_provider.core.exceptions import InvalidConfigurationError
from xray_provider.core.models.base import BlockModel
from xray_provider.validation.exclusive import validate_exclusive_groups

M = TypeVar("M", bound=BlockModel)


def parse_config(tree: Mapping[str, Any], model: type[M]) -> M:
    """Validate exclusive groups, then build the model.

    Raises:
        ConflictingFieldsError: two members of an exclusive group were supplied.
        InvalidConfigurationError: a field failed type or range validation.
    """
    if not isinstance(tree, Mapping):
        raise InvalidConfigurationError(
            f"{model.__name__} configuration must be a mapping, got {type(tree).__name__}"
        )

    validate_exclusive_groups(tree, model)

    try:
        return model.model_validate(tree)
    except pydantic.ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
            for error in e.errors()
        ]
        raise InvalidConfigurationError(
            f"Invalid {model.__name__} configuration: " + "; ".join(errors),
            details={"errors": errors},
        ) from e
