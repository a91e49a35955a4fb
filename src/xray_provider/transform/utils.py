"""Helpers shared by the transformers."""

from typing import Any, TypeVar

import pydantic

from xray_provider.core.exceptions import ResponseDecodeError
from xray_provider.core.models.base import BlockModel

M = TypeVar("M", bound=BlockModel)


def build_model(model: type[M], data: dict[str, Any]) -> M:
    """Validate data received from Xray into ``model``."""
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as e:
        raise ResponseDecodeError(
            f"Unexpected {model.__name__} payload returned by Xray: {e}",
            details={"errors": [str(error["msg"]) for error in e.errors()]},
        ) from e
