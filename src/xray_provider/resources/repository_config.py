"""``xray_repository_config`` resource."""

from typing import Any
from urllib.parse import quote

from xray_provider.core.exceptions import ResponseDecodeError
from xray_provider.core.models.repository_config import RepositoryConfigModel
from xray_provider.core.models.state import ResourceData
from xray_provider.resources.base import Resource
from xray_provider.transform.repository_config import (
    pack_repository_config,
    unpack_repository_config,
)

REPOS_CONFIG_PATH = "/xray/api/v1/repos_config"


class RepositoryConfigResource(Resource):
    """Repository indexing and retention configuration, keyed by repository name."""

    type_name = "xray_repository_config"
    model = RepositoryConfigModel

    @classmethod
    def unpack(cls, model: RepositoryConfigModel) -> dict[str, Any]:
        return unpack_repository_config(model)

    def _send(
        self, model: RepositoryConfigModel, payload: dict[str, Any]
    ) -> tuple[str, dict[str, Any]]:
        self._client.put(REPOS_CONFIG_PATH, payload)
        return model.repo_name, pack_repository_config(payload).to_tree()

    def _fetch(self, data: ResourceData) -> dict[str, Any]:
        payload = self._client.get(f"{REPOS_CONFIG_PATH}/{quote(data.id, safe='')}")
        if payload is not None and not isinstance(payload, dict):
            raise ResponseDecodeError(
                f"Xray returned an unexpected repository configuration for {data.id}",
                details={"response": payload},
            )
        return pack_repository_config({"repo_name": data.id, **(payload or {})}).to_tree()
