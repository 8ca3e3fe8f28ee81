from typing import Any, Generator
from unittest.mock import MagicMock, patch

import pytest
from pydantic import BaseModel

from coreason_botapi.api import BotApiBase
from coreason_botapi.models.input_file import AttachedFile

MESSAGE = {"message_id": 1, "date": 1700000000, "chat": {"id": 42, "type": "private"}}


class RecordingBotApi(BotApiBase):
    """Transport double recording which primitive each call went through."""

    def __init__(self, result: Any = None):
        self.result = MESSAGE if result is None else result
        self.calls: list[tuple[str, str, BaseModel | None, list[AttachedFile]]] = []

    async def request(self, method: str, params: BaseModel | None) -> dict[str, Any]:
        self.calls.append(("json", method, params, []))
        return {"ok": True, "result": self.result}

    async def request_with_form_data(
        self, method: str, params: BaseModel, files: list[AttachedFile]
    ) -> dict[str, Any]:
        self.calls.append(("form", method, params, files))
        return {"ok": True, "result": self.result}


@pytest.fixture
def bot() -> RecordingBotApi:
    return RecordingBotApi()


@pytest.fixture
def mock_vault_client() -> Generator[Any, None, None]:
    mock_module = MagicMock()
    mock_client_class = MagicMock()
    mock_module.VaultClient = mock_client_class

    with patch.dict("sys.modules", {"coreason_vault": mock_module}):
        yield mock_client_class


@pytest.fixture
def mock_vault_integrator() -> Generator[Any, None, None]:
    with patch("coreason_botapi.config.VaultIntegrator") as mock:
        mock.return_value.config_values.return_value = {}
        yield mock
