import pytest

from petguard_gateway.config import GatewaySettings
from petguard_gateway.llm.client_base import BackendResult, InlineImage
from petguard_gateway.llm.mock_client import MockBackendClient

@pytest.fixture
def settings():
    return GatewaySettings(
        api_key="test-key",
        models={"text": "text-model", "image": "image-model"},
    )


@pytest.fixture
def client():
    return MockBackendClient()


@pytest.fixture
def image_result():
    """Build a backend result carrying the given inline images, in order."""
    def _build(*datas: str) -> BackendResult:
        return BackendResult(
            text=None,
            image_parts=[InlineImage(mime_type="image/png", data=d) for d in datas],
        )
    return _build
