"""Configuração do pytest para o roteador HappyPaws."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from app.bootstrap import get_gateway_client, get_route_inbound_use_case  # noqa: E402
from config.settings import get_server_settings, get_zapi_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_cached_singletons():
    """Settings e clientes são lru_cache; cada teste começa limpo."""
    get_server_settings.cache_clear()
    get_zapi_settings.cache_clear()
    yield
    get_server_settings.cache_clear()
    get_zapi_settings.cache_clear()
    get_gateway_client.cache_clear()
    get_route_inbound_use_case.cache_clear()


class FakeGateway:
    """Gateway fake que registra chamadas e devolve resultado fixo."""

    def __init__(self, result: bool = True) -> None:
        self.result = result
        self.calls: list[tuple[str, str]] = []

    async def send_text(self, phone: str, message: str) -> bool:
        self.calls.append((phone, message))
        return self.result


@pytest.fixture
def fake_gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def failing_gateway() -> FakeGateway:
    return FakeGateway(result=False)
