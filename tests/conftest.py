# tests/conftest.py

from datetime import datetime, UTC
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# labtrack.main을 임포트하여 FastAPI 앱 인스턴스에 접근합니다.
from labtrack.main import app as main_app
from labtrack.core import dependencies as deps
from labtrack.core.store import InMemoryStore

# 테스트 전체에서 사용하는 기본 기준 시각
DEFAULT_NOW = datetime(2024, 6, 15, tzinfo=UTC)


class FrozenClock:
    """deps.get_now를 대체하는 고정 시계. 테스트 도중 clock.now를 바꿔 시각을 이동할 수 있습니다."""

    def __init__(self, now: datetime):
        self.now = now


# --- 저장소 / 시계 픽스처 ---
@pytest.fixture(scope="function")
def store() -> InMemoryStore:
    """
    각 테스트 함수마다 비어 있는 메모리 저장소를 제공하여
    테스트 간의 격리를 보장합니다.
    """
    return InMemoryStore(id_scope="global")


@pytest.fixture(scope="function")
def clock() -> FrozenClock:
    return FrozenClock(DEFAULT_NOW)


# --- 클라이언트 픽스처 ---
# 역할: 테스트용 저장소와 고정 시계를 주입한 AsyncClient를 반환합니다.
# raise_app_exceptions=False: 처리되지 않은 예외도 500 응답으로 받아서 검증할 수 있게 합니다.
@pytest_asyncio.fixture(scope="function")
async def client(store: InMemoryStore, clock: FrozenClock) -> AsyncGenerator[AsyncClient, None]:
    original_overrides = main_app.dependency_overrides.copy()
    main_app.dependency_overrides.update({
        deps.get_store: lambda: store,
        deps.get_now: lambda: clock.now,
    })

    transport = ASGITransport(app=main_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        try:
            yield ac
        finally:
            main_app.dependency_overrides = original_overrides
