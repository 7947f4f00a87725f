# labtrack/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 엔티티 저장소 (get_store).
- 상태 판정의 기준 시각 (get_now). 테스트에서는 dependency_overrides로 고정 시각을 주입합니다.
"""

from datetime import datetime, UTC

from labtrack.core.store import EntityStore, get_store as get_main_app_store


async def get_store() -> EntityStore:
    """
    FastAPI 의존성 주입을 위한 저장소 반환 함수입니다.
    labtrack.core.store.get_store를 래핑하여 사용합니다.
    """
    return await get_main_app_store()


def get_now() -> datetime:
    """상태 판정과 이력 보존 기간 계산에 사용할 현재 시각(UTC)."""
    return datetime.now(UTC)
