# labtrack/core/store.py

"""
엔티티 저장소 모듈입니다.

관계형 데이터베이스 대신 프로세스 메모리에 레코드를 보관합니다.
모든 CRUD 계층은 `EntityStore` 인터페이스에만 의존하므로, 다른 저장 엔진으로
교체하더라도 호출부는 수정할 필요가 없습니다.

- 레코드는 엔티티 종류(kind)별로 `id -> dict` 형태로 저장됩니다.
- 조회/저장 시 항상 사본을 주고받으므로, 반환된 dict를 수정해도 저장된 상태는 바뀌지 않습니다.
- 저장소는 유효성 검사를 하지 않습니다. 검증은 상위 스키마 계층의 책임입니다.
- "찾을 수 없음"은 예외가 아니라 `None`/`False` 반환으로 알립니다.
"""

import copy
import logging
from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Any, Dict, List, Literal, Optional

from labtrack.core.config import settings

logger = logging.getLogger(__name__)

IdScope = Literal["global", "per_kind"]


class EntityStore(ABC):
    """모든 저장소 구현이 따라야 하는 비동기 CRUD 인터페이스입니다."""

    @abstractmethod
    async def insert(self, kind: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """다음 ID를 할당하여 레코드를 저장하고, 저장된 레코드의 사본을 반환합니다."""

    @abstractmethod
    async def get(self, kind: str, id: int) -> Optional[Dict[str, Any]]:
        """ID로 레코드를 조회합니다. 없으면 None."""

    @abstractmethod
    async def list(self, kind: str) -> List[Dict[str, Any]]:
        """해당 종류의 모든 레코드를 삽입 순서대로 반환합니다."""

    @abstractmethod
    async def update(self, kind: str, id: int, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """기존 레코드에 필드를 얕은 병합(shallow merge)합니다. 없으면 None."""

    @abstractmethod
    async def delete(self, kind: str, id: int) -> bool:
        """레코드를 삭제하고, 실제로 삭제되었는지 여부를 반환합니다."""

    async def ping(self) -> bool:
        """헬스 체크용. 저장소가 응답 가능하면 True."""
        return True


class InMemoryStore(EntityStore):
    """
    프로세스 메모리 기반 저장소입니다.

    id_scope="global"이면 모든 종류가 하나의 단조 증가 카운터를 공유하므로
    ID는 종류와 무관하게 전역적으로 유일합니다. "per_kind"이면 종류별로 1부터 시작합니다.
    """

    def __init__(self, id_scope: IdScope = "global"):
        if id_scope not in ("global", "per_kind"):
            raise ValueError(f"Unknown id scope: {id_scope}")
        self.id_scope = id_scope
        self._tables: Dict[str, Dict[int, Dict[str, Any]]] = defaultdict(dict)
        self._global_seq = 0
        self._kind_seq: Dict[str, int] = defaultdict(int)

    def _next_id(self, kind: str) -> int:
        if self.id_scope == "global":
            self._global_seq += 1
            return self._global_seq
        self._kind_seq[kind] += 1
        return self._kind_seq[kind]

    async def insert(self, kind: str, data: Dict[str, Any]) -> Dict[str, Any]:
        record = copy.deepcopy(data)
        record["id"] = self._next_id(kind)
        self._tables[kind][record["id"]] = record
        logger.debug("Inserted %s #%s", kind, record["id"])
        return copy.deepcopy(record)

    async def get(self, kind: str, id: int) -> Optional[Dict[str, Any]]:
        record = self._tables[kind].get(id)
        return copy.deepcopy(record) if record is not None else None

    async def list(self, kind: str) -> List[Dict[str, Any]]:
        return [copy.deepcopy(record) for record in self._tables[kind].values()]

    async def update(self, kind: str, id: int, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        record = self._tables[kind].get(id)
        if record is None:
            return None
        # id는 변경 불가
        record.update({k: copy.deepcopy(v) for k, v in fields.items() if k != "id"})
        return copy.deepcopy(record)

    async def delete(self, kind: str, id: int) -> bool:
        return self._tables[kind].pop(id, None) is not None

    def clear(self) -> None:
        """모든 레코드와 시퀀스를 초기화합니다."""
        self._tables.clear()
        self._global_seq = 0
        self._kind_seq.clear()


# 애플리케이션 전역 저장소 인스턴스 (서버 프로세스 수명 동안 유지)
store: EntityStore = InMemoryStore(id_scope=settings.ID_SEQUENCE_SCOPE)


async def get_store() -> EntityStore:
    """FastAPI 의존성 주입용 저장소 반환 함수."""
    return store
