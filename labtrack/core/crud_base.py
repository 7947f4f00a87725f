# labtrack/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.
모든 메서드는 비동기(async)이며, 저장소(EntityStore) 인터페이스 위에서 동작합니다.
"""

from typing import Generic, List, Optional, Type, TypeVar, Any, Dict, Union

from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError
from sqlmodel import SQLModel

from labtrack.core.store import EntityStore

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    모든 CRUD 작업에 대한 기본 클래스를 정의합니다.

    `model`은 저장 레코드의 형태(선택 필드의 None 기본값 포함)를 정의하고,
    `kind`는 저장소 안에서 레코드를 구분하는 엔티티 종류 이름입니다.
    """
    def __init__(self, model: Type[ModelType], kind: str):
        self.model = model
        self.kind = kind

    def _to_model(self, record: Dict[str, Any]) -> ModelType:
        return self.model.model_validate(record)

    async def get(self, db: EntityStore, id: Any) -> Optional[ModelType]:
        """
        ID를 기준으로 단일 레코드를 조회합니다.
        """
        record = await db.get(self.kind, id)
        return self._to_model(record) if record is not None else None

    async def get_multi(
        self, db: EntityStore, *, skip: int = 0, limit: Optional[int] = None, **kwargs: Any
    ) -> List[ModelType]:
        """
        여러 레코드를 조회합니다. 필터링을 위한 키워드 인자(동등 비교)를 지원합니다.
        """
        records = await db.list(self.kind)
        for field, value in kwargs.items():
            if field in self.model.model_fields:
                records = [r for r in records if r.get(field) == value]

        records = records[skip:]
        if limit is not None:
            records = records[:limit]
        return [self._to_model(r) for r in records]

    async def get_by_attribute(
        self, db: EntityStore, *, attribute: str, value: Any
    ) -> Optional[ModelType]:
        for record in await db.list(self.kind):
            if record.get(attribute) == value:
                return self._to_model(record)
        return None

    async def create(self, db: EntityStore, *, obj_in: Union[CreateSchemaType, Dict[str, Any]]) -> ModelType:
        """
        새로운 레코드를 생성합니다.
        입력에 없는 선택 필드는 모델 기본값(None 등)으로 채워서 저장합니다.
        """
        obj_data = obj_in.model_dump() if isinstance(obj_in, BaseModel) else dict(obj_in)
        obj_data.pop("id", None)
        db_obj = self._validate(obj_data)
        record = await db.insert(self.kind, db_obj.model_dump(exclude={"id"}))
        return self._to_model(record)

    async def update(
        self, db: EntityStore, *, db_obj: ModelType, obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> Optional[ModelType]:
        """
        기존 레코드를 업데이트합니다.
        요청에 포함된 필드만 얕은 병합하며, 병합 결과를 먼저 검증한 뒤 저장합니다.
        레코드가 그 사이 삭제되었다면 None을 반환합니다.
        """
        update_data = obj_in.model_dump(exclude_unset=True) if isinstance(obj_in, BaseModel) else dict(obj_in)
        update_data.pop("id", None)
        merged = self._validate({**db_obj.model_dump(), **update_data}).model_dump()

        record = await db.update(self.kind, db_obj.id, {key: merged[key] for key in update_data})
        return self._to_model(record) if record is not None else None

    async def delete(self, db: EntityStore, *, id: Any) -> Optional[ModelType]:
        """
        ID를 기준으로 레코드를 삭제합니다. 삭제된 레코드를 반환하며, 없으면 None.
        """
        db_obj = await self.get(db, id=id)
        if db_obj and await db.delete(self.kind, id):
            return db_obj
        return None

    def _validate(self, data: Dict[str, Any]) -> ModelType:
        try:
            return self.model.model_validate(data)
        except ValidationError as exc:
            # 요청 검증 실패와 동일한 400 응답 형식으로 변환
            raise RequestValidationError(exc.errors(include_url=False, include_context=False)) from exc
