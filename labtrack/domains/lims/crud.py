# labtrack/domains/lims/crud.py

"""
'lims' 도메인의 CRUD 로직을 담당하는 모듈입니다.

- QA 시료 접수: 의뢰 번호 중복 검사, 상태 전이 규칙, 회신 예정일 검증
- QA 시험 결과: 부분 수정(PATCH)과 전체 교체(PUT)
"""

import logging
from typing import Optional

from fastapi import HTTPException, status

from labtrack.core.crud_base import CRUDBase
from labtrack.core.store import EntityStore

from . import models as lims_models
from . import schemas as lims_schemas
from . import workflow

logger = logging.getLogger(__name__)


# =============================================================================
# 1. QA 시료 접수 (QaSample) CRUD
# =============================================================================
class CRUDQaSample(CRUDBase[lims_models.QaSample, lims_schemas.QaSampleCreate, lims_schemas.QaSampleUpdate]):
    def __init__(self):
        super().__init__(model=lims_models.QaSample, kind="qa_samples")

    async def get_by_request_no(self, db: EntityStore, *, request_no: str) -> Optional[lims_models.QaSample]:
        """의뢰 번호로 조회합니다."""
        return await self.get_by_attribute(db, attribute="request_no", value=request_no)

    async def create(self, db: EntityStore, *, obj_in: lims_schemas.QaSampleCreate) -> lims_models.QaSample:
        """의뢰 번호 중복을 확인하고, received 상태로 생성합니다."""
        if await self.get_by_request_no(db, request_no=obj_in.request_no):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="QA sample with this request number already exists.")

        obj_data = obj_in.model_dump()
        obj_data["status"] = workflow.INITIAL_STATUS
        return await super().create(db, obj_in=obj_data)

    async def update(
        self, db: EntityStore, *, db_obj: lims_models.QaSample, obj_in: lims_schemas.QaSampleUpdate
    ) -> Optional[lims_models.QaSample]:
        """
        업데이트 시 의뢰 번호 중복, 회신 예정일, 상태 전이를 검사합니다.
        samples를 보내면 시료 목록 전체가 교체됩니다.
        """
        if obj_in.request_no is not None and obj_in.request_no != db_obj.request_no:
            existing = await self.get_by_request_no(db, request_no=obj_in.request_no)
            if existing and existing.id != db_obj.id:
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="QA sample with this request number already exists.")

        received_date = obj_in.received_date or db_obj.received_date
        due_date = obj_in.due_date or db_obj.due_date
        if due_date < received_date:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="due_date must not be earlier than received_date")

        if obj_in.status is not None and obj_in.status != db_obj.status:
            workflow.ensure_transition(db_obj.status, obj_in.status)
            logger.info("QA sample %s: %s -> %s", db_obj.request_no, db_obj.status.value, obj_in.status.value)

        return await super().update(db, db_obj=db_obj, obj_in=obj_in)


qa_sample = CRUDQaSample()


# =============================================================================
# 2. QA 시험 결과 (QaTestResult) CRUD
# =============================================================================
class CRUDQaTestResult(CRUDBase[lims_models.QaTestResult, lims_schemas.QaTestResultCreate, lims_schemas.QaTestResultUpdate]):
    def __init__(self):
        super().__init__(model=lims_models.QaTestResult, kind="qa_test_results")

    async def replace(
        self, db: EntityStore, *, db_obj: lims_models.QaTestResult, obj_in: lims_schemas.QaTestResultCreate
    ) -> Optional[lims_models.QaTestResult]:
        """요청 본문 전체로 레코드를 교체합니다 (PUT). 생략된 선택 필드는 기본값으로 돌아갑니다."""
        return await super().update(db, db_obj=db_obj, obj_in=obj_in.model_dump())


qa_test_result = CRUDQaTestResult()
