# labtrack/domains/lims/routers.py

"""
'lims' 도메인 (QA 시료 접수 및 QA 시험 결과) 관련 API 엔드포인트를 정의하는 모듈입니다.
"""
from typing import List, Optional
from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

# 중앙 의존성 관리 모듈 임포트
from labtrack.core import dependencies as deps
from labtrack.core.store import EntityStore
from labtrack.services import status_service

# 도메인 관련 모듈 임포트
from . import crud as lims_crud
from . import models as lims_models
from . import schemas as lims_schemas

router = APIRouter(
    tags=["QA Laboratory (QA 시료 및 시험 결과 관리)"],
    responses={404: {"description": "Not found"}},
)


def _qa_sample_response(db_obj: lims_models.QaSample, now: datetime) -> lims_schemas.QaSampleResponse:
    urgency = status_service.get_due_urgency(db_obj.due_date, now)
    return lims_schemas.QaSampleResponse(
        **db_obj.model_dump(),
        days_until_due=status_service.days_until(db_obj.due_date, now),
        due_urgency=urgency,
        due_color=status_service.URGENCY_COLORS[urgency],
    )


# =============================================================================
# 1. QA 시료 접수 (QaSample) 라우터
# =============================================================================
@router.post("/qa-samples", response_model=lims_schemas.QaSampleResponse, status_code=status.HTTP_201_CREATED, summary="새 QA 시료 접수")
async def create_qa_sample(
    sample_in: lims_schemas.QaSampleCreate,
    db: EntityStore = Depends(deps.get_store),
    now: datetime = Depends(deps.get_now),
):
    """새 시료 접수 건을 등록합니다. 상태는 항상 `received`로 시작합니다."""
    return _qa_sample_response(await lims_crud.qa_sample.create(db=db, obj_in=sample_in), now)


@router.get("/qa-samples", response_model=List[lims_schemas.QaSampleResponse], summary="QA 시료 접수 목록 조회")
async def read_qa_samples(
    skip: int = 0,
    limit: Optional[int] = None,
    status_filter: Optional[lims_models.QaSampleStatus] = Query(None, alias="status"),
    db: EntityStore = Depends(deps.get_store),
    now: datetime = Depends(deps.get_now),
):
    filter_kwargs = {"status": status_filter} if status_filter else {}
    samples = await lims_crud.qa_sample.get_multi(db, skip=skip, limit=limit, **filter_kwargs)
    return [_qa_sample_response(s, now) for s in samples]


@router.get("/qa-samples/{sample_id}", response_model=lims_schemas.QaSampleResponse, summary="특정 QA 시료 접수 조회")
async def read_qa_sample(
    sample_id: int,
    db: EntityStore = Depends(deps.get_store),
    now: datetime = Depends(deps.get_now),
):
    db_obj = await lims_crud.qa_sample.get(db=db, id=sample_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="QA sample not found")
    return _qa_sample_response(db_obj, now)


@router.patch("/qa-samples/{sample_id}", response_model=lims_schemas.QaSampleResponse, summary="QA 시료 접수 수정")
async def update_qa_sample(
    sample_id: int,
    sample_in: lims_schemas.QaSampleUpdate,
    db: EntityStore = Depends(deps.get_store),
    now: datetime = Depends(deps.get_now),
):
    """
    접수 정보를 부분 수정합니다.
    상태는 received → testing → completed → delivered 순서로만 변경할 수 있으며, 위반 시 409를 반환합니다.
    """
    db_obj = await lims_crud.qa_sample.get(db=db, id=sample_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="QA sample not found")
    updated = await lims_crud.qa_sample.update(db=db, db_obj=db_obj, obj_in=sample_in)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="QA sample not found")
    return _qa_sample_response(updated, now)


@router.delete("/qa-samples/{sample_id}", status_code=status.HTTP_204_NO_CONTENT, summary="QA 시료 접수 삭제")
async def delete_qa_sample(sample_id: int, db: EntityStore = Depends(deps.get_store)):
    if not await lims_crud.qa_sample.delete(db=db, id=sample_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="QA sample not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# 2. QA 시험 결과 (QaTestResult) 라우터
# =============================================================================
@router.post("/qa-test-results", response_model=lims_schemas.QaTestResultResponse, status_code=status.HTTP_201_CREATED, summary="새 QA 시험 결과 등록")
async def create_qa_test_result(result_in: lims_schemas.QaTestResultCreate, db: EntityStore = Depends(deps.get_store)):
    return await lims_crud.qa_test_result.create(db=db, obj_in=result_in)


@router.get("/qa-test-results", response_model=List[lims_schemas.QaTestResultResponse], summary="QA 시험 결과 목록 조회")
async def read_qa_test_results(
    skip: int = 0,
    limit: Optional[int] = None,
    request_no: Optional[str] = None,
    db: EntityStore = Depends(deps.get_store),
):
    """QA 시험 결과 목록을 조회합니다. `request_no`로 의뢰 건별 필터링이 가능합니다."""
    filter_kwargs = {"request_no": request_no} if request_no else {}
    return await lims_crud.qa_test_result.get_multi(db, skip=skip, limit=limit, **filter_kwargs)


@router.get("/qa-test-results/{result_id}", response_model=lims_schemas.QaTestResultResponse, summary="특정 QA 시험 결과 조회")
async def read_qa_test_result(result_id: int, db: EntityStore = Depends(deps.get_store)):
    db_obj = await lims_crud.qa_test_result.get(db=db, id=result_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="QA test result not found")
    return db_obj


@router.patch("/qa-test-results/{result_id}", response_model=lims_schemas.QaTestResultResponse, summary="QA 시험 결과 부분 수정")
async def update_qa_test_result(
    result_id: int, result_in: lims_schemas.QaTestResultUpdate, db: EntityStore = Depends(deps.get_store)
):
    db_obj = await lims_crud.qa_test_result.get(db=db, id=result_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="QA test result not found")
    updated = await lims_crud.qa_test_result.update(db=db, db_obj=db_obj, obj_in=result_in)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="QA test result not found")
    return updated


@router.put("/qa-test-results/{result_id}", response_model=lims_schemas.QaTestResultResponse, summary="QA 시험 결과 전체 교체")
async def replace_qa_test_result(
    result_id: int, result_in: lims_schemas.QaTestResultCreate, db: EntityStore = Depends(deps.get_store)
):
    """요청 본문 전체를 검증한 뒤 기존 시험 결과를 교체합니다."""
    db_obj = await lims_crud.qa_test_result.get(db=db, id=result_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="QA test result not found")
    updated = await lims_crud.qa_test_result.replace(db=db, db_obj=db_obj, obj_in=result_in)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="QA test result not found")
    return updated


@router.delete("/qa-test-results/{result_id}", status_code=status.HTTP_204_NO_CONTENT, summary="QA 시험 결과 삭제")
async def delete_qa_test_result(result_id: int, db: EntityStore = Depends(deps.get_store)):
    if not await lims_crud.qa_test_result.delete(db=db, id=result_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="QA test result not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
