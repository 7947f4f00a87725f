# labtrack/domains/inv/routers.py

"""
'inv' 도메인 (시약 재고) 관련 API 엔드포인트를 정의하는 모듈입니다.
"""
from typing import List, Optional
from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException, Response, status

from labtrack.core import dependencies as deps
from labtrack.core.store import EntityStore
from labtrack.services import status_service

from . import crud as inv_crud
from . import models as inv_models
from . import schemas as inv_schemas

router = APIRouter(
    tags=["Inventory Management (시약 관리)"],
    responses={404: {"description": "Not found"}},
)


def _chemical_response(db_obj: inv_models.Chemical, now: datetime) -> inv_schemas.ChemicalResponse:
    expiry = db_obj.expiry_date
    return inv_schemas.ChemicalResponse(
        **db_obj.model_dump(),
        expiry_status=status_service.get_expiry_status(expiry, now),
        days_until_expiry=status_service.days_until(expiry, now) if expiry is not None else None,
    )


# =============================================================================
# 1. 시약 (Chemical) 라우터
# =============================================================================
@router.post("/chemicals", response_model=inv_schemas.ChemicalResponse, status_code=status.HTTP_201_CREATED, summary="새 시약 등록")
async def create_chemical(
    chemical_in: inv_schemas.ChemicalCreate,
    db: EntityStore = Depends(deps.get_store),
    now: datetime = Depends(deps.get_now),
):
    return _chemical_response(await inv_crud.chemical.create(db=db, obj_in=chemical_in), now)


@router.get("/chemicals", response_model=List[inv_schemas.ChemicalResponse], summary="시약 목록 조회")
async def read_chemicals(
    skip: int = 0,
    limit: Optional[int] = None,
    category: Optional[inv_models.ChemicalCategory] = None,
    db: EntityStore = Depends(deps.get_store),
    now: datetime = Depends(deps.get_now),
):
    """
    시약 목록을 조회합니다.
    `category` 쿼리 파라미터(qa/standard/rd)로 용도별 필터링이 가능합니다.
    """
    filter_kwargs = {}
    if category:
        filter_kwargs["category"] = category

    chemicals = await inv_crud.chemical.get_multi(db, skip=skip, limit=limit, **filter_kwargs)
    return [_chemical_response(c, now) for c in chemicals]


@router.get("/chemicals/{chemical_id}", response_model=inv_schemas.ChemicalResponse, summary="특정 시약 조회")
async def read_chemical(
    chemical_id: int,
    db: EntityStore = Depends(deps.get_store),
    now: datetime = Depends(deps.get_now),
):
    db_obj = await inv_crud.chemical.get(db=db, id=chemical_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Chemical not found")
    return _chemical_response(db_obj, now)


@router.patch("/chemicals/{chemical_id}", response_model=inv_schemas.ChemicalResponse, summary="시약 정보 수정")
async def update_chemical(
    chemical_id: int,
    chemical_in: inv_schemas.ChemicalUpdate,
    db: EntityStore = Depends(deps.get_store),
    now: datetime = Depends(deps.get_now),
):
    db_obj = await inv_crud.chemical.get(db=db, id=chemical_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Chemical not found")
    updated = await inv_crud.chemical.update(db=db, db_obj=db_obj, obj_in=chemical_in)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Chemical not found")
    return _chemical_response(updated, now)


@router.delete("/chemicals/{chemical_id}", status_code=status.HTTP_204_NO_CONTENT, summary="시약 삭제")
async def delete_chemical(chemical_id: int, db: EntityStore = Depends(deps.get_store)):
    if not await inv_crud.chemical.delete(db=db, id=chemical_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Chemical not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
