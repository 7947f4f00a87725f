# labtrack/domains/trn/routers.py

"""
'trn' 도메인 (교육 훈련 기록) 관련 API 엔드포인트를 정의하는 모듈입니다.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status

from labtrack.core import dependencies as deps
from labtrack.core.store import EntityStore

from . import crud as trn_crud
from . import models as trn_models
from . import schemas as trn_schemas

router = APIRouter(
    tags=["Training Records (교육 훈련 관리)"],
    responses={404: {"description": "Not found"}},
)


@router.post("/training", response_model=trn_schemas.TrainingResponse, status_code=status.HTTP_201_CREATED, summary="새 교육 기록 등록")
async def create_training(training_in: trn_schemas.TrainingCreate, db: EntityStore = Depends(deps.get_store)):
    return await trn_crud.training.create(db=db, obj_in=training_in)


@router.get("/training", response_model=List[trn_schemas.TrainingResponse], summary="교육 기록 목록 조회")
async def read_training_list(
    skip: int = 0,
    limit: Optional[int] = None,
    result: Optional[trn_models.TrainingResult] = None,
    db: EntityStore = Depends(deps.get_store),
):
    filter_kwargs = {"result": result} if result else {}
    return await trn_crud.training.get_multi(db, skip=skip, limit=limit, **filter_kwargs)


@router.get("/training/{training_id}", response_model=trn_schemas.TrainingResponse, summary="특정 교육 기록 조회")
async def read_training(training_id: int, db: EntityStore = Depends(deps.get_store)):
    db_obj = await trn_crud.training.get(db=db, id=training_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Training record not found")
    return db_obj


@router.patch("/training/{training_id}", response_model=trn_schemas.TrainingResponse, summary="교육 기록 수정")
async def update_training(
    training_id: int, training_in: trn_schemas.TrainingUpdate, db: EntityStore = Depends(deps.get_store)
):
    db_obj = await trn_crud.training.get(db=db, id=training_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Training record not found")
    updated = await trn_crud.training.update(db=db, db_obj=db_obj, obj_in=training_in)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Training record not found")
    return updated


@router.delete("/training/{training_id}", status_code=status.HTTP_204_NO_CONTENT, summary="교육 기록 삭제")
async def delete_training(training_id: int, db: EntityStore = Depends(deps.get_store)):
    if not await trn_crud.training.delete(db=db, id=training_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Training record not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
