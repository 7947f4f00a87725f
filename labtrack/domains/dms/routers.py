# labtrack/domains/dms/routers.py

"""
'dms' 도메인 (품질 문서, MSDS) 관련 API 엔드포인트를 정의하는 모듈입니다.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status

from labtrack.core import dependencies as deps
from labtrack.core.store import EntityStore

from . import crud as dms_crud
from . import models as dms_models
from . import schemas as dms_schemas

router = APIRouter(
    tags=["Document Management (문서/MSDS 관리)"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. 품질 문서 (Document) 라우터
# =============================================================================
@router.post("/documents", response_model=dms_schemas.DocumentResponse, status_code=status.HTTP_201_CREATED, summary="새 문서 등록")
async def create_document(document_in: dms_schemas.DocumentCreate, db: EntityStore = Depends(deps.get_store)):
    return await dms_crud.document.create(db=db, obj_in=document_in)


@router.get("/documents", response_model=List[dms_schemas.DocumentResponse], summary="문서 목록 조회")
async def read_documents(
    skip: int = 0,
    limit: Optional[int] = None,
    category: Optional[dms_models.DocumentCategory] = None,
    db: EntityStore = Depends(deps.get_store),
):
    """문서 목록을 조회합니다. `category`로 분류별 필터링이 가능합니다."""
    filter_kwargs = {"category": category} if category else {}
    return await dms_crud.document.get_multi(db, skip=skip, limit=limit, **filter_kwargs)


@router.get("/documents/{document_id}", response_model=dms_schemas.DocumentResponse, summary="특정 문서 조회")
async def read_document(document_id: int, db: EntityStore = Depends(deps.get_store)):
    db_obj = await dms_crud.document.get(db=db, id=document_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document not found")
    return db_obj


@router.patch("/documents/{document_id}", response_model=dms_schemas.DocumentResponse, summary="문서 정보 수정")
async def update_document(
    document_id: int, document_in: dms_schemas.DocumentUpdate, db: EntityStore = Depends(deps.get_store)
):
    db_obj = await dms_crud.document.get(db=db, id=document_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document not found")
    updated = await dms_crud.document.update(db=db, db_obj=db_obj, obj_in=document_in)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document not found")
    return updated


@router.delete("/documents/{document_id}", status_code=status.HTTP_204_NO_CONTENT, summary="문서 삭제")
async def delete_document(document_id: int, db: EntityStore = Depends(deps.get_store)):
    if not await dms_crud.document.delete(db=db, id=document_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# 2. MSDS 라우터
# =============================================================================
@router.post("/msds", response_model=dms_schemas.MsdsResponse, status_code=status.HTTP_201_CREATED, summary="새 MSDS 등록")
async def create_msds(msds_in: dms_schemas.MsdsCreate, db: EntityStore = Depends(deps.get_store)):
    return await dms_crud.msds.create(db=db, obj_in=msds_in)


@router.get("/msds", response_model=List[dms_schemas.MsdsResponse], summary="MSDS 목록 조회")
async def read_msds_list(
    skip: int = 0,
    limit: Optional[int] = None,
    category: Optional[dms_models.MsdsCategory] = None,
    db: EntityStore = Depends(deps.get_store),
):
    filter_kwargs = {"category": category} if category else {}
    return await dms_crud.msds.get_multi(db, skip=skip, limit=limit, **filter_kwargs)


@router.get("/msds/{msds_id}", response_model=dms_schemas.MsdsResponse, summary="특정 MSDS 조회")
async def read_msds(msds_id: int, db: EntityStore = Depends(deps.get_store)):
    db_obj = await dms_crud.msds.get(db=db, id=msds_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="MSDS not found")
    return db_obj


@router.patch("/msds/{msds_id}", response_model=dms_schemas.MsdsResponse, summary="MSDS 정보 수정")
async def update_msds(msds_id: int, msds_in: dms_schemas.MsdsUpdate, db: EntityStore = Depends(deps.get_store)):
    db_obj = await dms_crud.msds.get(db=db, id=msds_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="MSDS not found")
    updated = await dms_crud.msds.update(db=db, db_obj=db_obj, obj_in=msds_in)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="MSDS not found")
    return updated


@router.delete("/msds/{msds_id}", status_code=status.HTTP_204_NO_CONTENT, summary="MSDS 삭제")
async def delete_msds(msds_id: int, db: EntityStore = Depends(deps.get_store)):
    if not await dms_crud.msds.delete(db=db, id=msds_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="MSDS not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
