# labtrack/domains/dms/crud.py

"""
'dms' 도메인의 CRUD 로직을 담당하는 모듈입니다.
"""

from typing import Optional

from fastapi import HTTPException, status

from labtrack.core.crud_base import CRUDBase
from labtrack.core.store import EntityStore

from . import models as dms_models


class CRUDControlledDocument(CRUDBase):
    """문서 번호(document_code) 중복을 막는 문서 공통 CRUD."""
    label = "Document"

    async def get_by_document_code(self, db: EntityStore, *, document_code: str):
        return await self.get_by_attribute(db, attribute="document_code", value=document_code)

    async def create(self, db: EntityStore, *, obj_in):
        if await self.get_by_document_code(db, document_code=obj_in.document_code):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"{self.label} with this code already exists.")
        return await super().create(db, obj_in=obj_in)

    async def update(self, db: EntityStore, *, db_obj, obj_in):
        if obj_in.document_code is not None and obj_in.document_code != db_obj.document_code:
            existing = await self.get_by_document_code(db, document_code=obj_in.document_code)
            if existing and existing.id != db_obj.id:
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"{self.label} with this code already exists.")
        return await super().update(db, db_obj=db_obj, obj_in=obj_in)


# =============================================================================
# 1. 품질 문서 (Document) CRUD
# =============================================================================
class CRUDDocument(CRUDControlledDocument):
    label = "Document"

    def __init__(self):
        super().__init__(model=dms_models.Document, kind="documents")


# =============================================================================
# 2. MSDS CRUD
# =============================================================================
class CRUDMsds(CRUDControlledDocument):
    label = "MSDS"

    def __init__(self):
        super().__init__(model=dms_models.Msds, kind="msds")


document = CRUDDocument()
msds = CRUDMsds()
