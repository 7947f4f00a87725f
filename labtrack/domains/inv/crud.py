# labtrack/domains/inv/crud.py

"""
'inv' 도메인의 CRUD 로직을 담당하는 모듈입니다.
"""

from typing import Optional

from fastapi import HTTPException, status

from labtrack.core.crud_base import CRUDBase
from labtrack.core.store import EntityStore

from . import models as inv_models
from . import schemas as inv_schemas


# =============================================================================
# 1. 시약 (Chemical) CRUD
# =============================================================================
class CRUDChemical(CRUDBase[inv_models.Chemical, inv_schemas.ChemicalCreate, inv_schemas.ChemicalUpdate]):
    def __init__(self):
        super().__init__(model=inv_models.Chemical, kind="chemicals")

    async def get_by_chemical_no(self, db: EntityStore, *, chemical_no: str) -> Optional[inv_models.Chemical]:
        """시약 관리 번호로 조회합니다."""
        return await self.get_by_attribute(db, attribute="chemical_no", value=chemical_no)

    async def create(self, db: EntityStore, *, obj_in: inv_schemas.ChemicalCreate) -> inv_models.Chemical:
        """관리 번호 중복을 확인하고 생성합니다."""
        if await self.get_by_chemical_no(db, chemical_no=obj_in.chemical_no):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Chemical with this number already exists.")
        return await super().create(db, obj_in=obj_in)

    async def update(
        self, db: EntityStore, *, db_obj: inv_models.Chemical, obj_in: inv_schemas.ChemicalUpdate
    ) -> Optional[inv_models.Chemical]:
        """업데이트 시 관리 번호 중복 검사."""
        if obj_in.chemical_no is not None and obj_in.chemical_no != db_obj.chemical_no:
            existing = await self.get_by_chemical_no(db, chemical_no=obj_in.chemical_no)
            if existing and existing.id != db_obj.id:
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Chemical with this number already exists.")
        return await super().update(db, db_obj=db_obj, obj_in=obj_in)


chemical = CRUDChemical()
