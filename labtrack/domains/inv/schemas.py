# labtrack/domains/inv/schemas.py

"""
'inv' 도메인 (시약 재고)의 Pydantic 스키마를 정의하는 모듈입니다.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field as PydanticField

from labtrack.core.types import UTCDateTime
from labtrack.services.status_service import ExpiryStatus
from .models import ChemicalCategory


# =============================================================================
# 1. 시약 (Chemical) 스키마
# =============================================================================
class ChemicalBase(BaseModel):
    chemical_no: str = PydanticField(min_length=1, max_length=50, description="시약 관리 번호")
    code: Optional[str] = PydanticField(default=None, max_length=50, description="품목 코드")
    cas_no: Optional[str] = PydanticField(default=None, max_length=50, description="CAS 번호")
    name: str = PydanticField(min_length=1, max_length=255, description="시약명")
    brand: Optional[str] = PydanticField(default=None, max_length=100, description="제조사")
    grade: Optional[str] = PydanticField(default=None, max_length=100, description="등급")
    package_size: Optional[str] = PydanticField(default=None, max_length=100, description="포장 단위")
    lot_number: Optional[str] = PydanticField(default=None, max_length=100, description="로트 번호")
    molecular_formula: Optional[str] = PydanticField(default=None, max_length=100, description="분자식")
    molecular_weight: Optional[str] = PydanticField(default=None, max_length=50, description="분자량")
    received_date: Optional[UTCDateTime] = PydanticField(default=None, description="입고일")
    expiry_date: Optional[UTCDateTime] = PydanticField(default=None, description="유효기간 만료일")
    location: Optional[str] = PydanticField(default=None, max_length=255, description="보관 위치")
    category: ChemicalCategory = PydanticField(description="용도 분류")
    notes: Optional[str] = PydanticField(default=None, description="비고")


class ChemicalCreate(ChemicalBase):
    pass


class ChemicalUpdate(BaseModel):  # 업데이트는 모두 Optional
    chemical_no: Optional[str] = PydanticField(None, min_length=1, max_length=50, description="시약 관리 번호")
    code: Optional[str] = PydanticField(None, max_length=50, description="품목 코드")
    cas_no: Optional[str] = PydanticField(None, max_length=50, description="CAS 번호")
    name: Optional[str] = PydanticField(None, min_length=1, max_length=255, description="시약명")
    brand: Optional[str] = PydanticField(None, max_length=100, description="제조사")
    grade: Optional[str] = PydanticField(None, max_length=100, description="등급")
    package_size: Optional[str] = PydanticField(None, max_length=100, description="포장 단위")
    lot_number: Optional[str] = PydanticField(None, max_length=100, description="로트 번호")
    molecular_formula: Optional[str] = PydanticField(None, max_length=100, description="분자식")
    molecular_weight: Optional[str] = PydanticField(None, max_length=50, description="분자량")
    received_date: Optional[UTCDateTime] = PydanticField(None, description="입고일")
    expiry_date: Optional[UTCDateTime] = PydanticField(None, description="유효기간 만료일")
    location: Optional[str] = PydanticField(None, max_length=255, description="보관 위치")
    category: Optional[ChemicalCategory] = PydanticField(None, description="용도 분류")
    notes: Optional[str] = PydanticField(None, description="비고")


class ChemicalResponse(ChemicalBase):
    id: int = PydanticField(description="시약 고유 ID")
    expiry_status: ExpiryStatus = PydanticField(description="파생 유효기간 상태")
    days_until_expiry: Optional[int] = PydanticField(default=None, description="만료까지 남은 일수 (음수는 경과)")

    model_config = ConfigDict(from_attributes=True)
