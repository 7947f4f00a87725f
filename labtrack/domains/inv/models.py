# labtrack/domains/inv/models.py

"""
'inv' 도메인 (시약 재고)의 저장 레코드 모델을 정의하는 모듈입니다.
"""

from typing import Optional
from enum import Enum

from sqlmodel import Field, SQLModel

from labtrack.core.types import UTCDateTime


class ChemicalCategory(str, Enum):
    QA = "qa"
    STANDARD = "standard"
    RD = "rd"


# =============================================================================
# 1. chemicals 레코드 모델
# =============================================================================
class ChemicalBase(SQLModel):
    chemical_no: str = Field(max_length=50, description="시약 관리 번호 (고유)")
    code: Optional[str] = Field(default=None, max_length=50, description="품목 코드")
    cas_no: Optional[str] = Field(default=None, max_length=50, description="CAS 번호")
    name: str = Field(max_length=255, description="시약명")
    brand: Optional[str] = Field(default=None, max_length=100, description="제조사")
    grade: Optional[str] = Field(default=None, max_length=100, description="등급")
    package_size: Optional[str] = Field(default=None, max_length=100, description="포장 단위")
    lot_number: Optional[str] = Field(default=None, max_length=100, description="로트 번호")
    molecular_formula: Optional[str] = Field(default=None, max_length=100, description="분자식")
    molecular_weight: Optional[str] = Field(default=None, max_length=50, description="분자량")
    received_date: Optional[UTCDateTime] = Field(default=None, description="입고일")
    expiry_date: Optional[UTCDateTime] = Field(default=None, description="유효기간 만료일")
    location: Optional[str] = Field(default=None, max_length=255, description="보관 위치")
    category: ChemicalCategory = Field(description="용도 분류 (qa/standard/rd)")
    notes: Optional[str] = Field(default=None, description="비고")


class Chemical(ChemicalBase):
    id: Optional[int] = Field(default=None)
