# labtrack/domains/dms/models.py

"""
'dms' 도메인 (품질 문서, MSDS)의 저장 레코드 모델을 정의하는 모듈입니다.
두 종류는 같은 필드 구성을 가지며 분류(category) 값만 다릅니다.
"""

from typing import Optional
from enum import Enum

from sqlmodel import Field, SQLModel

from labtrack.core.types import UTCDateTime


class DocumentCategory(str, Enum):
    QUALITY_MANUAL = "quality_manual"
    PROCEDURES = "procedures"
    WORK_MANUAL = "work_manual"
    FORMS = "forms"
    SUPPORT = "support"
    ANNOUNCEMENTS = "announcements"


class MsdsCategory(str, Enum):
    SDS_LAB = "sds_lab"
    SDS_PRODUCT = "sds_product"
    SDS_RM = "sds_rm"


class ControlledDocumentBase(SQLModel):
    sequence: Optional[str] = Field(default=None, max_length=50, description="문서 순번")
    title: str = Field(max_length=255, description="문서 제목")
    document_code: str = Field(max_length=100, description="문서 번호 (고유)")
    effective_date: Optional[UTCDateTime] = Field(default=None, description="시행일")
    revision: int = Field(default=0, ge=0, description="개정 번호")
    file_path: Optional[str] = Field(default=None, description="첨부 파일 경로 (업로드는 외부에서 처리)")
    notes: Optional[str] = Field(default=None, description="비고")


# =============================================================================
# 1. documents 레코드 모델
# =============================================================================
class Document(ControlledDocumentBase):
    id: Optional[int] = Field(default=None)
    category: DocumentCategory = Field(description="문서 분류")


# =============================================================================
# 2. msds 레코드 모델
# =============================================================================
class Msds(ControlledDocumentBase):
    id: Optional[int] = Field(default=None)
    category: MsdsCategory = Field(description="MSDS 분류")
