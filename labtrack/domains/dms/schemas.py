# labtrack/domains/dms/schemas.py

"""
'dms' 도메인 (품질 문서, MSDS)의 Pydantic 스키마를 정의하는 모듈입니다.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field as PydanticField

from labtrack.core.types import UTCDateTime
from .models import DocumentCategory, MsdsCategory


class ControlledDocumentBase(BaseModel):
    sequence: Optional[str] = PydanticField(default=None, max_length=50, description="문서 순번")
    title: str = PydanticField(min_length=1, max_length=255, description="문서 제목")
    document_code: str = PydanticField(min_length=1, max_length=100, description="문서 번호")
    effective_date: Optional[UTCDateTime] = PydanticField(default=None, description="시행일")
    revision: int = PydanticField(default=0, ge=0, description="개정 번호")
    file_path: Optional[str] = PydanticField(default=None, description="첨부 파일 경로")
    notes: Optional[str] = PydanticField(default=None, description="비고")


class ControlledDocumentUpdate(BaseModel):  # 업데이트는 모두 Optional
    sequence: Optional[str] = PydanticField(None, max_length=50, description="문서 순번")
    title: Optional[str] = PydanticField(None, min_length=1, max_length=255, description="문서 제목")
    document_code: Optional[str] = PydanticField(None, min_length=1, max_length=100, description="문서 번호")
    effective_date: Optional[UTCDateTime] = PydanticField(None, description="시행일")
    revision: Optional[int] = PydanticField(None, ge=0, description="개정 번호")
    file_path: Optional[str] = PydanticField(None, description="첨부 파일 경로")
    notes: Optional[str] = PydanticField(None, description="비고")


# =============================================================================
# 1. 품질 문서 (Document) 스키마
# =============================================================================
class DocumentCreate(ControlledDocumentBase):
    category: DocumentCategory = PydanticField(description="문서 분류")


class DocumentUpdate(ControlledDocumentUpdate):
    category: Optional[DocumentCategory] = PydanticField(None, description="문서 분류")


class DocumentResponse(DocumentCreate):
    id: int = PydanticField(description="문서 고유 ID")

    model_config = ConfigDict(from_attributes=True)


# =============================================================================
# 2. MSDS 스키마
# =============================================================================
class MsdsCreate(ControlledDocumentBase):
    category: MsdsCategory = PydanticField(description="MSDS 분류")


class MsdsUpdate(ControlledDocumentUpdate):
    category: Optional[MsdsCategory] = PydanticField(None, description="MSDS 분류")


class MsdsResponse(MsdsCreate):
    id: int = PydanticField(description="MSDS 고유 ID")

    model_config = ConfigDict(from_attributes=True)
