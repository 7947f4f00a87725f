# labtrack/core/types.py

"""
여러 도메인의 모델/스키마에서 공통으로 사용하는 Annotated 타입을 정의합니다.
"""

from datetime import datetime, UTC
from typing import Annotated

from pydantic import AfterValidator


def ensure_utc(value: datetime) -> datetime:
    """타임존 정보가 없는 일시는 UTC로 간주하고, 나머지는 UTC로 변환합니다."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


# 날짜만 입력("2024-01-01")해도 00:00 UTC 일시로 해석됩니다.
UTCDateTime = Annotated[datetime, AfterValidator(ensure_utc)]
