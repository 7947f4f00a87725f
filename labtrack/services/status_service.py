# labtrack/services/status_service.py

"""
날짜 차이로부터 상태를 판정하는 순수 함수 모음입니다.

저장되는 상태 값은 없으며, 조회할 때마다 기준 시각(now)을 주입받아 다시 계산합니다.
- 교정 상태: overdue / due-soon / normal / unspecified
- 유효기간 상태: expired / near-expiry / normal / unspecified
- QA 납기 긴급도: overdue(red) / due-soon(orange) / normal(gray)
"""

import math
from datetime import datetime
from enum import Enum
from typing import Optional

from labtrack.core.config import settings
from labtrack.core.types import ensure_utc

SECONDS_PER_DAY = 86_400


class CalibrationStatus(str, Enum):
    OVERDUE = "overdue"
    DUE_SOON = "due-soon"
    NORMAL = "normal"
    UNSPECIFIED = "unspecified"


class ExpiryStatus(str, Enum):
    EXPIRED = "expired"
    NEAR_EXPIRY = "near-expiry"
    NORMAL = "normal"
    UNSPECIFIED = "unspecified"


class DueUrgency(str, Enum):
    OVERDUE = "overdue"
    DUE_SOON = "due-soon"
    NORMAL = "normal"


URGENCY_COLORS = {
    DueUrgency.OVERDUE: "red",
    DueUrgency.DUE_SOON: "orange",
    DueUrgency.NORMAL: "gray",
}


def days_until(target: datetime, now: datetime) -> int:
    """
    목표 일시까지 남은 일수를 올림(ceil)하여 반환합니다.

    몇 시간 뒤가 마감이면 1이 아니라 "오늘"에 가깝게 보이도록 올림을 사용합니다.
    목표가 지났으면 음수입니다.
    """
    delta = ensure_utc(target) - ensure_utc(now)
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


def _classify(target: Optional[datetime], now: datetime, warning_days: int):
    # "past" / "warning" / "normal" 구간 이름. 날짜가 없으면 None
    if target is None:
        return None
    if ensure_utc(target) < ensure_utc(now):
        return "past"
    if days_until(target, now) <= warning_days:
        return "warning"
    return "normal"


def get_calibration_status(
    next_calibration: Optional[datetime], now: datetime, warning_days: Optional[int] = None
) -> CalibrationStatus:
    """다음 교정 예정일 기준 교정 상태. 정확히 경고 일수만큼 남은 경우도 due-soon입니다."""
    band = _classify(next_calibration, now, settings.CALIBRATION_WARNING_DAYS if warning_days is None else warning_days)
    return {
        None: CalibrationStatus.UNSPECIFIED,
        "past": CalibrationStatus.OVERDUE,
        "warning": CalibrationStatus.DUE_SOON,
        "normal": CalibrationStatus.NORMAL,
    }[band]


def get_expiry_status(
    expiry_date: Optional[datetime], now: datetime, warning_days: Optional[int] = None
) -> ExpiryStatus:
    """시약 유효기간 기준 상태."""
    band = _classify(expiry_date, now, settings.EXPIRY_WARNING_DAYS if warning_days is None else warning_days)
    return {
        None: ExpiryStatus.UNSPECIFIED,
        "past": ExpiryStatus.EXPIRED,
        "warning": ExpiryStatus.NEAR_EXPIRY,
        "normal": ExpiryStatus.NORMAL,
    }[band]


def get_due_urgency(
    due_date: Optional[datetime], now: datetime, warning_days: Optional[int] = None
) -> Optional[DueUrgency]:
    """QA 시료 납기 긴급도. 교정/유효기간보다 좁은 경고 구간(기본 3일)을 사용합니다."""
    if due_date is None:
        return None
    days = days_until(due_date, now)
    if days < 0:
        return DueUrgency.OVERDUE
    if days <= (settings.QA_DUE_WARNING_DAYS if warning_days is None else warning_days):
        return DueUrgency.DUE_SOON
    return DueUrgency.NORMAL


def describe_days_remaining(days: int) -> str:
    """화면 표시용 문구: 'N days remaining' / 'N days overdue' / 'today'."""
    if days == 0:
        return "today"
    if days > 0:
        return f"{days} days remaining"
    return f"{abs(days)} days overdue"


def retention_cutoff(now: datetime, years: Optional[int] = None) -> datetime:
    """이력 조회 보존 기간의 시작 시각 (now - N년). 2월 29일은 2월 28일로 맞춥니다."""
    years = settings.CALIBRATION_HISTORY_RETENTION_YEARS if years is None else years
    now = ensure_utc(now)
    try:
        return now.replace(year=now.year - years)
    except ValueError:
        return now.replace(year=now.year - years, day=28)

