# tests/services/test_status_service.py

"""
상태 판정 함수(status_service)의 단위 테스트 모듈입니다.
모든 함수는 기준 시각(now)을 인자로 받으므로 실제 시계 없이 검증합니다.
"""

from datetime import datetime, timedelta, timezone, UTC

import pytest

from labtrack.services import status_service
from labtrack.services.status_service import CalibrationStatus, DueUrgency, ExpiryStatus

NOW = datetime(2024, 6, 15, tzinfo=UTC)


# =============================================================================
# 1. days_until
# =============================================================================
@pytest.mark.parametrize(
    "target, expected",
    [
        (NOW + timedelta(days=16), 16),
        (NOW + timedelta(hours=3), 1),          # 몇 시간 남은 경우 올림
        (NOW, 0),
        (NOW - timedelta(hours=3), 0),          # -0.125일 -> 0
        (NOW - timedelta(days=2), -2),
        (NOW - timedelta(days=2, hours=12), -2),
    ],
)
def test_days_until_rounds_up(target, expected):
    assert status_service.days_until(target, NOW) == expected


def test_days_until_treats_naive_as_utc():
    naive = datetime(2024, 7, 1)
    assert status_service.days_until(naive, NOW) == 16


def test_days_until_with_other_offset():
    # 2024-07-01 09:00+09:00 == 2024-07-01 00:00Z
    kst = timezone(timedelta(hours=9))
    assert status_service.days_until(datetime(2024, 7, 1, 9, tzinfo=kst), NOW) == 16


# =============================================================================
# 2. 교정 상태
# =============================================================================
def test_calibration_status_due_soon_16_days():
    """[성공] 다음 교정일이 16일 남았으면 due-soon입니다."""
    print("\n--- Running test_calibration_status_due_soon_16_days ---")
    assert status_service.get_calibration_status(datetime(2024, 7, 1, tzinfo=UTC), NOW) == CalibrationStatus.DUE_SOON


def test_calibration_status_boundary_is_inclusive():
    assert status_service.get_calibration_status(NOW + timedelta(days=30), NOW) == CalibrationStatus.DUE_SOON
    assert status_service.get_calibration_status(NOW + timedelta(days=31), NOW) == CalibrationStatus.NORMAL


def test_calibration_status_overdue_and_unspecified():
    assert status_service.get_calibration_status(NOW - timedelta(seconds=1), NOW) == CalibrationStatus.OVERDUE
    assert status_service.get_calibration_status(None, NOW) == CalibrationStatus.UNSPECIFIED


def test_calibration_status_today_is_due_soon():
    assert status_service.get_calibration_status(NOW, NOW) == CalibrationStatus.DUE_SOON


def test_calibration_status_custom_warning_days():
    target = NOW + timedelta(days=20)
    assert status_service.get_calibration_status(target, NOW, warning_days=10) == CalibrationStatus.NORMAL


def test_calibration_status_values_are_wire_strings():
    assert CalibrationStatus.DUE_SOON.value == "due-soon"
    assert CalibrationStatus.UNSPECIFIED.value == "unspecified"


# =============================================================================
# 3. 유효기간 상태
# =============================================================================
def test_expiry_status_labels():
    print("\n--- Running test_expiry_status_labels ---")
    assert status_service.get_expiry_status(NOW - timedelta(days=1), NOW) == ExpiryStatus.EXPIRED
    assert status_service.get_expiry_status(NOW + timedelta(days=10), NOW) == ExpiryStatus.NEAR_EXPIRY
    assert status_service.get_expiry_status(NOW + timedelta(days=90), NOW) == ExpiryStatus.NORMAL
    assert status_service.get_expiry_status(None, NOW) == ExpiryStatus.UNSPECIFIED
    assert ExpiryStatus.NEAR_EXPIRY.value == "near-expiry"


# =============================================================================
# 4. QA 납기 긴급도
# =============================================================================
def test_due_urgency_two_days_is_orange():
    """[성공] 납기 2일 전이면 due-soon(주황)입니다."""
    print("\n--- Running test_due_urgency_two_days_is_orange ---")
    now = datetime(2024, 3, 8, tzinfo=UTC)
    due = datetime(2024, 3, 10, tzinfo=UTC)

    urgency = status_service.get_due_urgency(due, now)

    assert status_service.days_until(due, now) == 2
    assert urgency == DueUrgency.DUE_SOON
    assert status_service.URGENCY_COLORS[urgency] == "orange"


@pytest.mark.parametrize(
    "offset_days, expected",
    [(-1, DueUrgency.OVERDUE), (0, DueUrgency.DUE_SOON), (3, DueUrgency.DUE_SOON), (4, DueUrgency.NORMAL)],
)
def test_due_urgency_bands(offset_days, expected):
    assert status_service.get_due_urgency(NOW + timedelta(days=offset_days), NOW) == expected


def test_due_urgency_without_due_date():
    assert status_service.get_due_urgency(None, NOW) is None


def test_urgency_colors():
    assert status_service.URGENCY_COLORS == {
        DueUrgency.OVERDUE: "red",
        DueUrgency.DUE_SOON: "orange",
        DueUrgency.NORMAL: "gray",
    }


# =============================================================================
# 5. 표시 문구 / 보존 기간
# =============================================================================
@pytest.mark.parametrize(
    "days, text",
    [(16, "16 days remaining"), (0, "today"), (-3, "3 days overdue")],
)
def test_describe_days_remaining(days, text):
    assert status_service.describe_days_remaining(days) == text


def test_retention_cutoff_five_years():
    assert status_service.retention_cutoff(NOW) == datetime(2019, 6, 15, tzinfo=UTC)


def test_retention_cutoff_leap_day():
    leap_day = datetime(2024, 2, 29, 10, 0, tzinfo=UTC)
    assert status_service.retention_cutoff(leap_day) == datetime(2019, 2, 28, 10, 0, tzinfo=UTC)


def test_retention_cutoff_custom_years():
    assert status_service.retention_cutoff(NOW, years=1) == datetime(2023, 6, 15, tzinfo=UTC)
