# labtrack/domains/lims/workflow.py

"""
QA 시료 접수 건의 상태 전이 규칙입니다.

    received → testing → completed → delivered

같은 상태를 다시 쓰는 것은 허용하며(변경 없음), 그 밖의 전이는 InvalidStatusTransition을 발생시킵니다.
QA_ENFORCE_STATUS_TRANSITIONS=False이면 열거형 안의 어떤 값이든 허용합니다.
"""

from typing import Dict, FrozenSet, Optional

from labtrack.core.config import settings
from labtrack.core.exceptions import InvalidStatusTransition

from .models import QaSampleStatus

ALLOWED_TRANSITIONS: Dict[QaSampleStatus, FrozenSet[QaSampleStatus]] = {
    QaSampleStatus.RECEIVED: frozenset({QaSampleStatus.TESTING}),
    QaSampleStatus.TESTING: frozenset({QaSampleStatus.COMPLETED}),
    QaSampleStatus.COMPLETED: frozenset({QaSampleStatus.DELIVERED}),
    QaSampleStatus.DELIVERED: frozenset(),
}

INITIAL_STATUS = QaSampleStatus.RECEIVED


def can_transition(current: QaSampleStatus, target: QaSampleStatus) -> bool:
    return current == target or target in ALLOWED_TRANSITIONS[current]


def ensure_transition(current: QaSampleStatus, target: QaSampleStatus, enforce: Optional[bool] = None) -> None:
    enforce = settings.QA_ENFORCE_STATUS_TRANSITIONS if enforce is None else enforce
    if enforce and not can_transition(QaSampleStatus(current), QaSampleStatus(target)):
        raise InvalidStatusTransition("QA sample", QaSampleStatus(current).value, QaSampleStatus(target).value)
