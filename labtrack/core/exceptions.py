# labtrack/core/exceptions.py

"""
도메인 예외와 전역 예외 핸들러를 정의하는 모듈입니다.

- 요청 유효성 검사 실패: 400 + 필드별 오류 목록
- 허용되지 않은 상태 전이: 409
- 그 밖의 예기치 못한 예외: 500 + 일반 메시지 (상세 내용은 로그에만 남김)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class InvalidStatusTransition(Exception):
    """워크플로 전이 테이블에 없는 상태 변경을 시도했을 때 발생합니다."""

    def __init__(self, entity: str, current: str, target: str):
        self.entity = entity
        self.current = current
        self.target = target
        super().__init__(f"{entity} status cannot change from '{current}' to '{target}'")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


async def status_transition_exception_handler(request: Request, exc: InvalidStatusTransition) -> JSONResponse:
    logger.info("Rejected status transition: %s", exc)
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(InvalidStatusTransition, status_transition_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
