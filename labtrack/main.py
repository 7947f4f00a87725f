import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

# 핵심 설정 및 저장소 모듈 임포트
from labtrack import API_PREFIX
from labtrack.core import dependencies as deps
from labtrack.core.config import settings
from labtrack.core.exceptions import register_exception_handlers
from labtrack.core.store import EntityStore

# 각 도메인의 라우터들을 임포트합니다.
from labtrack.domains.eqp.routers import router as eqp_router
from labtrack.domains.inv.routers import router as inv_router
from labtrack.domains.dms.routers import router as dms_router
from labtrack.domains.trn.routers import router as trn_router
from labtrack.domains.tsk.routers import router as tsk_router
from labtrack.domains.lims.routers import router as lims_router
from labtrack.domains.rpt.routers import router as rpt_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI 애플리케이션의 수명 주기 이벤트를 처리합니다.
    저장소는 메모리 기반이므로 서버가 종료되면 데이터도 함께 사라집니다.
    """
    logger.info("Starting %s (%s, id scope=%s)", settings.APP_NAME, settings.APP_ENV, settings.ID_SEQUENCE_SCOPE)
    yield  # 애플리케이션 실행
    logger.info("Shutting down %s", settings.APP_NAME)


# -- FastAPI 애플리케이션 인스턴스 생성 --
app = FastAPI(
    title="LabTrack API",
    description="Laboratory management API: equipment calibration, chemicals, documents, training, MSDS, tasks and QA samples.",
    version=settings.APP_VERSION,
    docs_url="/docs",       # Swagger UI (Interactive API documentation)
    redoc_url="/redoc",     # ReDoc (Alternative API documentation)
    debug=settings.DEBUG_MODE,
    lifespan=lifespan
)

# -- 예외 핸들러 (400 검증 오류 / 409 상태 전이 / 500 내부 오류) --
register_exception_handlers(app)

# -- CORS (Cross-Origin Resource Sharing) 미들웨어 설정 --
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -- 도메인 라우터 포함 --
# 라우터 내부 경로가 엔티티 종류(/tools, /chemicals ...)를 포함하므로 공통 접두사만 붙입니다.
app.include_router(eqp_router, prefix=API_PREFIX)
app.include_router(inv_router, prefix=API_PREFIX)
app.include_router(dms_router, prefix=API_PREFIX)
app.include_router(trn_router, prefix=API_PREFIX)
app.include_router(tsk_router, prefix=API_PREFIX)
app.include_router(lims_router, prefix=API_PREFIX)
app.include_router(rpt_router, prefix=API_PREFIX)


# -- 루트 엔드포인트 --
@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    """
    LabTrack API의 루트 엔드포인트입니다.
    API의 시작점을 알리고 문서 링크를 제공합니다.
    """
    return {"message": "Welcome to LabTrack API. Visit /docs for interactive API documentation."}


# -- 헬스 체크 엔드포인트 --
@app.get("/health-check", summary="Health Check", response_description="Status of the application and entity store.")
async def health_check(db: EntityStore = Depends(deps.get_store)):
    """
    애플리케이션의 헬스 체크 엔드포인트입니다.
    저장소 응답 여부를 확인하여 서비스의 정상 작동 여부를 판단합니다.
    """
    if not await db.ping():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Entity store health check failed",
        )
    return {"status": "ok", "store": "available"}
