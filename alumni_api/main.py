# /alumni_api/main.py
import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

# --- Core / Config ---
from alumni_api.core.config import settings
from alumni_api.db.session import SessionLocal, init_db
from alumni_api.services.admin_auth_service import ensure_default_admin

# --- API Routers ---
from alumni_api.api.routes import auth as auth_router
from alumni_api.api.routes import alumni as alumni_router
from alumni_api.api.routes import submissions as submissions_router
from alumni_api.api.routes import notices as notices_router
from alumni_api.api.routes import admin as admin_router


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    force=True
)


# --- Lifespan (애플리케이션 시작/종료 이벤트) ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    db = SessionLocal()
    try:
        ensure_default_admin(db)
    finally:
        db.close()

    yield

# --- FastAPI App Instance ---
app = FastAPI(
    title="SAS Alumni API",
    lifespan=lifespan
)

@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)

    logging.info(
        f"Request processed: {request.method} {request.url.path} - Completed in {process_time:.4f} secs"
    )

    return response


# --- CORS 미들웨어 설정 ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- 라우트 등록 ---
app.include_router(
    auth_router.router,
    prefix="/api/v1/auth",
    tags=["Authentication"]
)

app.include_router(
    alumni_router.router,
    prefix="/api/v1/alumni",
    tags=["alumni"]
)

app.include_router(
    submissions_router.router,
    prefix="/api/v1/submissions",
    tags=["submissions"]
)

app.include_router(
    notices_router.router,
    prefix="/api/v1/notices",
    tags=["notices"]
)

app.include_router(
    admin_router.router,
    prefix="/api/v1/admin",
    tags=["admin"]
)
