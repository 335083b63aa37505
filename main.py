from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware
from core.database import Base, engine
from core.errors import register_error_handlers
from core.logging_setup import configure_logging, log_requests
from routers import auth_router
from routers import project_router, board_router, list_router, task_router
from models import user, session, project, board, task_list, task
from schemas.base import to_iso_utc
from core.config import settings

configure_logging()

Base.metadata.create_all(bind=engine)

app = FastAPI(title="Task Board API")

# Respect X-Forwarded-Proto/Host when behind a proxy (Docker/nginx/etc.)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

# Cookies carry the session, so CORS is pinned to the frontend origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.middleware("http")(log_requests)

register_error_handlers(app)

app.include_router(auth_router.router)
app.include_router(project_router.router)
app.include_router(board_router.router)
app.include_router(list_router.router)
app.include_router(task_router.router)


@app.get("/health")
def health():
    return {"status": "ok", "timestamp": to_iso_utc(datetime.now(timezone.utc))}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=5000, reload=settings.is_development)
