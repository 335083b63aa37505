import logging
import time

from fastapi import Request

from core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

request_logger = logging.getLogger("taskboard.requests")


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)


async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    request_logger.info("-> %s %s", request.method, request.url.path)
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    request_logger.info(
        "<- %s %s %s %.0fms", request.method, request.url.path, response.status_code, duration_ms
    )
    return response
