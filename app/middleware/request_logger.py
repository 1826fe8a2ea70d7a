import logging
import time

from fastapi import Request

logger = logging.getLogger("app.requests")


async def log_requests(request: Request, call_next):
    """Zaloguje každú požiadavku: metóda, cesta, status a trvanie"""
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        duration_ms = (time.perf_counter() - start) * 1000
        logger.error(f"{request.method} {request.url.path} -> unhandled error ({duration_ms:.1f} ms)")
        raise
    duration_ms = (time.perf_counter() - start) * 1000

    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms:.1f} ms)")
    return response
