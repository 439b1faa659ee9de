# main.py

from dotenv import load_dotenv
load_dotenv()

import logging
import time
import uuid

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware

import app_config
from onboarding_api import router as onboarding_router
from salary_api import router as salary_router

logging.basicConfig(
    level=app_config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)


# Request Logging Middleware
request_logger = logging.getLogger("request_logging")

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())
        start_time = time.time()

        # Extract area from path
        area = "API"
        if request.url.path.startswith("/compensation"):
            area = "Compensation"
        elif request.url.path.startswith("/reference"):
            area = "Reference"
        elif request.url.path.startswith("/market"):
            area = "Market"
        elif request.url.path.startswith("/onboarding"):
            area = "Onboarding"

        response = await call_next(request)

        latency_ms = (time.time() - start_time) * 1000

        request_logger.info(
            "request_completed",
            extra={
                "request_id": request_id,
                "endpoint": request.url.path,
                "method": request.method,
                "area": area,
                "status_code": response.status_code,
                "latency_ms": round(latency_ms, 2),
            }
        )

        return response


app = FastAPI(title="salary-insights")
app.add_middleware(RequestLoggingMiddleware)
app.include_router(salary_router, tags=["compensation"])
app.include_router(onboarding_router, tags=["onboarding"])


# ------------------------------------------------------------------
# Health check
# ------------------------------------------------------------------
def _healthy_response():
    return {"status": "ok"}


@app.get("/health")
def health():
    return _healthy_response()


@app.get("/healthz")
def healthz():
    return _healthy_response()
