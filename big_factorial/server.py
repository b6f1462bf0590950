"""
Factorial Service - exact factorials over HTTP

Endpoints:
- POST /factorial - compute n! with the linear or optimized strategy
- GET /health     - liveness check
- GET /metrics    - Prometheus metrics
- GET /           - service descriptor
"""

import time
from contextlib import asynccontextmanager
from datetime import datetime

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest

from logging_config import setup_logging

from .container import Container
from .factorial_engine import FactorialEngine
from .models import FactorialRequest, FactorialResponse

SERVICE_NAME = "big_factorial"
VERSION = "1.0.0"

container = Container()
settings = container.settings()

logger = setup_logging(SERVICE_NAME, settings.log_dir)

# ============================================================================
# PROMETHEUS METRICS
# ============================================================================

REQUESTS_TOTAL = Counter('factorial_requests_total', 'Total requests', ['method', 'endpoint', 'status'])
RESPONSE_TIME_SECONDS = Histogram('factorial_response_time_seconds', 'Request duration',
                                  buckets=[0.01, 0.05, 0.1, 0.5, 1, 2, 5, 10, 30], labelnames=['method', 'endpoint'])
ACTIVE_REQUESTS = Gauge('factorial_active_requests', 'Number of active requests', ['method', 'endpoint'])
MULTIPLICATIONS_TOTAL = Counter('factorial_multiplications_total', 'Big-number multiplications performed', ['strategy'])
SERVICE_STATUS = Gauge('factorial_service_status', 'Service status')


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle manager"""
    SERVICE_STATUS.set(1)  # 1 = online
    logger.info(f"Factorial service started (radix={settings.radix}, max n={settings.max_service_n})")
    yield
    SERVICE_STATUS.set(0)  # 0 = offline
    logger.info("Factorial service stopped")


app = FastAPI(
    title="Factorial Service",
    description="Exact arbitrary-precision factorials",
    version=VERSION,
    lifespan=lifespan
)


@app.middleware("http")
async def prometheus_middleware(request: Request, call_next):
    """Track HTTP metrics for every endpoint except /health and /metrics."""
    if request.url.path in ["/health", "/metrics"]:
        return await call_next(request)

    ACTIVE_REQUESTS.labels(method=request.method, endpoint=request.url.path).inc()
    start_time = time.time()
    status = "500"
    try:
        response = await call_next(request)
        status = str(response.status_code)
        return response
    finally:
        duration = time.time() - start_time
        RESPONSE_TIME_SECONDS.labels(method=request.method, endpoint=request.url.path).observe(duration)
        REQUESTS_TOTAL.labels(method=request.method, endpoint=request.url.path, status=status).inc()
        ACTIVE_REQUESTS.labels(method=request.method, endpoint=request.url.path).dec()


def get_engine() -> FactorialEngine:
    """Provide a fresh engine from the DI container."""
    return container.engine()


@app.post("/factorial", response_model=FactorialResponse)
def factorial_endpoint(request: FactorialRequest,
                       engine: FactorialEngine = Depends(get_engine)) -> FactorialResponse:
    """Endpoint for computing n! exactly.

    Args:
        request: Request with n (non-negative integer) and the strategy.

    Returns:
        FactorialResponse: The decimal value with digit and multiplication counts.

    Raises:
        HTTPException: 400 if n is above the configured limit or invalid,
            500 on any other error.
    """
    if request.n > settings.max_service_n:
        raise HTTPException(
            status_code=400,
            detail=f"n must not exceed {settings.max_service_n}"
        )
    try:
        result = engine.compute_result(request.n, request.strategy)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        # Log error type without the (possibly huge) payload
        logger.error(f"Unexpected error in factorial: {type(e).__name__}")
        raise HTTPException(status_code=500, detail="Internal server error")

    MULTIPLICATIONS_TOTAL.labels(strategy=result.strategy.value).inc(result.multiplications)
    logger.info(f"{result.n}! via {result.strategy.value}: {result.digits} digits, "
                f"{result.multiplications} multiplications")
    return FactorialResponse(**result.model_dump())


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": VERSION,
        "timestamp": datetime.now().isoformat()
    }


@app.get("/metrics")
async def metrics():
    """Prometheus metrics endpoint"""
    return PlainTextResponse(generate_latest(), media_type=CONTENT_TYPE_LATEST)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "Factorial Service",
        "version": VERSION,
        "strategies": ["linear", "optimized"],
        "max_n": settings.max_service_n,
        "endpoints": {
            "factorial": "POST /factorial",
            "health": "GET /health",
            "metrics": "GET /metrics"
        }
    }


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
