import logging
import time

from fastapi import FastAPI, Request
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from fastapi.responses import Response

from usersearch.config import load_server_settings
from usersearch.dataset.loader import load_dataset
from usersearch.errors import DatasetError
from usersearch.routers import search
from usersearch.schemas import RootResponse, HealthResponse

from .metrics import (
    num_requests,
    num_errors,
    request_latency,
    requests_in_progress
)

logger = logging.getLogger(__name__)

app = FastAPI(title="User Search Service")
app.state.settings = None
app.state.users = None


@app.on_event("startup")
async def startup_event():
    settings = load_server_settings()
    app.state.settings = settings
    try:
        app.state.users = load_dataset(settings.dataset_path)
    except DatasetError:
        # searches answer 500 until the dataset is fixed
        logger.exception("dataset %s could not be loaded", settings.dataset_path)
        app.state.users = None

app.include_router(search.router)

@app.middleware("http")
async def metrics_middleware(request: Request, call_next):
    method = request.method
    endpoint = request.url.path

    requests_in_progress.inc()
    start_time = time.time()

    try:
        response = await call_next(request)
        status_code = response.status_code
        duration = time.time() - start_time

        num_requests.labels(method=method, endpoint=endpoint, status_code=status_code).inc()

        if status_code >= 400:
            num_errors.labels(method=method, endpoint=endpoint, status_code=status_code).inc()

        request_latency.labels(method=method, endpoint=endpoint).observe(duration)

        return response
    finally:
        requests_in_progress.dec()

@app.get("/metrics")
def metrics():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

@app.get(
    "/",
    response_model=RootResponse,
    summary="Service info",
    responses={
        200: {
            "description": "OK",
            "content": {"application/json": {"example": {"msg": "User Search Service running!"}}},
        }
    },
)
def root():
    return {"msg": "User Search Service running!"}

@app.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    responses={
        200: {"description": "OK", "content": {"application/json": {"example": {"status": "ok"}}}}
    },
)
def health():
    return {"status": "ok" if app.state.users is not None else "degraded"}
