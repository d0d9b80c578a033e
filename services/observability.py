"""Request observability and analysis metrics exported to Prometheus."""
from typing import Optional
import time

from fastapi import APIRouter, Request
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

from services.models import ClassificationResult

request_counter = Counter(
    "app_http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)

request_latency = Histogram(
    "app_http_request_duration_seconds",
    "HTTP request latency",
    ["method", "path"],
    buckets=(0.05, 0.1, 0.25, 0.5, 1, 2, 5),
)

analyses_counter = Counter(
    "sentiment_analyses_total",
    "Texts classified, by resulting sentiment",
    ["sentiment"],
)

confidence_histogram = Histogram(
    "sentiment_confidence",
    "Confidence of each classification",
    buckets=(50, 60, 70, 80, 90, 99),
)

analysis_latency = Histogram(
    "sentiment_analysis_duration_seconds",
    "Time spent classifying a text, excluding simulated delay",
    buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05),
)

metrics_router = APIRouter()


@metrics_router.get("/metrics")
async def metrics_endpoint():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


def record_request_metrics(request: Request, status_code: int, duration: float):
    path = request.url.path
    method = request.method
    request_counter.labels(method=method, path=path, status=str(status_code)).inc()
    request_latency.labels(method=method, path=path).observe(duration)


def record_analysis(result: ClassificationResult, duration: float):
    analyses_counter.labels(sentiment=result.sentiment.value).inc()
    confidence_histogram.observe(result.confidence)
    analysis_latency.observe(duration)


def request_timer() -> float:
    return time.perf_counter()


def elapsed(start_time: Optional[float]) -> float:
    if start_time is None:
        return 0.0
    return time.perf_counter() - start_time
