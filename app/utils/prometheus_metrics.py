"""
Prometheus metrics for the store API.
"""
import re
from time import time
from typing import Callable

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST  # noqa: F401
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

METRICS_PATH = "/api/monitoring/metrics"

http_requests_total = Counter(
    'store_http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status_code']
)

http_request_duration_seconds = Histogram(
    'store_http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.5, 5.0, 10.0]
)

http_errors_total = Counter(
    'store_http_errors_total',
    'Total HTTP errors (4xx and 5xx)',
    ['method', 'endpoint', 'status_code']
)

log_messages_total = Counter(
    'store_log_messages_total',
    'Total log messages',
    ['level']
)

_NUMERIC_SEGMENT = re.compile(r'/\d+')


def normalize_endpoint(endpoint: str) -> str:
    """
    Replaces numeric ids to keep label cardinality low.
    Ex: /api/orders/123 -> /api/orders/{id}
    """
    return _NUMERIC_SEGMENT.sub('/{id}', endpoint)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Collects request count, latency and errors per normalized endpoint."""

    async def dispatch(self, request: Request, call_next: Callable):
        # Scraping the metrics must not count as traffic
        if request.url.path == METRICS_PATH:
            return await call_next(request)

        method = request.method
        endpoint = normalize_endpoint(request.url.path)
        start_time = time()

        try:
            response = await call_next(request)
        except Exception:
            http_requests_total.labels(method=method, endpoint=endpoint, status_code=500).inc()
            http_errors_total.labels(method=method, endpoint=endpoint, status_code=500).inc()
            raise

        status_code = response.status_code
        http_requests_total.labels(method=method, endpoint=endpoint, status_code=status_code).inc()
        http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(time() - start_time)
        if status_code >= 400:
            http_errors_total.labels(method=method, endpoint=endpoint, status_code=status_code).inc()

        return response


def get_metrics() -> bytes:
    """Returns the metrics in the Prometheus text format."""
    return generate_latest()


def record_log(level: str):
    log_messages_total.labels(level=level).inc()
