"""
Prometheus metrics configuration for the fashion template server.

Tracks chat link decode outcomes and the health of the remote catalog:
request counts and latency, cache effectiveness and failed batch chunks.
"""

from prometheus_client import (
    Counter,
    Histogram,
    Info,
    CollectorRegistry,
    generate_latest,
    CONTENT_TYPE_LATEST,
)
from server.src.core.logging_config import get_logger

logger = get_logger(__name__)

# Create a custom registry for our metrics
REGISTRY = CollectorRegistry()

# =============================================================================
# APPLICATION INFO METRICS
# =============================================================================

app_info = Info(
    "fashion_server_info", "Fashion template server information", registry=REGISTRY
)

# =============================================================================
# CHAT LINK METRICS
# =============================================================================

chat_link_decodes_total = Counter(
    "fashion_chat_link_decodes_total",
    "Total number of fashion template decode attempts",
    ["outcome"],
    registry=REGISTRY,
)

skin_links_built_total = Counter(
    "fashion_skin_links_built_total",
    "Total number of wardrobe skin chat links built",
    ["outcome"],
    registry=REGISTRY,
)

# =============================================================================
# CATALOG METRICS
# =============================================================================

catalog_requests_total = Counter(
    "fashion_catalog_requests_total",
    "Total number of remote catalog requests",
    ["endpoint", "status"],
    registry=REGISTRY,
)

catalog_request_duration_seconds = Histogram(
    "fashion_catalog_request_duration_seconds",
    "Remote catalog request duration in seconds",
    ["endpoint"],
    registry=REGISTRY,
)

catalog_chunk_failures_total = Counter(
    "fashion_catalog_chunk_failures_total",
    "Total number of catalog batch chunks that returned no records",
    ["endpoint", "reason"],
    registry=REGISTRY,
)

# =============================================================================
# CACHE METRICS
# =============================================================================

cache_hits_total = Counter(
    "fashion_cache_hits_total",
    "Total number of catalog cache hits",
    ["key_type"],
    registry=REGISTRY,
)

cache_misses_total = Counter(
    "fashion_cache_misses_total",
    "Total number of catalog cache misses",
    ["key_type"],
    registry=REGISTRY,
)

# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def init_metrics(version: str = "0.1.0", environment: str = "development"):
    """Initialize metrics with application information."""
    app_info.info(
        {
            "version": version,
            "service": "fashion-template-server",
            "environment": environment,
        }
    )
    logger.info("Prometheus metrics initialized")


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for Prometheus metrics."""
    return CONTENT_TYPE_LATEST


# =============================================================================
# HELPER FUNCTIONS FOR MANUAL METRICS
# =============================================================================


class MetricsHelper:
    """Helper class for manual metrics tracking."""

    @staticmethod
    def track_decode(outcome: str):
        """Track a fashion template decode ("decoded" or "undecodable")."""
        chat_link_decodes_total.labels(outcome=outcome).inc()

    @staticmethod
    def track_skin_link(outcome: str):
        """Track a wardrobe skin link build ("built" or "out_of_range")."""
        skin_links_built_total.labels(outcome=outcome).inc()

    @staticmethod
    def track_catalog_request(endpoint: str, status: str, duration: float):
        """Track one remote catalog request."""
        catalog_requests_total.labels(endpoint=endpoint, status=status).inc()
        catalog_request_duration_seconds.labels(endpoint=endpoint).observe(duration)

    @staticmethod
    def track_chunk_failure(endpoint: str, reason: str):
        """Track a batch chunk that was dropped from the merged result."""
        catalog_chunk_failures_total.labels(endpoint=endpoint, reason=reason).inc()

    @staticmethod
    def track_cache_lookup(key_type: str, hit: bool):
        """Track a cache lookup."""
        if hit:
            cache_hits_total.labels(key_type=key_type).inc()
        else:
            cache_misses_total.labels(key_type=key_type).inc()


# Global metrics helper instance
metrics = MetricsHelper()
