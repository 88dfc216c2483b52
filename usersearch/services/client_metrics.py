import threading
import weakref
from typing import Optional

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram


class ClientMetrics:
    def __init__(self, registry: CollectorRegistry):
        self.queries = Counter(
            "usersearch_client_queries_total",
            "Total number of user search queries sent by the client",
            ["status"],
            registry=registry,
        )
        self.results_returned = Histogram(
            "usersearch_client_results_returned",
            "Number of users returned per client search query",
            buckets=(0, 1, 2, 5, 10, 15, 20, 25),
            registry=registry,
        )


_lock = threading.Lock()
_by_registry: "weakref.WeakKeyDictionary[CollectorRegistry, ClientMetrics]" = weakref.WeakKeyDictionary()


def client_metrics(registry: Optional[CollectorRegistry] = None) -> ClientMetrics:
    """Return the client collectors registered on ``registry`` (default: the global one).

    Collectors are created once per registry; later clients reuse them.
    """
    if registry is None:
        registry = REGISTRY
    with _lock:
        metrics = _by_registry.get(registry)
        if metrics is None:
            metrics = ClientMetrics(registry)
            _by_registry[registry] = metrics
        return metrics
