from __future__ import annotations
from typing import Dict, Iterator, Optional

from .logging_config import get_logger
from .models import MonitorParams
from .responses import build_prometheus_response

UP_KEY = "up"

log = get_logger(__name__)


class ResponseStore:
    """Query key -> serialized response body.

    Not thread-safe: the owning process must serialize access. Handlers touch it
    without awaiting in between, which is enough on a single event loop.
    """

    def __init__(self):
        self._responses: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._responses.get(key)

    def set(self, key: str, body: str) -> None:
        self._responses[key] = body

    def keys(self) -> Iterator[str]:
        return iter(list(self._responses))

    def __contains__(self, key: object) -> bool:
        return key in self._responses

    def __len__(self) -> int:
        return len(self._responses)


def new_response_store() -> ResponseStore:
    """Create a store seeded with the default answer for the ``up`` probe.

    Raises if the default cannot be serialized; a mock without it is unusable.
    """
    store = ResponseStore()
    try:
        body = build_prometheus_response(MonitorParams()).to_json()
    except Exception as exc:
        log.error("default_response_failed error=%s", exc)
        raise
    store.set(UP_KEY, body)
    return store
