"""Driver-side helper for e2e tests that configure the mock monitor.

The server always answers 200 and reports failures in the body, so this
client is where body text gets turned back into exceptions.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Union

import httpx

from .config import settings
from .logging_config import get_logger
from .models import MonitorParams
from .patterns import CPU_QUOTA, CPU_USAGE, build_query_key

log = get_logger(__name__)


class MockMonitorError(RuntimeError):
    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.key = key


class MockMonitorClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._client = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def __enter__(self) -> "MockMonitorClient":
        return self

    def __exit__(self, *_exc) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def set_response(self, params: Union[MonitorParams, Dict[str, Any]]) -> str:
        """Register a canned response and return the key it was stored under."""
        if not isinstance(params, MonitorParams):
            params = MonitorParams.model_validate(params)
        key = build_query_key(params.member_type, params.query_type, params.duration)
        resp = self._client.post(
            settings.response_path,
            content=params.to_bytes(),
            headers={"Content-Type": "application/json"},
        )
        resp.raise_for_status()
        if resp.text != "ok":
            log.warning("set_response_rejected key=%s reply=%s", key, resp.text)
            raise MockMonitorError(resp.text, key=key)
        return key

    def set_cpu_usage(
        self,
        name: str,
        member_type: str,
        duration: str,
        value: Union[str, float],
        instances: List[str],
    ) -> str:
        return self.set_response(
            MonitorParams(
                name=name,
                member_type=member_type,
                duration=duration,
                value=value,
                query_type=CPU_USAGE,
                instances=instances,
            )
        )

    def set_cpu_quota(
        self,
        name: str,
        member_type: str,
        value: Union[str, float],
        instances: List[str],
    ) -> str:
        return self.set_response(
            MonitorParams(
                name=name,
                member_type=member_type,
                value=value,
                query_type=CPU_QUOTA,
                instances=instances,
            )
        )

    def query(self, key: str, method: str = "GET") -> str:
        """Return the raw reply body for ``key``, diagnostics included."""
        if method.upper() == "GET":
            resp = self._client.get(settings.query_path, params={"query": key})
        else:
            resp = self._client.request(method.upper(), settings.query_path, data={"query": key})
        resp.raise_for_status()
        return resp.text

    def targets(self) -> Dict[str, Any]:
        resp = self._client.get(settings.targets_path)
        resp.raise_for_status()
        return resp.json()
