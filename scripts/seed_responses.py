#!/usr/bin/env python3
import argparse
import json

import httpx

from mock_monitor.app.client import MockMonitorClient, MockMonitorError
from mock_monitor.app.models import MonitorParams
from mock_monitor.app.patterns import CPU_QUOTA, CPU_USAGE, TIDB_MEMBER, TIKV_MEMBER


def _split_instances(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


def seed(client: MockMonitorClient, params: MonitorParams) -> tuple[bool, dict]:
    result = {
        "member_type": params.member_type,
        "query_type": params.query_type,
        "instances": params.instances,
    }
    try:
        result["key"] = client.set_response(params)
    except MockMonitorError as exc:
        result["key"] = exc.key
        result["error"] = exc.message
        return False, result
    result["reply"] = client.query(result["key"])
    return True, result


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Register a canned CPU response with the mock monitor")
    parser.add_argument("--url", default="http://127.0.0.1:9090", help="mock monitor base URL")
    parser.add_argument("--name", default="", help="cluster name copied into each sample")
    parser.add_argument("--member-type", choices=[TIDB_MEMBER, TIKV_MEMBER], required=True)
    parser.add_argument("--query-type", choices=[CPU_USAGE, CPU_QUOTA], required=True)
    parser.add_argument("--duration", default="", help="range duration for cpu_usage, e.g. 3m")
    parser.add_argument("--value", default="0", help="sample value")
    parser.add_argument("--instances", default="", help="comma-separated instance names")
    parser.add_argument("--timeout-sec", type=float, default=5.0)
    args = parser.parse_args(argv)

    params = MonitorParams(
        name=args.name,
        member_type=args.member_type,
        query_type=args.query_type,
        duration=args.duration,
        value=args.value,
        instances=_split_instances(args.instances),
    )
    try:
        with MockMonitorClient(args.url, timeout=args.timeout_sec) as client:
            ok, result = seed(client, params)
    except httpx.HTTPError as exc:
        print(f"seed failed: {exc}")
        return 1
    print(json.dumps(result, sort_keys=True))
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
