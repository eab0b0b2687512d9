"""Query strings the autoscaler sends for CPU-based scaling.

The mock stores canned responses under exactly these strings, so they must
stay byte-identical to what the autoscaler's calculation code formats.
"""

TIDB_SUM_CPU_USAGE_PATTERN = 'sum(increase(process_cpu_seconds_total{job="tidb"}[%s])) by (instance)'
TIKV_SUM_CPU_USAGE_PATTERN = "sum(increase(tikv_thread_cpu_seconds_total[%s])) by (instance)"
TIDB_CPU_QUOTA_PATTERN = "tidb_server_maxprocs"
TIKV_CPU_QUOTA_PATTERN = "tikv_server_cpu_cores_quota"

TIDB_MEMBER = "tidb"
TIKV_MEMBER = "tikv"
CPU_USAGE = "cpu_usage"
CPU_QUOTA = "cpu_quota"

_PATTERNS = {
    TIDB_MEMBER: {
        CPU_USAGE: TIDB_SUM_CPU_USAGE_PATTERN,
        CPU_QUOTA: TIDB_CPU_QUOTA_PATTERN,
    },
    TIKV_MEMBER: {
        CPU_USAGE: TIKV_SUM_CPU_USAGE_PATTERN,
        CPU_QUOTA: TIKV_CPU_QUOTA_PATTERN,
    },
}

# Unrecognized member/query combinations all land here and overwrite each other.
UNMATCHED_KEY = ""


def build_query_key(member_type: str, query_type: str, duration: str) -> str:
    pattern = _PATTERNS.get(member_type, {}).get(query_type)
    if pattern is None:
        return UNMATCHED_KEY
    if query_type == CPU_USAGE:
        return pattern % duration
    return pattern
