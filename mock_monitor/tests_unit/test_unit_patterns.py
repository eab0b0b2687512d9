from mock_monitor.app.patterns import (
    TIDB_CPU_QUOTA_PATTERN,
    TIDB_SUM_CPU_USAGE_PATTERN,
    TIKV_CPU_QUOTA_PATTERN,
    TIKV_SUM_CPU_USAGE_PATTERN,
    UNMATCHED_KEY,
    build_query_key,
)


def test_cpu_usage_interpolates_duration():
    assert build_query_key("tidb", "cpu_usage", "3m") == (
        'sum(increase(process_cpu_seconds_total{job="tidb"}[3m])) by (instance)'
    )
    assert build_query_key("tikv", "cpu_usage", "30s") == (
        "sum(increase(tikv_thread_cpu_seconds_total[30s])) by (instance)"
    )


def test_cpu_quota_ignores_duration():
    assert build_query_key("tidb", "cpu_quota", "3m") == TIDB_CPU_QUOTA_PATTERN
    assert build_query_key("tikv", "cpu_quota", "") == TIKV_CPU_QUOTA_PATTERN


def test_usage_patterns_take_one_argument():
    assert TIDB_SUM_CPU_USAGE_PATTERN.count("%s") == 1
    assert TIKV_SUM_CPU_USAGE_PATTERN.count("%s") == 1
    assert "%" not in TIDB_CPU_QUOTA_PATTERN
    assert "%" not in TIKV_CPU_QUOTA_PATTERN


def test_unknown_combinations_map_to_empty_key():
    assert UNMATCHED_KEY == ""
    assert build_query_key("pd", "cpu_usage", "3m") == ""
    assert build_query_key("tidb", "memory", "3m") == ""
    assert build_query_key("", "", "") == ""
    assert build_query_key("TiDB", "cpu_usage", "3m") == ""
