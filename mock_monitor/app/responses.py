from .models import (
    ActiveTarget,
    DiscoveredLabels,
    MonitorParams,
    MonitorTargets,
    PrometheusResponse,
    ResultData,
    Sample,
    SampleMetric,
    TargetsData,
)

PLACEHOLDER_LABEL = "foo"


def build_prometheus_response(params: MonitorParams) -> PrometheusResponse:
    """Turn registration params into an instant-vector query result.

    One sample per instance; labels other than cluster and instance carry a
    placeholder since the autoscaler only reads those two.
    """
    samples = [
        Sample(
            metric=SampleMetric(
                cluster=params.name,
                instance=instance,
                job=PLACEHOLDER_LABEL,
                kubernetes_namespace=PLACEHOLDER_LABEL,
                kubernetes_node=PLACEHOLDER_LABEL,
                kubernetes_pod_ip=PLACEHOLDER_LABEL,
            ),
            value=(params.timestamp or 0, params.value),
        )
        for instance in params.instances
    ]
    return PrometheusResponse(status="success", data=ResultData(result_type="vector", result=samples))


def build_targets() -> MonitorTargets:
    return MonitorTargets(
        status="success",
        data=TargetsData(
            active_targets=[
                ActiveTarget(
                    discovered_labels=DiscoveredLabels(job="job", pod_name="pod"),
                    health="true",
                )
            ]
        ),
    )
