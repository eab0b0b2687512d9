from __future__ import annotations
from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class MonitorParams(BaseModel):
    """Body of a registration request; camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    name: str = ""
    member_type: str = ""
    duration: str = ""
    value: str = ""
    query_type: str = ""
    instances: List[str] = Field(default_factory=list)
    timestamp: Optional[int] = None

    @field_validator("value", mode="before")
    @classmethod
    def _value_to_str(cls, v):
        if v is None:
            return ""
        if isinstance(v, bool):
            raise ValueError("value must be a string or a number")
        if isinstance(v, (int, float)):
            return str(v)
        return v

    def to_bytes(self) -> bytes:
        return self.model_dump_json(by_alias=True).encode()


class SampleMetric(BaseModel):
    cluster: str = ""
    instance: str = ""
    job: str = ""
    kubernetes_namespace: str = ""
    kubernetes_node: str = ""
    kubernetes_pod_ip: str = ""


class Sample(BaseModel):
    metric: SampleMetric
    value: Tuple[int, str]


class ResultData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    result_type: str = Field("vector", alias="resultType")
    result: List[Sample] = Field(default_factory=list)


class PrometheusResponse(BaseModel):
    status: str = "success"
    data: ResultData = Field(default_factory=ResultData)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class DiscoveredLabels(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    job: str
    pod_name: str = Field(alias="__meta_kubernetes_pod_name")


class ActiveTarget(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    discovered_labels: DiscoveredLabels = Field(alias="discoveredLabels")
    health: str


class TargetsData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    active_targets: List[ActiveTarget] = Field(default_factory=list, alias="activeTargets")


class MonitorTargets(BaseModel):
    status: str
    data: TargetsData

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
