import json


EXPECTED = {
    "status": "success",
    "data": {
        "activeTargets": [
            {
                "discoveredLabels": {"job": "job", "__meta_kubernetes_pod_name": "pod"},
                "health": "true",
            }
        ]
    },
}


def test_targets_payload(client):
    resp = client.get("/api/v1/targets")
    assert resp.status_code == 200
    assert json.loads(resp.text) == EXPECTED


def test_targets_ignores_request_content(client):
    plain = client.get("/api/v1/targets").text
    noisy = client.post("/api/v1/targets", params={"query": "up"}, content=b"garbage")
    assert noisy.status_code == 200
    assert noisy.text == plain


def test_targets_stable_across_calls_and_registrations(client):
    first = client.get("/api/v1/targets").text
    client.post("/response", json={"memberType": "tidb", "queryType": "cpu_quota", "value": "1"})
    second = client.get("/api/v1/targets").text
    assert first == second
