"""Shared fixtures for kubesnap tests."""

from __future__ import annotations

import copy
from typing import Any

import pytest

_TWO_PODS_PAYLOAD: dict[str, Any] = {
    "data": {
        "podList": {
            "items": [
                {
                    "metadata": {"name": "a", "namespace": "ns1"},
                    "spec": {"nodeSelector": {"disk": "ssd"}},
                },
                {"metadata": {"name": "b", "namespace": "ns2"}, "spec": {}},
            ]
        }
    }
}


def _container(name: str, request: str | None = None, limit: str | None = None, **extra: Any) -> dict[str, Any]:
    resources: dict[str, Any] = {}
    if request is not None:
        resources["requests"] = {"memory": request, "cpu": "100m"}
    if limit is not None:
        resources["limits"] = {"memory": limit}
    container: dict[str, Any] = {"name": name, "image": f"{name}:latest", **extra}
    if resources:
        container["resources"] = resources
    return container


def _deployment(
    name: str,
    namespace: str,
    pod_spec: dict[str, Any],
    labels: dict[str, str] | None = None,
    status: dict[str, Any] | None = None,
) -> dict[str, Any]:
    labels = labels or {"app": name}
    return {
        "metadata": {"name": name, "namespace": namespace, "uid": f"uid-{name}", "labels": labels},
        "spec": {
            "replicas": 2,
            "selector": {"matchLabels": labels},
            "template": {"metadata": {"labels": labels}, "spec": pod_spec},
        },
        "status": status or {"replicas": 2, "availableReplicas": 2},
    }


_CLUSTER_PAYLOAD: dict[str, Any] = {
    "data": {
        "nodeList": {
            "items": [
                {"metadata": {"name": "node-1", "labels": {"zone": "a"}}},
                {"metadata": {"name": "node-2", "labels": {"zone": "b"}}},
            ]
        },
        "namespaceList": {
            "items": [
                {"metadata": {"name": "payments", "uid": "ns-uid-payments"}},
                {"metadata": {"name": "web", "uid": "ns-uid-web"}},
            ]
        },
        "eventList": [
            {
                "metadata": {"name": "api.1", "namespace": "web"},
                "reason": "BackOff",
                "message": "Back-off restarting failed container",
                "involvedObject": {"kind": "Pod", "name": "api-7d9f"},
            }
        ],
        "podList": {
            "apiVersion": "v1",
            "metadata": {"resourceVersion": "1"},
            "items": [
                {
                    "metadata": {"name": "api-7d9f", "namespace": "web", "labels": {"app": "api", "tier": "backend"}},
                    "spec": {
                        "nodeName": "node-1",
                        "containers": [_container("api", "128Mi", "512Mi", livenessProbe={"httpGet": {"path": "/"}})],
                    },
                    "status": {"phase": "Running"},
                },
                {
                    "metadata": {"name": "worker-x1", "namespace": "payments", "labels": {"app": "worker"}},
                    "spec": {
                        "containers": [_container("worker", "256Mi", "300Mi")],
                        "tolerations": [{"key": "dedicated", "operator": "Exists"}],
                    },
                    "status": {"phase": "Pending"},
                },
            ],
        },
        "deploymentList": {
            "response": {
                "body": {
                    "items": [
                        _deployment(
                            "api",
                            "web",
                            {
                                "containers": [
                                    _container(
                                        "api",
                                        "128Mi",
                                        "256Mi",
                                        readinessProbe={"tcpSocket": {"port": 80}},
                                    )
                                ],
                                "affinity": {
                                    "podAntiAffinity": {
                                        "requiredDuringSchedulingIgnoredDuringExecution": [
                                            {"topologyKey": "kubernetes.io/hostname"}
                                        ]
                                    }
                                },
                                "topologySpreadConstraints": [
                                    {"maxSkew": 1, "topologyKey": "zone"}
                                ],
                            },
                            labels={"app": "api", "tier": "backend"},
                        ),
                        _deployment(
                            "ledger",
                            "payments",
                            {
                                "containers": [_container("ledger", limit="1Gi")],
                                "nodeSelector": {"pool": "payments"},
                            },
                            status={"replicas": 3, "availableReplicas": 1},
                        ),
                        _deployment(
                            "cron-ui",
                            "web",
                            {"containers": [_container("ui", "64Mi", "64Mi")], "affinity": {}},
                            status={"replicas": 0},
                        ),
                    ]
                }
            }
        },
        "jobList": {
            "items": [
                {"metadata": {"name": "migrate", "namespace": "payments"}, "status": {"succeeded": 1}},
                {"metadata": {"name": "backfill", "namespace": "payments"}, "status": {"active": 1}},
            ]
        },
        "podDisruptionBudgetList": {
            "items": [
                {
                    "metadata": {"name": "api-pdb", "namespace": "web"},
                    "spec": {"minAvailable": 1, "selector": {"matchLabels": {"app": "api"}}},
                }
            ]
        },
        "serviceList": {
            "items": [
                {
                    "metadata": {"name": "api", "namespace": "web"},
                    "spec": {"topologyKeys": ["kubernetes.io/hostname", "*"]},
                }
            ]
        },
    }
}


@pytest.fixture
def two_pods_payload() -> dict[str, Any]:
    """Two pods, only the first pinned with a node selector."""
    return copy.deepcopy(_TWO_PODS_PAYLOAD)


@pytest.fixture
def cluster_payload() -> dict[str, Any]:
    """Small cluster with workloads, budgets, services and events."""
    return copy.deepcopy(_CLUSTER_PAYLOAD)
