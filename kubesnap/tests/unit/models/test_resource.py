"""Tests for the resource catalog and resource models."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
import yaml
from pydantic import ValidationError

from kubesnap.constants.enums import ResourceCategory
from kubesnap.models.core.resource import Resource
from kubesnap.models.core.resource_kind import (
    RESOURCE_KINDS,
    get_kind_spec,
    kinds_in_category,
    raw_key_for,
    supported_kinds,
)
from kubesnap.models.errors import KubeSnapError, UnsupportedKindError


class TestResourceKindCatalog:
    """Tests for the closed kind catalog."""

    def test_catalog_size(self) -> None:
        assert len(RESOURCE_KINDS) == 24
        assert len(set(supported_kinds())) == 24

    def test_raw_keys_are_unique(self) -> None:
        raw_keys = [spec.raw_key for spec in RESOURCE_KINDS]
        assert len(raw_keys) == len(set(raw_keys))

    @pytest.mark.parametrize(
        ("kind", "raw_key"),
        [
            ("pods", "podList"),
            ("statefulsets", "statefulSetList"),
            ("horizontalpodautoscalers", "horizontalPodAutoscalerList"),
            ("csinodes", "csiNodeList"),
            ("clusterrolebindings", "clusterRoleBindingList"),
        ],
    )
    def test_raw_key_for(self, kind: str, raw_key: str) -> None:
        assert raw_key_for(kind) == raw_key

    def test_unknown_kind_raises(self) -> None:
        with pytest.raises(UnsupportedKindError) as exc_info:
            get_kind_spec("widgets")
        assert exc_info.value.kind == "widgets"
        assert "widgets" in str(exc_info.value)

    def test_unsupported_kind_error_hierarchy(self) -> None:
        error = UnsupportedKindError("widgets")
        assert isinstance(error, KubeSnapError)
        assert isinstance(error, KeyError)

    def test_kinds_in_category(self) -> None:
        assert kinds_in_category(ResourceCategory.NETWORKING) == (
            "services",
            "ingresses",
            "networkpolicies",
        )

    def test_every_category_has_kinds(self) -> None:
        for category in ResourceCategory:
            assert kinds_in_category(category)

    def test_container_bearing_kinds(self) -> None:
        with_containers = {spec.kind for spec in RESOURCE_KINDS if spec.has_containers}
        assert with_containers == {
            "pods",
            "deployments",
            "statefulsets",
            "daemonsets",
            "jobs",
            "replicasets",
            "rollouts",
        }

    def test_cluster_scoped_kinds(self) -> None:
        assert get_kind_spec("nodes").namespaced is False
        assert get_kind_spec("pods").namespaced is True


class TestResourceFromRaw:
    """Tests for Resource.from_raw normalization."""

    def test_normalizes_metadata(self) -> None:
        resource = Resource.from_raw(
            "pods",
            {
                "metadata": {
                    "name": "api",
                    "namespace": "web",
                    "uid": "123",
                    "creationTimestamp": "2024-01-02T03:04:05Z",
                    "labels": {"app": "api", "replicas": 3},
                },
                "spec": {"containers": []},
                "status": {"phase": "Running"},
            },
        )
        assert resource.name == "api"
        assert resource.namespace == "web"
        assert resource.metadata.uid == "123"
        assert resource.metadata.creation_timestamp == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert resource.metadata.labels == {"app": "api", "replicas": "3"}
        assert resource.status == {"phase": "Running"}

    def test_malformed_sections_become_empty(self) -> None:
        resource = Resource.from_raw("services", {"metadata": "x", "spec": [1], "status": None})
        assert resource.name == ""
        assert resource.namespace is None
        assert resource.spec == {}
        assert resource.status == {}

    def test_bad_timestamp_is_ignored(self) -> None:
        resource = Resource.from_raw("pods", {"metadata": {"name": "a", "creationTimestamp": "yesterday"}})
        assert resource.metadata.creation_timestamp is None

    def test_yaml_decoded_timestamp(self) -> None:
        raw = yaml.safe_load("metadata:\n  name: a\n  creationTimestamp: 2024-01-01T00:00:00Z\n")
        resource = Resource.from_raw("pods", raw)
        assert resource.metadata.creation_timestamp == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_naive_timestamp_is_utc(self) -> None:
        resource = Resource.from_raw(
            "pods", {"metadata": {"creationTimestamp": datetime(2024, 1, 1, 6, 30)}}
        )
        assert resource.metadata.creation_timestamp == datetime(2024, 1, 1, 6, 30, tzinfo=timezone.utc)
        assert resource.metadata.creation_timestamp.tzinfo is not None

    def test_non_string_keys_become_strings(self) -> None:
        resource = Resource.from_raw("pods", {1: "top", "spec": {1: "x", "a": [{2: "y"}]}})
        assert resource.spec == {"1": "x", "a": [{"2": "y"}]}
        assert resource.raw["1"] == "top"

    def test_unknown_kind(self) -> None:
        with pytest.raises(UnsupportedKindError):
            Resource.from_raw("widgets", {})

    def test_raw_is_copied(self) -> None:
        raw = {"metadata": {"name": "a"}, "spec": {"nodeSelector": {"disk": "ssd"}}}
        resource = Resource.from_raw("pods", raw)
        raw["spec"]["nodeSelector"]["disk"] = "hdd"
        assert resource.spec["nodeSelector"]["disk"] == "ssd"
        assert resource.raw["spec"]["nodeSelector"]["disk"] == "ssd"

    def test_resource_is_frozen(self) -> None:
        resource = Resource.from_raw("pods", {"metadata": {"name": "a"}})
        with pytest.raises(ValidationError):
            resource.kind = "services"  # type: ignore[misc]


class TestResourcePodSpec:
    """Tests for pod spec, pod labels and containers."""

    def test_pod_spec_of_pod(self) -> None:
        resource = Resource.from_raw("pods", {"spec": {"nodeSelector": {"a": "b"}}})
        assert resource.pod_spec == {"nodeSelector": {"a": "b"}}

    def test_pod_spec_of_deployment(self) -> None:
        resource = Resource.from_raw(
            "deployments",
            {
                "spec": {
                    "template": {
                        "metadata": {"labels": {"app": "api"}},
                        "spec": {"containers": [{"name": "api"}], "initContainers": [{"name": "init"}, "bad"]},
                    }
                }
            },
        )
        assert resource.pod_labels == {"app": "api"}
        assert [c["name"] for c in resource.containers] == ["api", "init"]

    def test_pod_spec_of_kind_without_containers(self) -> None:
        resource = Resource.from_raw("services", {"spec": {"containers": [{"name": "x"}]}})
        assert resource.pod_spec == {}
        assert resource.containers == []
        assert resource.pod_labels == {}

    def test_missing_template(self) -> None:
        resource = Resource.from_raw("deployments", {"spec": {"replicas": 1}})
        assert resource.pod_spec == {}
        assert resource.pod_labels == {}
