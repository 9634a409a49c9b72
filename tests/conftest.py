"""Pytest configuration and shared fixtures."""

import logging
from typing import Any
from unittest.mock import MagicMock

import pytest
import structlog
from kubernetes.client.models import V1Node, V1NodeCondition, V1NodeStatus, V1ObjectMeta

from kubecheck.interfaces.kubernetes_provider import NodeCondition, NodeInfo, NodeListResult


@pytest.fixture(autouse=True)
def restore_logging():
    """Drop any logger configuration bound to streams of a previous test."""
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers = handlers
    logging.root.setLevel(level)
    structlog.reset_defaults()


def make_v1_node(name: str, ready: str | None = "True", with_ready: bool = True) -> V1Node:
    """Build a V1Node with an optional Ready condition."""
    conditions = [V1NodeCondition(type="MemoryPressure", status="False")]
    if with_ready:
        conditions.append(V1NodeCondition(type="Ready", status=ready))
    return V1Node(metadata=V1ObjectMeta(name=name), status=V1NodeStatus(conditions=conditions))


def make_node_info(name: str, ready: str | None = "True", with_ready: bool = True) -> NodeInfo:
    """Build a NodeInfo with an optional Ready condition."""
    conditions = [NodeCondition(type="DiskPressure", status="False")]
    if with_ready:
        conditions.append(NodeCondition(type="Ready", status=ready))
    return NodeInfo(name=name, conditions=conditions)


@pytest.fixture
def v1_node_factory():
    """Provide the V1Node builder."""
    return make_v1_node


@pytest.fixture
def node_info_factory():
    """Provide the NodeInfo builder."""
    return make_node_info


@pytest.fixture
def mock_kubernetes_client() -> MagicMock:
    """Mock Kubernetes client for testing."""
    client = MagicMock()
    return client


@pytest.fixture
def mock_k8s_provider() -> MagicMock:
    """Mock Kubernetes provider returning two ready nodes."""
    provider = MagicMock()
    provider.list_nodes.return_value = NodeListResult.success(
        [make_node_info("node-1"), make_node_info("node-2")]
    )
    return provider


# ==============================================================================
# Test Data Fixtures
# ==============================================================================


@pytest.fixture
def sample_kubernetes_nodes() -> list[V1Node]:
    """Sample Kubernetes nodes response."""
    return [make_v1_node("node-1"), make_v1_node("node-2")]


@pytest.fixture
def sample_config_data() -> dict[str, Any]:
    """Sample configuration file content."""
    return {
        "connection": {
            "api_server": "https://k8s.example.com:6443",
            "token": "s3cr3t",
            "ca_file": "/etc/kubecheck/ca.crt",
        },
        "check": {"minimal": 3, "node_filter": "node-role.kubernetes.io/worker"},
        "logging": {"level": "INFO", "format": "json"},
    }


# ==============================================================================
# Pytest Markers
# ==============================================================================


def pytest_configure(config: Any) -> None:
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
