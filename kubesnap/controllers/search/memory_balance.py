"""Memory request/limit skew heuristic."""

from __future__ import annotations

import logging
from typing import Any

from kubesnap.constants.defaults import MEMORY_IMBALANCE_RATIO_DEFAULT
from kubesnap.models.core.resource import Resource
from kubesnap.utils.resource_parser import container_memory

logger = logging.getLogger(__name__)


def container_has_memory_imbalance(
    container: Any,
    ratio_threshold: float = MEMORY_IMBALANCE_RATIO_DEFAULT,
) -> bool:
    """Return True when a container's memory limit dwarfs its request.

    Flagged when the request is positive and ``limit / request`` reaches
    ``ratio_threshold``, or when a limit is set without any request.
    """
    limit = container_memory(container, "limits")
    if limit is None:
        return False
    request = container_memory(container, "requests")
    if request is None:
        return True
    if request <= 0:
        return False
    return limit / request >= ratio_threshold


def has_memory_imbalance(
    resource: Resource,
    ratio_threshold: float = MEMORY_IMBALANCE_RATIO_DEFAULT,
) -> bool:
    """Return True when any container of ``resource`` is memory-imbalanced."""
    for container in resource.containers:
        if container_has_memory_imbalance(container, ratio_threshold):
            logger.debug(
                "Memory imbalance in %s %s/%s container %s",
                resource.kind,
                resource.namespace,
                resource.name,
                container.get("name"),
            )
            return True
    return False


__all__ = ["container_has_memory_imbalance", "has_memory_imbalance"]
