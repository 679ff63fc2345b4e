# SPDX-License-Identifier: Apache-2.0
"""Event handlers for automatic metrics collection.

This module subscribes to domain events and records Prometheus metrics.
Handlers are registered ahead of the cross-context listeners so a grant
that was persisted is counted even when a later subscriber fails.
"""

from __future__ import annotations

import logging

from enrollsync.domain.events import IEventBus
from enrollsync.learning.domain.events import StudentEnrolled
from enrollsync.metrics import LEARNING_ACCESS_GRANTS, TENANTS_CREATED
from enrollsync.tenancy.domain.events import TenantCreated

logger = logging.getLogger(__name__)


def _handle_tenant_created(event: TenantCreated) -> None:
    TENANTS_CREATED.inc()
    logger.debug(f"Recorded metrics for tenant creation: {event.tenant_id}")


def _handle_student_enrolled(event: StudentEnrolled) -> None:
    LEARNING_ACCESS_GRANTS.inc()
    logger.debug(f"Recorded metrics for learning access grant: {event.course_id}/{event.student_id}")


def register(event_bus: IEventBus) -> None:
    """Subscribe the metrics handlers to ``event_bus``."""
    event_bus.subscribe(TenantCreated, _handle_tenant_created)
    event_bus.subscribe(StudentEnrolled, _handle_student_enrolled)
    logger.debug("Monitoring event handlers registered")
