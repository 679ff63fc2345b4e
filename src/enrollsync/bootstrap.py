# SPDX-License-Identifier: Apache-2.0
"""Bootstrap module for EnrollSync initialization.

Builds the repositories and handlers of the three bounded contexts around
one event bus and subscribes the listeners that couple them. Subscriptions
are resolved here, once, at startup; nothing registers itself at import time.
"""

from __future__ import annotations

__all__ = [
    "Application",
    "bootstrap",
    "wire_application",
    "is_bootstrapped",
    "reset_bootstrap_state",
    "get_event_bus",
]

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from enrollsync.config import EnrollSyncConfig
from enrollsync.domain.events import IEventBus
from enrollsync.learning.application.services import (
    CreateCourseHandler as CreateLearningCourseHandler,
    EnrollStudentHandler,
    RegisterStudentHandler,
)
from enrollsync.learning.domain.events import StudentEnrolled
from enrollsync.learning.domain.repositories import ILearningCourseRepository, IStudentRepository
from enrollsync.records.application.services import (
    ChangeEnrollmentStatusHandler,
    CreateCourseHandler as CreateAdminCourseHandler,
    EnrollStudentHandler as RecordEnrollmentHandler,
    GetCourseStatisticsHandler,
)
from enrollsync.records.domain.repositories import IAdminCourseRepository
from enrollsync.records.infrastructure.listeners import StudentEnrolledListener
from enrollsync.tenancy.application.services import (
    ChangeTenantStatusHandler,
    CreateTenantHandler,
    GetTenantHandler,
    ListTenantsHandler,
    UpdateTenantInfoHandler,
)
from enrollsync.tenancy.domain.events import TenantCreated
from enrollsync.tenancy.domain.repositories import ITenantRepository
from enrollsync.tenancy.infrastructure.listeners import TenantCreatedListener

# Global state so bootstrap only runs once per process
_APPLICATION: Optional["Application"] = None
_BOOTSTRAP_LOCK = threading.Lock()

# Global event bus instance
_EVENT_BUS: Optional[IEventBus] = None

logger = logging.getLogger(__name__)


@dataclass
class Application:
    """Handlers and repositories of a fully wired EnrollSync process."""

    config: EnrollSyncConfig
    event_bus: IEventBus

    tenant_repository: ITenantRepository
    student_repository: IStudentRepository
    learning_course_repository: ILearningCourseRepository
    admin_course_repository: IAdminCourseRepository

    create_tenant: CreateTenantHandler
    change_tenant_status: ChangeTenantStatusHandler
    update_tenant_info: UpdateTenantInfoHandler
    get_tenant: GetTenantHandler
    list_tenants: ListTenantsHandler

    register_student: RegisterStudentHandler
    create_learning_course: CreateLearningCourseHandler
    enroll_student: EnrollStudentHandler

    create_admin_course: CreateAdminCourseHandler
    record_enrollment: RecordEnrollmentHandler
    change_enrollment_status: ChangeEnrollmentStatusHandler
    get_course_statistics: GetCourseStatisticsHandler


def wire_application(
    config: EnrollSyncConfig,
    event_bus: IEventBus,
    tenant_repository: ITenantRepository,
    student_repository: IStudentRepository,
    learning_course_repository: ILearningCourseRepository,
    admin_course_repository: IAdminCourseRepository,
) -> Application:
    """Build every handler around ``event_bus`` and subscribe the listeners.

    Metric handlers are subscribed first so they observe an event even
    when a later subscriber fails.
    """
    record_enrollment = RecordEnrollmentHandler(admin_course_repository)

    if config.metrics_enabled:
        from enrollsync.infrastructure.monitoring.event_handlers import register

        register(event_bus)

    event_bus.subscribe(TenantCreated, TenantCreatedListener())
    event_bus.subscribe(StudentEnrolled, StudentEnrolledListener(record_enrollment))
    logger.debug("Cross-context listeners subscribed")

    return Application(
        config=config,
        event_bus=event_bus,
        tenant_repository=tenant_repository,
        student_repository=student_repository,
        learning_course_repository=learning_course_repository,
        admin_course_repository=admin_course_repository,
        create_tenant=CreateTenantHandler(tenant_repository, event_bus),
        change_tenant_status=ChangeTenantStatusHandler(tenant_repository, event_bus),
        update_tenant_info=UpdateTenantInfoHandler(tenant_repository, event_bus),
        get_tenant=GetTenantHandler(tenant_repository),
        list_tenants=ListTenantsHandler(tenant_repository),
        register_student=RegisterStudentHandler(student_repository),
        create_learning_course=CreateLearningCourseHandler(learning_course_repository),
        enroll_student=EnrollStudentHandler(
            student_repository, learning_course_repository, event_bus
        ),
        create_admin_course=CreateAdminCourseHandler(admin_course_repository),
        record_enrollment=record_enrollment,
        change_enrollment_status=ChangeEnrollmentStatusHandler(admin_course_repository),
        get_course_statistics=GetCourseStatisticsHandler(admin_course_repository),
    )


def bootstrap(config: Optional[EnrollSyncConfig] = None) -> Application:
    """Initialize EnrollSync against the configured SQLite database.

    This function is idempotent and safe to call multiple times. It will only
    perform initialization once per process; later calls return the same
    application regardless of ``config``.
    """
    global _APPLICATION

    with _BOOTSTRAP_LOCK:
        if _APPLICATION is not None:
            logger.debug("Bootstrap already completed, skipping")
            return _APPLICATION

        config = config or EnrollSyncConfig()
        logger.info(f"Starting EnrollSync bootstrap (database: {config.database_path})...")

        from enrollsync.learning.infrastructure.repositories import (
            SqliteLearningCourseRepository,
            SqliteStudentRepository,
        )
        from enrollsync.records.infrastructure.repositories import SqliteAdminCourseRepository
        from enrollsync.tenancy.infrastructure.repositories import SqliteTenantRepository

        try:
            _APPLICATION = wire_application(
                config=config,
                event_bus=get_event_bus(),
                tenant_repository=SqliteTenantRepository(config.database_path),
                student_repository=SqliteStudentRepository(config.database_path),
                learning_course_repository=SqliteLearningCourseRepository(config.database_path),
                admin_course_repository=SqliteAdminCourseRepository(config.database_path),
            )
        except Exception as e:
            logger.error(f"Bootstrap failed: {e}")
            raise RuntimeError(f"EnrollSync bootstrap failed: {e}") from e

        logger.info("EnrollSync bootstrap completed successfully")
        return _APPLICATION


def is_bootstrapped() -> bool:
    """Check if bootstrap has been completed."""
    return _APPLICATION is not None


def reset_bootstrap_state() -> None:
    """Reset bootstrap state and drop the global event bus.

    This should only be used in tests to reset the global state.
    """
    global _APPLICATION, _EVENT_BUS
    with _BOOTSTRAP_LOCK:
        _APPLICATION = None
        _EVENT_BUS = None
    logger.debug("Bootstrap state reset for testing")


def get_event_bus() -> IEventBus:
    """Get the global event bus instance.

    The event bus is created lazily on first access.
    """
    global _EVENT_BUS
    if _EVENT_BUS is None:
        from enrollsync.infrastructure.messaging.in_memory_bus import InMemoryEventBus

        _EVENT_BUS = InMemoryEventBus()
    return _EVENT_BUS
