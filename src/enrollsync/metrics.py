# SPDX-License-Identifier: Apache-2.0
"""Prometheus metrics for EnrollSync."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

# Tenancy
TENANTS_CREATED = Counter("es_tenants_created_total", "Tenants created")
TENANT_STATUS_CHANGES = Counter(
    "es_tenant_status_changes_total", "Tenant lifecycle transitions", ["action"]
)

# Enrollment saga
LEARNING_ACCESS_GRANTS = Counter(
    "es_learning_access_grants_total", "Learning access grants published"
)
ENROLLMENT_RECORDS = Counter(
    "es_enrollment_records_total", "Administrative enrollment records created"
)
PLACEHOLDER_COURSES = Counter(
    "es_placeholder_courses_total", "Administrative courses created as placeholders"
)
SAGA_FAILURES = Counter(
    "es_enrollment_saga_failures_total",
    "Enrollment saga runs where the administrative step failed after learning access was persisted",
    ["error"],
)
ENROLLMENT_TRANSITIONS = Counter(
    "es_enrollment_transitions_total", "Enrollment status transitions", ["action"]
)

# Persistence
REPO_QUERIES = Counter(
    "es_repo_queries_total", "Total number of repository queries", ["operation", "backend"]
)
REPO_LATENCY = Histogram(
    "es_repo_latency_seconds", "Repository operation latency", ["operation", "backend"]
)

__all__ = [
    "TENANTS_CREATED",
    "TENANT_STATUS_CHANGES",
    "LEARNING_ACCESS_GRANTS",
    "ENROLLMENT_RECORDS",
    "PLACEHOLDER_COURSES",
    "SAGA_FAILURES",
    "ENROLLMENT_TRANSITIONS",
    "REPO_QUERIES",
    "REPO_LATENCY",
]
