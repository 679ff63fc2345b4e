# SPDX-License-Identifier: Apache-2.0
"""Event listeners owned by the tenancy context."""

from __future__ import annotations

import logging

from ..domain.events import TenantCreated

logger = logging.getLogger(__name__)


class TenantCreatedListener:
    """Log every newly registered tenant."""

    def __call__(self, event: TenantCreated) -> None:
        logger.info(
            f"Tenant created: id={event.tenant_id} name={event.name} "
            f"slug={event.slug} occurred_at={event.to_dict()['occurred_at']}"
        )
