"""
Freaky Fit API - Subscription Gate.

Decides whether a user may generate another AI plan and records the
consumption before the generation runs.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from beanie import PydanticObjectId

from settings import settings
from app.crud.subscriptions import SubscriptionRepository
from app.models.mongodb import PlanKind, SubscriptionDocument, SubscriptionPlan
from app.utils.errors import SubscriptionLimitError

logger = logging.getLogger(__name__)


def limit_message(kind: PlanKind) -> str:
    return (
        "Free subscription limit reached. "
        f"Please upgrade to premium to generate more {kind.value} plans."
    )


class SubscriptionGate:
    """
    Quota gate over the subscription store.

    1. Expired subscriptions are deactivated.
    2. The active subscription is found or a FREE one created (one upsert).
    3. PREMIUM passes without touching counters.
    4. FREE passes only if the conditional increment below the limit matched.
    """

    def __init__(
        self,
        repository: SubscriptionRepository,
        limit: Optional[int] = None,
        duration_days: Optional[int] = None,
    ):
        self.repository = repository
        self.limit = settings.FREE_PLAN_GENERATION_LIMIT if limit is None else limit
        self.duration_days = settings.FREE_PLAN_DURATION_DAYS if duration_days is None else duration_days

    async def consume(
        self,
        user_id: PydanticObjectId,
        kind: PlanKind,
        now: Optional[datetime] = None,
    ) -> SubscriptionDocument:
        """
        Consume one unit of ``kind`` quota.

        Returns:
            SubscriptionDocument: Subscription after the consumption.

        Raises:
            SubscriptionLimitError: FREE plan counter already at the limit.
        """
        now = now or datetime.now(timezone.utc)

        await self.repository.deactivate_expired(user_id, now)
        subscription = await self.repository.find_or_create_active(
            user_id, now, self.duration_days
        )

        if subscription.plan == SubscriptionPlan.PREMIUM:
            return subscription

        updated = await self.repository.increment_if_under(
            subscription.id, kind.counter_field, self.limit, now
        )
        if updated is None:
            logger.info(f"User {user_id} hit the free {kind.value} plan limit")
            raise SubscriptionLimitError(limit_message(kind))

        return updated
