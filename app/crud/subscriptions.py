"""
SubscriptionRepository for database operations on SubscriptionDocument.

The quota path uses raw collection operations so that find-or-create and
the conditional counter increment are each a single atomic store call.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from beanie import PydanticObjectId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from app.models.mongodb import SubscriptionDocument, SubscriptionPlan

logger = logging.getLogger(__name__)


class SubscriptionRepository:
    """Repository class for subscription database operations."""

    @staticmethod
    def _collection():
        return SubscriptionDocument.get_pymongo_collection()

    async def get_active(
        self,
        user_id: PydanticObjectId,
        now: datetime
    ) -> Optional[SubscriptionDocument]:
        """Active, non-expired subscription for the user."""
        return await SubscriptionDocument.find_one(
            SubscriptionDocument.user_id == user_id,
            SubscriptionDocument.active == True,  # noqa: E712
            SubscriptionDocument.end_date >= now,
        )

    async def _upsert(self, query: dict, update: dict) -> dict:
        return await self._collection().find_one_and_update(
            query,
            update,
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )

    async def deactivate_expired(self, user_id: PydanticObjectId, now: datetime) -> int:
        """Flip ``active`` off on subscriptions whose end date has passed."""
        result = await self._collection().update_many(
            {"user_id": user_id, "active": True, "end_date": {"$lt": now}},
            {"$set": {"active": False, "updated_at": now}},
        )
        return result.modified_count

    async def find_or_create_active(
        self,
        user_id: PydanticObjectId,
        now: datetime,
        duration_days: int,
    ) -> SubscriptionDocument:
        """
        Return the active subscription, inserting a FREE one if none exists.

        Upsert with ``$setOnInsert``: an existing record is left untouched.
        A concurrent insert for the same user loses on the partial unique
        index and is retried once, which then matches the winner's record.
        """
        query = {"user_id": user_id, "active": True, "end_date": {"$gte": now}}
        on_insert = {
            "plan": SubscriptionPlan.FREE.value,
            "start_date": now,
            "end_date": now + timedelta(days=duration_days),
            "workout_plans_generated": 0,
            "meal_plans_generated": 0,
            "created_at": now,
            "updated_at": now,
        }
        try:
            raw = await self._upsert(query, {"$setOnInsert": on_insert})
        except DuplicateKeyError:
            logger.info(f"Concurrent free subscription insert for user {user_id}, retrying")
            raw = await self._upsert(query, {"$setOnInsert": on_insert})
        return SubscriptionDocument.model_validate(raw)

    async def increment_if_under(
        self,
        subscription_id: PydanticObjectId,
        counter_field: str,
        limit: int,
        now: datetime,
    ) -> Optional[SubscriptionDocument]:
        """
        Add one to ``counter_field`` only while it is below ``limit`` on a FREE plan.

        Returns the updated subscription, or None when the quota is used up.
        """
        raw = await self._collection().find_one_and_update(
            {
                "_id": subscription_id,
                "plan": SubscriptionPlan.FREE.value,
                counter_field: {"$lt": limit},
            },
            {"$inc": {counter_field: 1}, "$set": {"updated_at": now}},
            return_document=ReturnDocument.AFTER,
        )
        if raw is None:
            return None
        return SubscriptionDocument.model_validate(raw)

    async def set_plan(
        self,
        user_id: PydanticObjectId,
        plan: SubscriptionPlan,
        now: datetime,
        duration_days: int,
    ) -> SubscriptionDocument:
        """Change the plan of the active subscription, creating one if needed."""
        await self.deactivate_expired(user_id, now)
        subscription = await self.find_or_create_active(user_id, now, duration_days)
        raw = await self._collection().find_one_and_update(
            {"_id": subscription.id},
            {"$set": {"plan": plan.value, "updated_at": now}},
            return_document=ReturnDocument.AFTER,
        )
        return SubscriptionDocument.model_validate(raw)
