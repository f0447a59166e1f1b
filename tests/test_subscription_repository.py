"""
Tests for the store operations behind the subscription gate.

The pymongo collection is replaced with a recording stand-in, so these
check the exact filters and update documents sent to MongoDB.
"""
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from beanie import PydanticObjectId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from app.crud.subscriptions import SubscriptionRepository
from app.models.mongodb import PlanKind, SubscriptionDocument, SubscriptionPlan
from app.services.subscription_gate import SubscriptionGate
from app.utils.errors import SubscriptionLimitError

NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


class RecordingCollection:
    """Async collection that records calls and replays queued results."""

    def __init__(self, results=None):
        self.results = list(results or [])
        self.calls = []

    def _next(self):
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    async def find_one_and_update(self, filter, update, **kwargs):
        self.calls.append(("find_one_and_update", filter, update, kwargs))
        return self._next()

    async def update_many(self, filter, update, **kwargs):
        self.calls.append(("update_many", filter, update, kwargs))
        return SimpleNamespace(modified_count=self._next())


def stored(user_id, plan="FREE", **fields):
    values = {
        "_id": PydanticObjectId(),
        "user_id": user_id,
        "plan": plan,
        "active": True,
        "start_date": NOW,
        "end_date": NOW + timedelta(days=365),
        "workout_plans_generated": 0,
        "meal_plans_generated": 0,
        "created_at": NOW,
        "updated_at": NOW,
    }
    values.update(fields)
    return values


@pytest.fixture
def collection(monkeypatch):
    recorder = RecordingCollection()
    monkeypatch.setattr(
        SubscriptionDocument, "get_pymongo_collection", classmethod(lambda cls: recorder)
    )
    return recorder


@pytest.mark.asyncio
async def test_find_or_create_is_single_upsert(collection):
    user_id = PydanticObjectId()
    collection.results = [stored(user_id)]

    subscription = await SubscriptionRepository().find_or_create_active(user_id, NOW, 365)

    assert subscription.plan == SubscriptionPlan.FREE
    assert subscription.user_id == user_id
    assert len(collection.calls) == 1
    name, query, update, kwargs = collection.calls[0]
    assert name == "find_one_and_update"
    assert query == {"user_id": user_id, "active": True, "end_date": {"$gte": NOW}}
    assert update == {
        "$setOnInsert": {
            "plan": "FREE",
            "start_date": NOW,
            "end_date": NOW + timedelta(days=365),
            "workout_plans_generated": 0,
            "meal_plans_generated": 0,
            "created_at": NOW,
            "updated_at": NOW,
        }
    }
    assert kwargs == {"upsert": True, "return_document": ReturnDocument.AFTER}


@pytest.mark.asyncio
async def test_duplicate_key_is_retried_once(collection):
    user_id = PydanticObjectId()
    winner = stored(user_id, workout_plans_generated=1)
    collection.results = [DuplicateKeyError("one_active_subscription_per_user"), winner]

    subscription = await SubscriptionRepository().find_or_create_active(user_id, NOW, 365)

    assert subscription.id == winner["_id"]
    assert subscription.workout_plans_generated == 1
    assert len(collection.calls) == 2
    assert collection.calls[0][1:] == collection.calls[1][1:]


@pytest.mark.asyncio
async def test_second_duplicate_key_propagates(collection):
    user_id = PydanticObjectId()
    collection.results = [DuplicateKeyError("first"), DuplicateKeyError("second")]

    with pytest.raises(DuplicateKeyError):
        await SubscriptionRepository().find_or_create_active(user_id, NOW, 365)

    assert len(collection.calls) == 2


@pytest.mark.asyncio
async def test_increment_is_conditional_on_free_plan_and_limit(collection):
    user_id = PydanticObjectId()
    record = stored(user_id, workout_plans_generated=2)
    collection.results = [record]

    subscription = await SubscriptionRepository().increment_if_under(
        record["_id"], "workout_plans_generated", 2, NOW
    )

    assert subscription.workout_plans_generated == 2
    name, query, update, kwargs = collection.calls[0]
    assert name == "find_one_and_update"
    assert query == {
        "_id": record["_id"],
        "plan": "FREE",
        "workout_plans_generated": {"$lt": 2},
    }
    assert update == {"$inc": {"workout_plans_generated": 1}, "$set": {"updated_at": NOW}}
    assert kwargs == {"return_document": ReturnDocument.AFTER}


@pytest.mark.asyncio
async def test_increment_without_match_returns_none(collection):
    collection.results = [None]

    result = await SubscriptionRepository().increment_if_under(
        PydanticObjectId(), "meal_plans_generated", 2, NOW
    )

    assert result is None


@pytest.mark.asyncio
async def test_deactivate_expired_filter(collection):
    user_id = PydanticObjectId()
    collection.results = [3]

    modified = await SubscriptionRepository().deactivate_expired(user_id, NOW)

    assert modified == 3
    assert collection.calls == [(
        "update_many",
        {"user_id": user_id, "active": True, "end_date": {"$lt": NOW}},
        {"$set": {"active": False, "updated_at": NOW}},
        {},
    )]


@pytest.mark.asyncio
async def test_set_plan_updates_active_record(collection):
    user_id = PydanticObjectId()
    record = stored(user_id)
    collection.results = [0, record, dict(record, plan="PREMIUM")]

    subscription = await SubscriptionRepository().set_plan(
        user_id, SubscriptionPlan.PREMIUM, NOW, 365
    )

    assert subscription.plan == SubscriptionPlan.PREMIUM
    assert [call[0] for call in collection.calls] == [
        "update_many", "find_one_and_update", "find_one_and_update"
    ]
    _, query, update, _ = collection.calls[2]
    assert query == {"_id": record["_id"]}
    assert update == {"$set": {"plan": "PREMIUM", "updated_at": NOW}}


@pytest.mark.asyncio
async def test_gate_over_store_blocks_when_increment_misses(collection):
    user_id = PydanticObjectId()
    collection.results = [0, stored(user_id, meal_plans_generated=2), None]

    with pytest.raises(SubscriptionLimitError):
        await SubscriptionGate(SubscriptionRepository(), limit=2, duration_days=365).consume(
            user_id, PlanKind.MEAL, now=NOW
        )

    _, query, update, _ = collection.calls[2]
    assert query["meal_plans_generated"] == {"$lt": 2}
    assert update["$inc"] == {"meal_plans_generated": 1}


@pytest.mark.asyncio
async def test_gate_over_store_skips_increment_for_premium(collection):
    user_id = PydanticObjectId()
    collection.results = [0, stored(user_id, plan="PREMIUM")]

    subscription = await SubscriptionGate(SubscriptionRepository(), limit=2).consume(
        user_id, PlanKind.WORKOUT, now=NOW
    )

    assert subscription.plan == SubscriptionPlan.PREMIUM
    assert len(collection.calls) == 2
