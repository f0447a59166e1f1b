"""
Freaky Fit API - Subscription Routes.

Read-only view of the caller's plan and remaining free generations.
"""

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends

from settings import settings
from app.crud import SubscriptionRepository
from app.dependencies import get_current_user, get_subscription_repository
from app.models.mongodb import SubscriptionPlan, UserDocument
from app.schemas.subscription import SubscriptionStatusResponse


router = APIRouter()


def _remaining(used: int, plan: SubscriptionPlan) -> Optional[int]:
    if plan == SubscriptionPlan.PREMIUM:
        return None
    return max(settings.FREE_PLAN_GENERATION_LIMIT - used, 0)


@router.get("/status")
async def get_subscription_status(
    user: UserDocument = Depends(get_current_user),
    subscriptions: SubscriptionRepository = Depends(get_subscription_repository),
) -> dict:
    """
    Get the caller's subscription status.

    A user without a subscription is reported as FREE with the full quota;
    the record itself is only created on the first generation.
    """
    subscription = await subscriptions.get_active(user.id, datetime.now(timezone.utc))

    if subscription is None:
        response = SubscriptionStatusResponse(
            plan=SubscriptionPlan.FREE,
            active=False,
            remaining_workout_plans=settings.FREE_PLAN_GENERATION_LIMIT,
            remaining_meal_plans=settings.FREE_PLAN_GENERATION_LIMIT,
        )
    else:
        plan = SubscriptionPlan(subscription.plan)
        response = SubscriptionStatusResponse(
            plan=plan,
            active=subscription.active,
            start_date=subscription.start_date,
            end_date=subscription.end_date,
            workout_plans_generated=subscription.workout_plans_generated,
            meal_plans_generated=subscription.meal_plans_generated,
            remaining_workout_plans=_remaining(subscription.workout_plans_generated, plan),
            remaining_meal_plans=_remaining(subscription.meal_plans_generated, plan),
        )

    return response.model_dump(mode="json", by_alias=True)
