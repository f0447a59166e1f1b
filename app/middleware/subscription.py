"""
Freaky Fit API - Subscription Gate Dependencies.

Route dependencies that consume one unit of plan-generation quota before
the handler runs.
"""

import logging
from typing import Callable

from fastapi import Depends, Request

from app.crud import SubscriptionRepository, UserRepository
from app.dependencies import get_subscription_repository, get_user_repository
from app.middleware.auth import jwt_bearer
from app.models.mongodb import PlanKind, SubscriptionDocument
from app.services.subscription_gate import SubscriptionGate
from app.utils.errors import AuthenticationError, SubscriptionCheckError, SubscriptionLimitError

logger = logging.getLogger(__name__)


def subscription_gate_for(kind: PlanKind) -> Callable:
    """
    Build the gate dependency for one kind of plan.

    The caller is resolved here rather than through ``get_current_user`` so
    that every rejection, unauthenticated ones included, uses the
    ``{success, message}`` envelope.
    """

    async def check_subscription(
        request: Request,
        users: UserRepository = Depends(get_user_repository),
        subscriptions: SubscriptionRepository = Depends(get_subscription_repository),
    ) -> SubscriptionDocument:
        try:
            user = await users.get_by_id(await jwt_bearer(request))
        except AuthenticationError as e:
            raise SubscriptionCheckError(
                "Not authorized, user not found", status_code=401, detail=e.message
            )
        if user is None:
            raise SubscriptionCheckError("Not authorized, user not found", status_code=401)

        try:
            return await SubscriptionGate(subscriptions).consume(user.id, kind)
        except SubscriptionLimitError:
            raise
        except Exception as e:
            logger.error(f"Subscription middleware error: {e}")
            raise SubscriptionCheckError(detail=str(e))

    return check_subscription


can_generate_workout_plan = subscription_gate_for(PlanKind.WORKOUT)
can_generate_meal_plan = subscription_gate_for(PlanKind.MEAL)
