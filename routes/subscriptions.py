"""
Subscription endpoints.

Prices are returned as two-decimal strings.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from routes.deps import get_service
from routes.schemas import (
    QuoteRequest,
    QuoteResponse,
    SubscriptionCreateRequest,
    SubscriptionResponse,
)
from services.gym_service import GymService

router = APIRouter(prefix="/subscriptions", tags=["subscriptions"])
_LOG = logging.getLogger(__name__)


@router.get("", response_model=List[SubscriptionResponse])
def list_subscriptions(service: GymService = Depends(get_service)):
    return [SubscriptionResponse(**s.to_dict()) for s in service.ledger.list()]


@router.post("", response_model=SubscriptionResponse, status_code=201)
def create_subscription(request: SubscriptionCreateRequest, service: GymService = Depends(get_service)):
    _LOG.debug("POST /subscriptions class=%s months=%d", request.class_name, request.months)
    subscription = service.subscribe(
        request.subscriber_name, request.class_name, request.months, request.is_premium
    )
    return SubscriptionResponse(**subscription.to_dict())


@router.post("/quote", response_model=QuoteResponse)
def quote_subscription(request: QuoteRequest, service: GymService = Depends(get_service)):
    """Price a subscription without storing it."""
    breakdown = service.quote(request.class_name, request.months, request.is_premium)
    return QuoteResponse(**breakdown.to_dict())
