from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

import structlog

from .campaign import Campaign, CampaignOutcome
from .cart import Cart, ShippingRate
from .errors import CampaignError

logger = structlog.get_logger(__name__)


@dataclass
class CheckoutResult:
    rates: List[ShippingRate]
    outcomes: List[CampaignOutcome] = field(default_factory=list)


class CampaignRunner:
    """
    Runs a fixed, ordered list of campaigns against one cart + rate list.

    - every campaign sees the side effects of the ones before it
    - configuration errors are logged and re-raised (no partial "OK" result)
    """

    def __init__(self, campaigns: Sequence[Campaign]):
        self.campaigns = list(campaigns)

    def run(self, cart: Cart, rates: Sequence[ShippingRate]) -> CheckoutResult:
        rates = list(rates)
        result = CheckoutResult(rates=rates)

        for campaign in self.campaigns:
            try:
                outcome = campaign.run(rates, cart)
            except CampaignError as e:
                logger.error(
                    "campaign_failed",
                    campaign_id=campaign.campaign_id,
                    exc=f"{type(e).__name__}: {e}",
                )
                raise
            result.outcomes.append(outcome)

        logger.info(
            "checkout_done",
            campaigns=len(self.campaigns),
            discounted=sum(1 for r in rates if r.discounted),
        )
        return result
