from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

import structlog

from ..qualifiers.cart_amount import CartAmountQualifier
from ..selectors.composite import CompositeCondition
from .cart import Cart, CartUndo, ShippingRate
from .conditions import Aggregation, Condition, ConditionScope
from .errors import InvalidConfiguration

logger = structlog.get_logger(__name__)

# Decisions (avoid string typos)
DECISION_QUALIFIED = "QUALIFIED"
DECISION_NOT_QUALIFIED = "NOT_QUALIFIED"
DECISION_REVERTED = "REVERTED"


@dataclass(frozen=True)
class CampaignOutcome:
    """
    Result of one campaign run.
    - decision: QUALIFIED / NOT_QUALIFIED / REVERTED
    - discounted_rates: rate names the discount was applied to (in rate order)
    - meta: explainability payload
    """

    campaign_id: str
    decision: str
    discounted_rates: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)


class Campaign:
    """
    Qualification + post-check/revert. Subclasses implement run().

    condition: "all" | "any" over the flattened qualifier list.
    line_item_match: "all" | "any", how item/rate-scoped conditions are folded
        over cart.line_items. Required as soon as one such condition is present.
    line_item_selector: handed to every cart-level qualifier as `selector`
        (CartAmountQualifier item / diff_item sums use it).
    """

    def __init__(
        self,
        condition: Union[Aggregation, str],
        *qualifiers: Optional[Condition],
        line_item_match: Union[Aggregation, str, None] = None,
        line_item_selector: Optional[Condition] = None,
        campaign_id: Optional[str] = None,
        title: Optional[str] = None,
    ):
        self.aggregation = Aggregation.parse(condition)
        self.line_item_match = (
            Aggregation.parse(line_item_match) if line_item_match is not None else None
        )
        self.line_item_selector = line_item_selector
        self.campaign_id = str(campaign_id or type(self).__name__)
        self.title = str(title or self.campaign_id)

        self.qualifiers: List[Condition] = []
        self.post_amount_qualifier: Optional[CartAmountQualifier] = None

        for qualifier in qualifiers:
            if qualifier is None:
                continue
            if self.post_amount_qualifier is None:
                self.post_amount_qualifier = self._find_post_amount(qualifier)
            self._flatten(qualifier)

    # -----------------
    # construction
    # -----------------

    @staticmethod
    def _find_post_amount(condition: Condition) -> Optional[CartAmountQualifier]:
        for node in condition.walk():
            if isinstance(node, CartAmountQualifier):
                return node
        return None

    def _flatten(self, condition: Condition) -> None:
        # AND-of-qualifiers under ALL has the same meaning dissolved; OR, AND
        # under ANY and selector composites stay one entry.
        dissolve = (
            isinstance(condition, CompositeCondition)
            and condition.scope is ConditionScope.CART
            and condition.aggregation is Aggregation.ALL
            and self.aggregation is Aggregation.ALL
        )
        if not dissolve:
            self.qualifiers.append(condition)
            return
        for child in condition.children:
            self._flatten(child)

    # -----------------
    # evaluation
    # -----------------

    def _entry_matches(self, entry: Condition, cart: Cart) -> bool:
        if entry.scope is ConditionScope.CANDIDATE:
            if self.line_item_match is None:
                raise InvalidConfiguration(
                    "MISSING_LINE_ITEM_MATCH_TYPE",
                    "Missing line item match type",
                    {"campaign_id": self.campaign_id},
                )
            return self.line_item_match.evaluate(cart.line_items, entry.matches)

        return entry.matches(cart, self.line_item_selector)

    def qualifies(self, cart: Cart) -> bool:
        if not self.qualifiers:
            return True
        return self.aggregation.evaluate(
            self.qualifiers, lambda entry: self._entry_matches(entry, cart)
        )

    def checkpoint(self, cart: Cart) -> Optional[CartUndo]:
        if self.post_amount_qualifier is None:
            return None
        return cart.checkpoint()

    # -----------------
    # hooks
    # -----------------

    def before_run(self, cart: Cart) -> None:
        return None

    def after_run(self, cart: Cart, undo: Optional[CartUndo]) -> bool:
        """
        Re-check the post-amount qualifier against the (possibly changed) cart.
        On failure the line items go back to the checkpoint. Rate prices are
        left as they are: only the cart is reverted.

        The line_item_selector is passed along so diff_item sums the same items
        as during qualification (checkout scripts re-checked without a selector).

        Returns True when a revert happened.
        """
        if undo is None or self.post_amount_qualifier is None:
            return False
        if self.post_amount_qualifier.matches(cart, self.line_item_selector):
            return False

        cart.revert(undo)
        logger.info(
            "campaign_reverted",
            campaign_id=self.campaign_id,
            line_items=len(undo.line_items),
        )
        return True

    def run(self, rates: Sequence[ShippingRate], cart: Cart) -> CampaignOutcome:
        raise NotImplementedError


class ShippingDiscount(Campaign):
    """
    Applies `discount` to every shipping rate accepted by `rate_selector`
    (all rates when there is no selector), if the campaign qualifies.

    Argument order follows the campaign definitions used in checkout scripts:
      ShippingDiscount(
          "all",
          customer_qualifier,
          cart_qualifier,
          "any",               # line item match type
          line_item_qualifier,  # also the selector for item amounts
          rate_selector,
          discount,
      )
    """

    def __init__(
        self,
        condition: Union[Aggregation, str],
        customer_qualifier: Optional[Condition],
        cart_qualifier: Optional[Condition],
        li_match_type: Union[Aggregation, str, None],
        line_item_qualifier: Optional[Condition],
        rate_selector: Optional[Condition],
        discount,
        *,
        campaign_id: Optional[str] = None,
        title: Optional[str] = None,
    ):
        super().__init__(
            condition,
            customer_qualifier,
            cart_qualifier,
            line_item_qualifier,
            line_item_match=li_match_type,
            line_item_selector=line_item_qualifier,
            campaign_id=campaign_id,
            title=title,
        )
        self.rate_selector = rate_selector
        self.discount = discount

    def run(self, rates: Sequence[ShippingRate], cart: Cart) -> CampaignOutcome:
        if self.discount is None:
            raise InvalidConfiguration(
                "MISSING_DISCOUNT",
                "Campaign requires a discount",
                {"campaign_id": self.campaign_id},
            )

        logger.info("campaign_start", campaign_id=self.campaign_id, rates=len(rates))
        self.before_run(cart)

        if not self.qualifies(cart):
            logger.info("campaign_not_qualified", campaign_id=self.campaign_id)
            return CampaignOutcome(
                campaign_id=self.campaign_id, decision=DECISION_NOT_QUALIFIED
            )

        undo = self.checkpoint(cart)

        discounted: List[str] = []
        for rate in rates:
            if self.rate_selector is not None and not self.rate_selector.matches(rate):
                continue
            before = rate.price
            taken = self.discount.apply(rate)
            discounted.append(rate.name)
            logger.info(
                "rate_discounted",
                campaign_id=self.campaign_id,
                rate=rate.name,
                before=str(before),
                after=str(rate.price),
                discount=str(taken),
            )

        self.discount.apply_final_discount()
        reverted = self.after_run(cart, undo)

        return CampaignOutcome(
            campaign_id=self.campaign_id,
            decision=DECISION_REVERTED if reverted else DECISION_QUALIFIED,
            discounted_rates=discounted,
            meta={"message": getattr(self.discount, "message", None)},
        )
