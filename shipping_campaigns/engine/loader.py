from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema
import structlog
import yaml

# register all condition / discount types
import shipping_campaigns.discounts  # noqa: F401
import shipping_campaigns.qualifiers  # noqa: F401
import shipping_campaigns.selectors  # noqa: F401

from .campaign import ShippingDiscount
from .conditions import Condition
from .errors import InvalidConfiguration
from .registry import condition_registry, discount_registry

logger = structlog.get_logger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[1] / "schemas" / "campaign_set.schema.json"


def _load_schema() -> Dict[str, Any]:
    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)


def _params(node: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in node.items() if k != "type"}


def build_condition(node: Optional[Dict[str, Any]]) -> Optional[Condition]:
    """
    {"type": "<type_name>", ...params}  ->  Condition
    Composites: {"type": "and" | "or", "conditions": [...]}
    """
    if node is None:
        return None

    type_name = str(node.get("type") or "")
    cls = condition_registry.get(type_name)
    try:
        return cls.from_config(_params(node), build_condition)
    except TypeError as e:
        # wrong / missing params for the constructor
        raise InvalidConfiguration(
            "INVALID_PARAMS",
            f"Invalid params for condition '{type_name}': {e}",
            {"type": type_name},
        ) from e


def build_discount(node: Dict[str, Any]):
    type_name = str(node.get("type") or "")
    cls = discount_registry.get(type_name)
    try:
        return cls.from_config(_params(node))
    except TypeError as e:
        raise InvalidConfiguration(
            "INVALID_PARAMS",
            f"Invalid params for discount '{type_name}': {e}",
            {"type": type_name},
        ) from e


def build_campaign(d: Dict[str, Any]) -> ShippingDiscount:
    return ShippingDiscount(
        d["condition"],
        build_condition(d.get("customer_qualifier")),
        build_condition(d.get("cart_qualifier")),
        d.get("line_item_match"),
        build_condition(d.get("line_item_qualifier")),
        build_condition(d.get("rate_selector")),
        build_discount(d["discount"]),
        campaign_id=str(d["id"]),
        title=str(d.get("title") or d["id"]),
    )


def build_campaigns(doc: Dict[str, Any]) -> List[ShippingDiscount]:
    """
    Validate a campaign set document and build enabled campaigns in file order.
    Raises InvalidConfiguration on any schema / type / duplicate error.
    """
    try:
        jsonschema.validate(instance=doc, schema=_load_schema())
    except jsonschema.ValidationError as e:
        raise InvalidConfiguration(
            "SCHEMA_INVALID",
            f"Campaign set does not match schema: {e.message}",
            {"path": list(e.absolute_path)},
        ) from e

    raw_campaigns = doc.get("campaigns") or []

    ids = [str(c["id"]) for c in raw_campaigns]
    if len(ids) != len(set(ids)):
        seen, dups = set(), []
        for cid in ids:
            if cid in seen and cid not in dups:
                dups.append(cid)
            seen.add(cid)
        raise InvalidConfiguration(
            "DUPLICATE_CAMPAIGN", f"Duplicate campaign ids: {dups}", {"ids": dups}
        )

    campaigns: List[ShippingDiscount] = []
    for c in raw_campaigns:
        if not c.get("enabled", True):
            logger.info("campaign_disabled", campaign_id=c["id"])
            continue
        campaigns.append(build_campaign(c))
    return campaigns


def load_campaigns(path: str) -> List[ShippingDiscount]:
    campaigns_path = Path(path)
    with campaigns_path.open("r", encoding="utf-8") as f:
        doc = yaml.safe_load(f) or {}

    campaigns = build_campaigns(doc)
    logger.info("campaigns_loaded", path=str(campaigns_path), count=len(campaigns))
    return campaigns
