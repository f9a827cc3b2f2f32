import json
from pathlib import Path

import jsonschema

import shipping_campaigns

PKG = Path(shipping_campaigns.__file__).resolve().parent
SCHEMAS = PKG / "schemas"


def _load(p: Path):
    return json.loads(p.read_text(encoding="utf-8"))


def test_campaign_set_schema_is_valid_jsonschema():
    schema = _load(SCHEMAS / "campaign_set.schema.json")
    jsonschema.Draft202012Validator.check_schema(schema)
