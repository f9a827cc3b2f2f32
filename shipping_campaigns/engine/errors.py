from __future__ import annotations

from typing import Any, Dict, Optional


class CampaignError(Exception):
    """Base class for everything the campaign engine raises itself."""


class InvalidConfiguration(CampaignError):
    """
    A malformed campaign definition (missing discount, unknown comparator, ...).

    Never caught inside the engine: the runner logs it and re-raises so the
    host aborts the checkout script instead of silently skipping a campaign.
    """

    def __init__(self, code: str, message: str, meta: Optional[Dict[str, Any]] = None):
        self.code = str(code)
        self.message = str(message)
        self.meta = meta or {}
        super().__init__(f"{self.code}: {self.message}")
