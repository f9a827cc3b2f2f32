# shipping_campaigns/engine/matching.py
from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Iterable, Tuple, Union

from .errors import InvalidConfiguration

Subject = Union[str, Iterable[str]]


class MatchKind(str, Enum):
    MATCH = "match"
    DOES_NOT_MATCH = "does_not_match"
    START_WITH = "start_with"
    DOES_NOT_START_WITH = "does_not_start_with"
    END_WITH = "end_with"
    DOES_NOT_END_WITH = "does_not_end_with"
    CONTAIN = "contain"
    DOES_NOT_CONTAIN = "does_not_contain"

    @classmethod
    def parse(cls, raw: Any) -> "MatchKind":
        if isinstance(raw, MatchKind):
            return raw
        key = str(raw).strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise InvalidConfiguration(
                "INVALID_MATCH_KIND",
                f"Unknown match type: {raw!r}",
                {"allowed": [k.value for k in cls]},
            ) from None

    @property
    def negated(self) -> bool:
        return self.value.startswith("does_not_")

    @property
    def positive(self) -> "MatchKind":
        if not self.negated:
            return self
        return MatchKind(self.value[len("does_not_"):])


_ALIASES = {
    "exact": "match",
    "equals": "match",
    "does_not_equal": "does_not_match",
    "starts_with": "start_with",
    "does_not_starts_with": "does_not_start_with",
    "ends_with": "end_with",
    "does_not_ends_with": "does_not_end_with",
    "contains": "contain",
    "does_not_contains": "does_not_contain",
}

# positive checks only; negated kinds invert the aggregate
_CHECKS: Dict[MatchKind, Callable[[str, str], bool]] = {
    MatchKind.MATCH: lambda value, candidate: value == candidate,
    MatchKind.START_WITH: lambda value, candidate: value.startswith(candidate),
    MatchKind.END_WITH: lambda value, candidate: value.endswith(candidate),
    MatchKind.CONTAIN: lambda value, candidate: candidate in value,
}


def _values(subject: Subject) -> Tuple[str, ...]:
    if isinstance(subject, str):
        return (subject,)
    return tuple(subject)


def partial_match(match_kind: Any, subject: Subject, candidates: Iterable[str]) -> bool:
    """
    Shared string / tag-set matching for qualifiers and selectors.

    subject: one string (rate name, title) or several (tags).
    Result is true if ANY subject value passes the check against ANY candidate.
    `does_not_*` kinds are NOT(positive result), so `does_not_contain` means
    no pairing contains.
    """
    kind = MatchKind.parse(match_kind)
    check = _CHECKS[kind.positive]
    values = _values(subject)

    hit = any(check(value, candidate) for candidate in candidates for value in values)
    return not hit if kind.negated else hit
