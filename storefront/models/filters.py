"""
Filter state model.

Holds the values of the three storefront controls.
"""

from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class FilterState:
    """Current values of the search, category and sort controls."""
    query: str = ""
    category: str = ""
    sort: str = ""

    @classmethod
    def from_params(cls, params: Mapping) -> "FilterState":
        """
        Build a state from request parameters.

        Accepts plain values or the lists produced by urllib.parse.parse_qs.
        The search box is submitted as "q" (or "search").
        """
        def first(*names: str) -> str:
            for name in names:
                value = params.get(name)
                if isinstance(value, (list, tuple)):
                    value = value[0] if value else None
                if value:
                    return str(value)
            return ""

        return cls(
            query=first("q", "search"),
            category=first("category"),
            sort=first("sort"),
        )
