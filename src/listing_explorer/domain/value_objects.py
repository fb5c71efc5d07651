"""
Value Objects for Domain Layer.

Value objects are immutable results passed between the filter stages
and the store.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from listing_explorer.domain.entities import Listing

# Rejection reasons: listing label -> reason string
RejectionReasonsDict = Dict[str, str]


@dataclass(frozen=True)
class FilterResult:
    """Result of applying a single filter stage."""

    passed: List[Listing] = field(default_factory=list)
    rejected: List[Listing] = field(default_factory=list)
    rejection_reasons: RejectionReasonsDict = field(default_factory=dict)

    @property
    def passed_count(self) -> int:
        return len(self.passed)

    @property
    def rejected_count(self) -> int:
        return len(self.rejected)
