"""Availability verdicts shared by every checker."""

from enum import Enum
from typing import Any, Dict, Optional
from dataclasses import dataclass


class CheckMethod(str, Enum):
    """Source that produced a verdict."""
    EPP = 'epp'
    RDAP = 'rdap'
    DNS = 'dns'
    UNKNOWN = 'unknown'


@dataclass
class AvailabilityVerdict:
    """Result of a single availability check.

    ``available`` is None when the source could not decide.
    """
    domain: str
    method: CheckMethod
    available: Optional[bool] = None
    reason: Optional[str] = None
    note: Optional[str] = None
    premium: bool = False
    price: Optional[str] = None

    @property
    def conclusive(self) -> bool:
        return self.available is not None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'domain': self.domain,
            'method': self.method.value,
            'available': self.available,
        }
        if self.reason:
            result['reason'] = self.reason
        if self.note:
            result['note'] = self.note
        if self.premium:
            result['premium'] = True
        if self.price:
            result['price'] = self.price
        return result
