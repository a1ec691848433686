"""Registrar-grade availability lookup (EPP status service)."""

import logging
from typing import Any, Dict, Optional

import requests

from .models import AvailabilityVerdict, CheckMethod

logger = logging.getLogger(__name__)


def format_amount(amount: Any) -> str:
    """12.0 -> '12', 12.5 -> '12.5'; strings are passed through."""
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount)


class EppChecker:
    """Queries the domain status service that registrar storefronts use.

    The service rejects requests that don't look like they come from the
    storefront, so browser-like headers are always sent.
    """

    STATUS_URL = "https://domains.revved.com/v1/domainStatus"

    HEADERS = {
        'User-Agent': 'Mozilla/5.0',
        'Referer': 'https://www.namecheap.com/',
        'Origin': 'https://www.namecheap.com',
    }

    def __init__(self, timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def _inconclusive(self, domain: str, reason: str) -> AvailabilityVerdict:
        return AvailabilityVerdict(domain=domain, method=CheckMethod.EPP, reason=reason)

    def _find_entry(self, data: Any, domain: str) -> Optional[Dict[str, Any]]:
        if not isinstance(data, dict):
            return None
        for entry in data.get('status') or []:
            if isinstance(entry, dict) and str(entry.get('name', '')).lower() == domain.lower():
                return entry
        return None

    def check(self, domain: str) -> AvailabilityVerdict:
        """Check a single domain.

        Returns an inconclusive verdict on any HTTP, transport or decoding
        failure, and when the service omits the domain from its answer.
        """
        try:
            response = self.session.get(
                self.STATUS_URL,
                params={'domains': domain},
                headers=self.HEADERS,
                timeout=self.timeout,
            )
            if not 200 <= response.status_code < 300:
                return self._inconclusive(domain, f"HTTP {response.status_code}")
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.debug("EPP lookup for %s failed: %s", domain, e)
            return self._inconclusive(domain, str(e))

        entry = self._find_entry(data, domain)
        if entry is None:
            return self._inconclusive(domain, 'domain not in response')

        available = entry.get('available')
        if not isinstance(available, bool):
            return self._inconclusive(domain, 'no availability in response')

        verdict = AvailabilityVerdict(
            domain=domain,
            method=CheckMethod.EPP,
            available=available,
            note=entry.get('reason') or None,
        )

        fee = entry.get('fee')
        if entry.get('premium') and isinstance(fee, dict) and fee.get('amount') is not None:
            verdict.premium = True
            verdict.price = f"${format_amount(fee['amount'])}/yr"

        return verdict
