"""Combined availability checking service."""

import logging
from typing import Callable, List, Optional, Tuple

from .dns_checker import DNSChecker
from .epp_checker import EppChecker
from .models import AvailabilityVerdict, CheckMethod
from .rdap_checker import RdapBootstrap, RdapChecker

logger = logging.getLogger(__name__)

DNS_FALLBACK_NOTE = "DNS fallback: verify before purchasing"


class AvailabilityService:
    """Resolves a domain through EPP, then RDAP, then DNS.

    The first stage that returns a definite answer wins; later stages are
    never contacted. ``resolve`` does not raise.
    """

    def __init__(
        self,
        epp_checker: Optional[EppChecker] = None,
        rdap_checker: Optional[RdapChecker] = None,
        dns_checker: Optional[DNSChecker] = None,
        bootstrap: Optional[RdapBootstrap] = None
    ):
        self.bootstrap = bootstrap or (rdap_checker.bootstrap if rdap_checker else RdapBootstrap())
        self.epp_checker = epp_checker or EppChecker()
        self.rdap_checker = rdap_checker or RdapChecker(bootstrap=self.bootstrap)
        self.dns_checker = dns_checker or DNSChecker()

    @property
    def stages(self) -> List[Tuple[CheckMethod, Callable[[str], AvailabilityVerdict]]]:
        return [
            (CheckMethod.EPP, self.epp_checker.check),
            (CheckMethod.RDAP, self.rdap_checker.check),
            (CheckMethod.DNS, self.dns_checker.check),
        ]

    def warmup(self) -> int:
        """Load the RDAP bootstrap ahead of the first lookup."""
        return len(self.bootstrap.get())

    def _run_stage(self, method: CheckMethod, check, domain: str) -> AvailabilityVerdict:
        try:
            return check(domain)
        except Exception as e:
            logger.warning("%s check for %s raised %r", method.value, domain, e)
            return AvailabilityVerdict(domain=domain, method=method, reason=str(e) or type(e).__name__)

    def resolve(self, domain: str) -> AvailabilityVerdict:
        """Check a single domain's availability.

        Args:
            domain: Full domain name (e.g., 'example.com')
        """
        for method, check in self.stages:
            verdict = self._run_stage(method, check, domain)
            if verdict.conclusive:
                if method is CheckMethod.DNS:
                    verdict.note = DNS_FALLBACK_NOTE
                return verdict
            logger.debug("%s inconclusive for %s: %s", method.value, domain, verdict.reason)

        return AvailabilityVerdict(
            domain=domain,
            method=CheckMethod.UNKNOWN,
            reason='all checks inconclusive',
        )
