"""DNS-based domain availability checker."""

from typing import Optional
import dns.exception
import dns.resolver

from .models import AvailabilityVerdict, CheckMethod


class DNSChecker:
    """Last-resort check based on NS records.

    A delegated domain has name servers; NXDOMAIN means nobody holds it.
    Neither is authoritative, callers should treat the result as a hint.
    """

    ERROR_CODES = (
        (dns.resolver.NoNameservers, 'ESERVFAIL'),
        (dns.exception.Timeout, 'ETIMEOUT'),
        (dns.resolver.NoResolverConfiguration, 'ENORESOLVER'),
    )

    def __init__(self, timeout: float = 5.0, resolver: Optional[dns.resolver.Resolver] = None):
        self.timeout = timeout
        self._resolver = resolver

    def _get_resolver(self) -> dns.resolver.Resolver:
        if self._resolver is None:
            resolver = dns.resolver.Resolver()
            resolver.timeout = self.timeout
            resolver.lifetime = self.timeout
            self._resolver = resolver
        return self._resolver

    @classmethod
    def error_code(cls, error: dns.exception.DNSException) -> str:
        for error_type, code in cls.ERROR_CODES:
            if isinstance(error, error_type):
                return code
        return type(error).__name__

    def check(self, domain: str) -> AvailabilityVerdict:
        try:
            answer = self._get_resolver().resolve(domain, 'NS')
            if len(answer) > 0:
                return AvailabilityVerdict(domain=domain, method=CheckMethod.DNS, available=False)
        except dns.resolver.NXDOMAIN:
            return AvailabilityVerdict(domain=domain, method=CheckMethod.DNS, available=True)
        except dns.resolver.NoAnswer:
            pass  # Exists without NS records, or no data
        except dns.exception.DNSException as e:
            return AvailabilityVerdict(domain=domain, method=CheckMethod.DNS, reason=self.error_code(e))

        return AvailabilityVerdict(domain=domain, method=CheckMethod.DNS, reason='inconclusive')
