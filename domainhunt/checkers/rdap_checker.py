"""RDAP-based domain availability checker."""

import logging
import threading
from typing import Any, Callable, Dict, Optional

import requests

from .models import AvailabilityVerdict, CheckMethod

logger = logging.getLogger(__name__)

BOOTSTRAP_URL = "https://data.iana.org/rdap/dns.json"

# Used when the IANA bootstrap file can't be fetched
SEED_SERVERS = {
    'com': 'https://rdap.verisign.com/com/v1/',
    'net': 'https://rdap.verisign.com/net/v1/',
    'org': 'https://rdap.publicinterestregistry.org/rdap/',
    'dev': 'https://pubapi.registry.google/rdap/',
    'app': 'https://pubapi.registry.google/rdap/',
}


def fetch_bootstrap(url: str = BOOTSTRAP_URL, timeout: float = 10.0) -> Any:
    """Download the IANA RDAP bootstrap file."""
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response.json()


def parse_bootstrap(data: Any) -> Dict[str, str]:
    """Turn ``{services: [[tlds, urls], ...]}`` into a TLD -> base URL map."""
    directory = {}
    for tlds, urls in data['services']:
        if not urls:
            continue
        for tld in tlds:
            directory[tld.lower()] = urls[0]
    return directory


class RdapBootstrap:
    """TLD -> RDAP server directory, populated once and then only read.

    Concurrent first callers block on the lock while a single fetch runs,
    and all of them get the same mapping back.
    """

    def __init__(self, fetch: Optional[Callable[[], Any]] = None):
        self._fetch = fetch or fetch_bootstrap
        self._directory: Optional[Dict[str, str]] = None
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._directory is not None

    def _load(self) -> Dict[str, str]:
        try:
            directory = parse_bootstrap(self._fetch())
        except (requests.RequestException, ValueError, KeyError, TypeError, AttributeError, IndexError) as e:
            logger.warning("RDAP bootstrap unavailable (%s), using seed servers", e)
            return dict(SEED_SERVERS)

        if not directory:
            logger.warning("RDAP bootstrap was empty, using seed servers")
            return dict(SEED_SERVERS)

        logger.debug("Loaded RDAP bootstrap for %d TLDs", len(directory))
        return directory

    def get(self) -> Dict[str, str]:
        if self._directory is not None:
            return self._directory
        with self._lock:
            if self._directory is None:
                self._directory = self._load()
        return self._directory

    def server_for(self, tld: str) -> Optional[str]:
        return self.get().get(tld.lstrip('.').lower())


class RdapChecker:
    """Registry lookup over RDAP, used when the EPP service can't answer."""

    # Registries answer 404 for names they refuse to register, too
    UNAVAILABLE_MARKERS = ('blocked', 'reserved', 'not available')

    def __init__(
        self,
        bootstrap: Optional[RdapBootstrap] = None,
        timeout: float = 8.0,
        session: Optional[requests.Session] = None
    ):
        self.bootstrap = bootstrap or RdapBootstrap()
        self.timeout = timeout
        self.session = session or requests.Session()

    @staticmethod
    def extract_tld(domain: str) -> str:
        return domain.rsplit('.', 1)[-1].lower()

    def _not_found(self, domain: str, response) -> AvailabilityVerdict:
        """Interpret a 404: no record means available unless the registry says otherwise."""
        try:
            body = response.json()
        except ValueError:
            return AvailabilityVerdict(domain=domain, method=CheckMethod.RDAP, available=True)

        description = body.get('description') if isinstance(body, dict) else None
        if isinstance(description, list):
            lines = [str(line) for line in description]
            text = ' '.join(lines).lower()
            if any(marker in text for marker in self.UNAVAILABLE_MARKERS):
                return AvailabilityVerdict(
                    domain=domain,
                    method=CheckMethod.RDAP,
                    available=False,
                    note='; '.join(lines),
                )

        return AvailabilityVerdict(domain=domain, method=CheckMethod.RDAP, available=True)

    def check(self, domain: str) -> AvailabilityVerdict:
        server = self.bootstrap.server_for(self.extract_tld(domain))
        if not server:
            return AvailabilityVerdict(domain=domain, method=CheckMethod.RDAP, reason='no server for TLD')

        url = f"{server.rstrip('/')}/domain/{domain}"
        try:
            response = self.session.get(
                url,
                headers={'Accept': 'application/rdap+json'},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.debug("RDAP lookup for %s failed: %s", domain, e)
            return AvailabilityVerdict(domain=domain, method=CheckMethod.RDAP, reason=str(e))

        if response.status_code == 404:
            return self._not_found(domain, response)
        if 200 <= response.status_code < 300:
            return AvailabilityVerdict(domain=domain, method=CheckMethod.RDAP, available=False)
        return AvailabilityVerdict(
            domain=domain,
            method=CheckMethod.RDAP,
            reason=f"HTTP {response.status_code}",
        )
