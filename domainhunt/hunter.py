"""Drives candidates through the availability cascade and records the results."""

import logging
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from .checkers import AvailabilityService
from .config import HuntConfig
from .generators import Candidate, generate_domains
from .pricing import format_price, is_affordable, tld_of
from .utils import CheckpointStore, ConsoleReporter

logger = logging.getLogger(__name__)


@dataclass
class HuntSummary:
    checked: int
    found: int
    total_checked: int
    total_found: int
    exhausted: bool


class DomainHunter:
    """Pulls one candidate at a time, resolves it, and records the verdict.

    ``stop()`` ends the hunt before the next lookup; the in-flight lookup
    always completes. It only flips a flag, so it is safe to call from a
    signal handler. State is saved on every exit path.
    """

    def __init__(
        self,
        config: HuntConfig,
        service: Optional[AvailabilityService] = None,
        store: Optional[CheckpointStore] = None,
        reporter: Optional[ConsoleReporter] = None
    ):
        self.config = config
        self.service = service or AvailabilityService()
        self.store = store or CheckpointStore(config.results_file)
        self.reporter = reporter or ConsoleReporter()
        self.stop_requested = False

    def stop(self):
        self.stop_requested = True

    def _record_available(self, candidate: Candidate, verdict, tld: str):
        price = verdict.price or format_price(tld)
        self.reporter.available(candidate.domain, candidate.strategy, price + (" (premium)" if verdict.premium else ""))
        self.store.add_result({
            'domain': candidate.domain,
            'strategy': candidate.strategy,
            'price': price,
            'tld': tld,
            'premium': verdict.premium,
            'method': verdict.method.value,
            'checked_at': datetime.now().isoformat(),
        })
        # Don't risk losing a find
        self.store.save()

    def run(self, candidates: Optional[Iterable[Candidate]] = None) -> HuntSummary:
        if candidates is None:
            candidates = generate_domains(self.config)

        checked = found = 0
        since_save = 0
        exhausted = False

        try:
            for candidate in candidates:
                if self.stop_requested:
                    self.reporter.stopping()
                    break

                domain = candidate.domain
                if self.store.was_checked(domain):
                    continue

                tld = tld_of(domain)
                if not is_affordable(tld, self.config.max_price_per_year):
                    continue

                # Politeness delay
                time.sleep(self.config.request_delay)
                if self.stop_requested:
                    self.reporter.stopping()
                    break

                verdict = self.service.resolve(domain)
                self.store.mark_checked(domain)
                checked += 1

                if verdict.available is True:
                    found += 1
                    self._record_available(candidate, verdict, tld)
                elif verdict.available is False:
                    self.reporter.taken(domain)
                else:
                    logger.debug("No verdict for %s: %s", domain, verdict.reason)
                    self.reporter.error(domain, verdict.reason or 'unknown')

                since_save += 1
                if since_save >= self.config.save_every:
                    self.store.save()
                    since_save = 0
            else:
                exhausted = True
        finally:
            self.reporter.saving()
            self.store.save()
            stats = self.store.stats()
            self.reporter.saved(stats['found'])

        return HuntSummary(
            checked=checked,
            found=found,
            total_checked=stats['checked'],
            total_found=stats['found'],
            exhausted=exhausted,
        )
