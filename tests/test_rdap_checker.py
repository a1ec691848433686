import threading
import time

import requests

from domainhunt.checkers import CheckMethod, RdapBootstrap, RdapChecker
from domainhunt.checkers.rdap_checker import SEED_SERVERS, parse_bootstrap


BOOTSTRAP = {
    'services': [
        [['com', 'net'], ['https://rdap.verisign.com/com/v1/', 'https://backup.example/']],
        [['dev'], ['https://pubapi.registry.google/rdap/']],
    ]
}


class _Resp:
    def __init__(self, status=200, json_obj=None):
        self.status_code = status
        self._json = json_obj

    def json(self):
        if isinstance(self._json, Exception):
            raise self._json
        return self._json


class _Session:
    def __init__(self, response):
        self.response = response
        self.urls = []
        self.headers = []

    def get(self, url, headers=None, timeout=None):
        self.urls.append(url)
        self.headers.append(headers)
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


def _checker(response, directory=None):
    bootstrap = RdapBootstrap(fetch=lambda: directory or BOOTSTRAP)
    session = _Session(response)
    return RdapChecker(bootstrap=bootstrap, session=session), session


def test_parse_bootstrap_takes_first_url():
    directory = parse_bootstrap(BOOTSTRAP)
    assert directory == {
        'com': 'https://rdap.verisign.com/com/v1/',
        'net': 'https://rdap.verisign.com/com/v1/',
        'dev': 'https://pubapi.registry.google/rdap/',
    }


def test_bootstrap_falls_back_to_seed_on_fetch_failure():
    def failing_fetch():
        raise requests.ConnectionError("unreachable")

    bootstrap = RdapBootstrap(fetch=failing_fetch)
    assert bootstrap.get() == SEED_SERVERS
    assert bootstrap.server_for('.com') == 'https://rdap.verisign.com/com/v1/'


def test_bootstrap_falls_back_to_seed_on_bad_payload():
    bootstrap = RdapBootstrap(fetch=lambda: {'unexpected': True})
    assert bootstrap.get() == SEED_SERVERS


def test_bootstrap_with_malformed_entries_uses_seed_after_one_fetch():
    payloads = [
        {'services': [[[None, 'com'], ['https://rdap.example/']]]},
        {'services': [[['com']]]},
    ]
    for payload in payloads:
        calls = []

        def fetch():
            calls.append(1)
            return payload

        bootstrap = RdapBootstrap(fetch=fetch)
        results = [bootstrap.get() for _ in range(3)]

        assert all(r == SEED_SERVERS for r in results)
        assert len(calls) == 1


def test_bootstrap_is_fetched_once():
    calls = []

    def fetch():
        calls.append(1)
        return BOOTSTRAP

    bootstrap = RdapBootstrap(fetch=fetch)
    first = bootstrap.get()
    second = bootstrap.get()

    assert first is second
    assert len(calls) == 1


def test_concurrent_first_callers_share_one_fetch():
    calls = []
    started = threading.Event()
    release = threading.Event()

    def slow_fetch():
        calls.append(1)
        started.set()
        release.wait(5)
        return BOOTSTRAP

    bootstrap = RdapBootstrap(fetch=slow_fetch)
    barrier = threading.Barrier(8)
    results = []

    def worker():
        barrier.wait()
        results.append(bootstrap.get())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()

    assert started.wait(5)
    time.sleep(0.05)
    release.set()
    for t in threads:
        t.join(5)

    assert len(calls) == 1
    assert len(results) == 8
    assert all(r is results[0] for r in results)


def test_registered_domain_is_taken():
    checker, session = _checker(_Resp(status=200, json_obj={'ldhName': 'google.com'}))
    verdict = checker.check('google.com')

    assert verdict.method is CheckMethod.RDAP
    assert verdict.available is False
    assert session.urls == ['https://rdap.verisign.com/com/v1/domain/google.com']
    assert session.headers[0]['Accept'] == 'application/rdap+json'


def test_404_with_plain_description_is_available():
    body = {'errorCode': 404, 'description': ['Domain not found']}
    checker, _ = _checker(_Resp(status=404, json_obj=body))

    assert checker.check('swift.dev').available is True


def test_404_without_body_is_available():
    checker, _ = _checker(_Resp(status=404, json_obj=ValueError("no JSON")))
    verdict = checker.check('swift.dev')

    assert verdict.available is True
    assert verdict.reason is None


def test_404_reserved_name_is_not_available():
    body = {'description': ['This name is RESERVED by the registry', 'See policy']}
    checker, _ = _checker(_Resp(status=404, json_obj=body))
    verdict = checker.check('nic.dev')

    assert verdict.available is False
    assert verdict.note == 'This name is RESERVED by the registry; See policy'


def test_404_blocked_and_not_available_markers():
    for text in ('Blocked by DPML', 'Domain Not Available for registration'):
        checker, _ = _checker(_Resp(status=404, json_obj={'description': [text]}))
        assert checker.check('brand.dev').available is False


def test_unexpected_status_is_inconclusive():
    checker, _ = _checker(_Resp(status=429))
    verdict = checker.check('swift.dev')

    assert verdict.available is None
    assert verdict.reason == 'HTTP 429'


def test_transport_error_is_inconclusive():
    checker, _ = _checker(requests.Timeout("connect timed out"))
    verdict = checker.check('swift.dev')

    assert verdict.available is None
    assert verdict.reason == 'connect timed out'


def test_unknown_tld_has_no_server():
    checker, session = _checker(_Resp(status=200))
    verdict = checker.check('swift.zzz')

    assert verdict.available is None
    assert verdict.reason == 'no server for TLD'
    assert session.urls == []
