import requests

from domainhunt.checkers import CheckMethod, EppChecker


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
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({'url': url, 'params': params, 'headers': headers, 'timeout': timeout})
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


def _checker(response):
    session = _Session(response)
    return EppChecker(session=session), session


def test_available_entry_is_authoritative():
    checker, session = _checker(_Resp(json_obj={'status': [{'name': 'swift.dev', 'available': True}]}))
    verdict = checker.check('swift.dev')

    assert verdict.method is CheckMethod.EPP
    assert verdict.available is True
    assert verdict.premium is False
    assert verdict.price is None

    call = session.calls[0]
    assert call['url'] == EppChecker.STATUS_URL
    assert call['params'] == {'domains': 'swift.dev'}
    assert call['timeout'] == 10.0
    assert call['headers']['Referer'] == 'https://www.namecheap.com/'
    assert call['headers']['Origin'] == 'https://www.namecheap.com'
    assert 'User-Agent' in call['headers']


def test_taken_entry_surfaces_reason_as_note():
    body = {'status': [{'name': 'google.com', 'available': False, 'reason': 'In use'}]}
    checker, _ = _checker(_Resp(json_obj=body))
    verdict = checker.check('google.com')

    assert verdict.available is False
    assert verdict.note == 'In use'


def test_premium_entry_gets_price():
    body = {'status': [
        {'name': 'other.io', 'available': False},
        {'name': 'gem.io', 'available': True, 'premium': True, 'fee': {'amount': '2450.00'}},
    ]}
    checker, _ = _checker(_Resp(json_obj=body))
    verdict = checker.check('gem.io')

    assert verdict.available is True
    assert verdict.premium is True
    assert verdict.price == '$2450.00/yr'


def test_premium_numeric_fee_formatting():
    for amount, price in ((12.0, '$12/yr'), (12, '$12/yr'), (12.5, '$12.5/yr')):
        body = {'status': [{'name': 'gem.io', 'available': True, 'premium': True, 'fee': {'amount': amount}}]}
        checker, _ = _checker(_Resp(json_obj=body))

        assert checker.check('gem.io').price == price


def test_premium_without_fee_is_not_flagged():
    body = {'status': [{'name': 'gem.io', 'available': True, 'premium': True}]}
    checker, _ = _checker(_Resp(json_obj=body))
    verdict = checker.check('gem.io')

    assert verdict.premium is False
    assert verdict.price is None


def test_http_error_is_inconclusive():
    checker, _ = _checker(_Resp(status=403, json_obj={}))
    verdict = checker.check('swift.dev')

    assert verdict.available is None
    assert verdict.reason == 'HTTP 403'


def test_missing_entry_is_inconclusive():
    body = {'status': [{'name': 'other.dev', 'available': True}]}
    checker, _ = _checker(_Resp(json_obj=body))
    verdict = checker.check('swift.dev')

    assert verdict.available is None
    assert verdict.reason == 'domain not in response'


def test_null_availability_is_inconclusive():
    body = {'status': [{'name': 'swift.dev', 'available': None}]}
    checker, _ = _checker(_Resp(json_obj=body))

    assert checker.check('swift.dev').available is None


def test_timeout_is_inconclusive():
    checker, _ = _checker(requests.Timeout("read timed out"))
    verdict = checker.check('swift.dev')

    assert verdict.available is None
    assert verdict.reason == 'read timed out'


def test_undecodable_body_is_inconclusive():
    checker, _ = _checker(_Resp(json_obj=ValueError("Expecting value")))
    verdict = checker.check('swift.dev')

    assert verdict.available is None
    assert 'Expecting value' in verdict.reason
