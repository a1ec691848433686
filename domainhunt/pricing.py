"""Approximate first-year registration prices per TLD (USD)."""

from typing import Optional

TLD_PRICES = {
    '.com': 12,
    '.net': 12,
    '.org': 12,
    '.dev': 12,
    '.app': 14,
    '.io': 35,
    '.co': 25,
    '.ai': 80,
    '.sh': 25,
    '.xyz': 2,
    '.cool': 25,
    '.lol': 25,
    '.me': 10,
    '.cc': 12,
    '.tv': 30,
    '.gg': 20,
    '.so': 25,
    '.to': 35,
    '.is': 60,
    '.it': 15,
    '.in': 10,
    '.us': 10,
    '.uk': 8,
    '.de': 8,
    '.at': 15,
    '.eu': 8,
    '.tech': 5,
    '.site': 3,
    '.online': 3,
    '.fun': 3,
    '.wtf': 25,
    '.ninja': 20,
    '.codes': 45,
    '.run': 20,
    '.cloud': 12,
    '.page': 12,
    '.life': 5,
    '.world': 5,
    '.zone': 25,
    '.build': 50,
}


def tld_of(domain: str) -> str:
    """'swift.dev' -> '.dev'"""
    return '.' + domain.rsplit('.', 1)[-1].lower()


def get_price(tld: str) -> Optional[int]:
    return TLD_PRICES.get(tld.lower())


def format_price(tld: str) -> str:
    price = get_price(tld)
    return f"~${price}/yr" if price is not None else 'price unknown'


def is_affordable(tld: str, max_price: float) -> bool:
    """Unknown prices are never affordable."""
    price = get_price(tld)
    return price is not None and price <= max_price
