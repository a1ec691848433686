from .models import AvailabilityVerdict, CheckMethod
from .epp_checker import EppChecker
from .rdap_checker import RdapBootstrap, RdapChecker
from .dns_checker import DNSChecker
from .availability_service import AvailabilityService

__all__ = [
    'AvailabilityVerdict', 'CheckMethod', 'EppChecker', 'RdapBootstrap',
    'RdapChecker', 'DNSChecker', 'AvailabilityService'
]
