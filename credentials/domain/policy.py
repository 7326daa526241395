"""
Credential expiration policy.
"""
from datetime import timedelta

from core.domain.value_objects import LicenseType

YEARLY_TOKEN_LIFETIME = timedelta(days=365)
# "10y" horizon standing in for no practical expiry
LIFETIME_TOKEN_LIFETIME = timedelta(days=3652.5)

_LIFETIMES = {
    LicenseType.YEARLY: YEARLY_TOKEN_LIFETIME,
    LicenseType.LIFETIME: LIFETIME_TOKEN_LIFETIME,
}


def token_lifetime(license_type: LicenseType) -> timedelta:
    """
    Get the credential lifetime for a license type.

    Args:
        license_type: License type

    Returns:
        Lifetime of a credential issued for that license type
    """
    try:
        return _LIFETIMES[license_type]
    except KeyError:
        raise ValueError(f"No token lifetime for license type {license_type}") from None
