"""
Licenses module - License store.

This module handles:
- LicenseRecord entity and binding rules
- Atomic first-bind of a license to a domain
- License provisioning
"""
