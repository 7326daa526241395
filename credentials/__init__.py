"""
Credentials module - License token issuance and verification.

This module handles:
- Token issuance with per-license-type lifetimes
- Token verification (signature, claims, expiry)
- The access gate guarding protected endpoints
"""
