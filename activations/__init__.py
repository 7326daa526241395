"""
Activations module - License activation.

This module handles:
- Activation command and handler
- Binding policy (first bind, idempotent re-activation, in-use rejection)
- LicenseActivated audit event
"""
