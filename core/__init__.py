"""
Core module for shared domain infrastructure.

This module contains:
- Domain events and exceptions
- Event bus and audit handlers
- Middleware components
- Health checks and management commands
"""
