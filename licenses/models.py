"""
Model registry for the licenses app.

ORM models live in the infrastructure layer.
"""
from licenses.infrastructure.models import License  # noqa: F401
