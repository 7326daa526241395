"""
License Django ORM model.

This is the infrastructure layer model for license records.
Domain entities are in licenses.domain.license.
"""
from django.db import models


class License(models.Model):
    """
    A license record keyed by its license key.

    Bound to exactly one domain after its first activation.
    """

    TYPE_CHOICES = [
        ("lifetime", "Lifetime"),
        ("yearly", "Yearly"),
    ]

    key = models.CharField(max_length=100, primary_key=True)
    license_type = models.CharField(max_length=20, choices=TYPE_CHOICES)
    bound = models.BooleanField(default=False, db_index=True)
    # Domains are opaque client-supplied strings with no length cap
    bound_domain = models.TextField(
        null=True, blank=True, help_text="Domain the license is bound to"
    )
    bound_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "licenses"
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=(
                    models.Q(bound=False, bound_domain__isnull=True)
                    | models.Q(bound=True, bound_domain__isnull=False)
                ),
                name="license_binding_consistent",
            ),
        ]

    def __str__(self):
        if self.bound:
            return f"{self.key} @ {self.bound_domain}"
        return self.key
