"""
Django management command to seed the license catalogue.

Without arguments it provisions the default catalogue:
- TALLERPRO-VALIDA-1234-5678 (lifetime)
- TALLERPRO-ANUAL-ABCD-EFGH (yearly)
"""

import logging

from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand, CommandError

from core.domain.exceptions import DuplicateLicenseKeyError
from core.domain.value_objects import LicenseType, mask_license_key
from licenses.domain.license import LicenseRecord
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository

logger = logging.getLogger(__name__)

DEFAULT_CATALOGUE = [
    ("TALLERPRO-VALIDA-1234-5678", LicenseType.LIFETIME),
    ("TALLERPRO-ANUAL-ABCD-EFGH", LicenseType.YEARLY),
]


class Command(BaseCommand):
    """Command to provision license records."""

    help = "Provision license records (defaults to the built-in catalogue)"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--key",
            type=str,
            default=None,
            help="License key to provision (default: built-in catalogue)",
        )
        parser.add_argument(
            "--type",
            type=str,
            choices=[license_type.value for license_type in LicenseType],
            default=LicenseType.LIFETIME.value,
            help="License type for --key (default: lifetime)",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        if options["key"]:
            catalogue = [(options["key"], LicenseType(options["type"]))]
        else:
            catalogue = DEFAULT_CATALOGUE

        created = async_to_sync(self.seed)(catalogue)
        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS(f"Provisioned {created} license(s)"))

    async def seed(self, catalogue) -> int:
        """Provision each catalogue entry, skipping keys that already exist."""
        repository = DjangoLicenseRepository()
        created = 0
        for key, license_type in catalogue:
            try:
                record = LicenseRecord.create(key=key, license_type=license_type)
            except ValueError as exc:
                raise CommandError(str(exc)) from exc
            try:
                await repository.add(record)
            except DuplicateLicenseKeyError:
                # pylint: disable=no-member
                self.stdout.write(self.style.WARNING(f"License '{key}' already exists"))
                continue
            created += 1
            logger.info("Provisioned %s license %s", license_type.value, mask_license_key(key))
            self.stdout.write(f"  {key} ({license_type.value})")
        return created
