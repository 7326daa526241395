"""
ActivateLicenseHandler.

Handler for activating a license: applies the binding policy against the
license store and issues a token for the bound domain.
"""

import logging
from typing import Optional

from activations.application.commands.activate_license import ActivateLicenseCommand
from activations.application.dto.activation_dto import ActivateLicenseResponseDTO
from activations.domain.events import LicenseActivated
from core.domain.events import EventBus
from core.domain.exceptions import (
    InvalidLicenseKeyError,
    LicenseInUseError,
    MissingFieldsError,
)
from core.domain.value_objects import BindStatus, mask_license_key
from core.infrastructure.events import event_bus as default_event_bus
from core.metrics import license_activations_total, tokens_issued_total
from credentials.application.services.token_issuer import TokenIssuer
from licenses.ports.license_repository import LicenseRepository

logger = logging.getLogger(__name__)

ACTIVATED_MESSAGE = "License activated successfully."


class ActivateLicenseHandler:
    """Handler for ActivateLicenseCommand."""

    def __init__(
        self,
        license_repository: LicenseRepository,
        token_issuer: TokenIssuer,
        event_bus: Optional[EventBus] = None,
    ):
        """Initialize handler with the license store and token issuer."""
        self.license_repository = license_repository
        self.token_issuer = token_issuer
        self.event_bus = event_bus or default_event_bus

    async def handle(self, command: ActivateLicenseCommand) -> ActivateLicenseResponseDTO:
        """
        Handle activate license command.

        The client uuid is embedded in the token but does not take part
        in the binding decision; binding keys strictly on the domain.

        Args:
            command: ActivateLicenseCommand

        Returns:
            ActivateLicenseResponseDTO with the issued token

        Raises:
            MissingFieldsError: If a required field is empty
            InvalidLicenseKeyError: If the license key does not exist
            LicenseInUseError: If the license is bound to another domain
        """
        missing = command.missing_fields()
        if missing:
            license_activations_total.labels(outcome="missing_fields").inc()
            raise MissingFieldsError(missing)

        masked_key = mask_license_key(command.license_key)

        record = await self.license_repository.lookup(command.license_key)
        if record is None:
            license_activations_total.labels(outcome="invalid_license_key").inc()
            logger.warning("Activation with unknown license key %s", masked_key)
            raise InvalidLicenseKeyError()

        result = await self.license_repository.try_bind(command.license_key, command.domain)

        if result.status is BindStatus.NOT_FOUND:
            license_activations_total.labels(outcome="invalid_license_key").inc()
            logger.warning("License %s disappeared during activation", masked_key)
            raise InvalidLicenseKeyError()

        if result.status is BindStatus.ALREADY_BOUND_ELSEWHERE:
            license_activations_total.labels(outcome="license_in_use").inc()
            logger.warning(
                "License %s is bound to another domain; rejected %s",
                masked_key,
                command.domain,
            )
            raise LicenseInUseError()

        license_type = (result.record or record).license_type
        issued = self.token_issuer.issue(
            client_uuid=command.client_uuid,
            domain=command.domain,
            license_type=license_type,
        )

        outcome = "activated" if result.first_bind else "reactivated"
        license_activations_total.labels(outcome=outcome).inc()
        tokens_issued_total.labels(license_type=license_type.value).inc()
        logger.info(
            "License %s %s for domain %s",
            masked_key,
            outcome,
            command.domain,
            extra={"license_type": license_type.value, "first_bind": result.first_bind},
        )

        await self.event_bus.publish(
            LicenseActivated(
                aggregate_id=masked_key,
                domain=command.domain,
                client_uuid=command.client_uuid,
                license_type=license_type.value,
                first_bind=result.first_bind,
            )
        )

        return ActivateLicenseResponseDTO(
            message=ACTIVATED_MESSAGE,
            token=issued.token,
            license_type=license_type.value,
            domain=command.domain,
            expires_at=issued.expires_at,
            first_bind=result.first_bind,
        )
