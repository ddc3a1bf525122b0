"""
Check Pricing Health Use Case
"""

import logging
from dataclasses import dataclass

from printflow.domains.pricing.application.ports import IPricingGateway

logger = logging.getLogger(__name__)


@dataclass
class CheckPricingHealthResponse:
    """Remote pricing availability."""

    healthy: bool

    @property
    def using_fallback(self) -> bool:
        """Quotes are expected to come from the fallback table."""
        return not self.healthy


class CheckPricingHealthUseCase:
    """
    Use Case: Check Pricing Health

    Probes the remote pricing service. Failures of the probe itself count as
    unhealthy.
    """

    def __init__(self, gateway: IPricingGateway):
        self.gateway = gateway

    async def execute(self) -> CheckPricingHealthResponse:
        try:
            healthy = await self.gateway.health_check()
        except Exception as e:
            logger.warning(f"Pricing health probe failed: {e}")
            healthy = False
        return CheckPricingHealthResponse(healthy=healthy)
