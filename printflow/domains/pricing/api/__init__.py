"""
Pricing API Layer
"""

from printflow.domains.pricing.api.routes import router

__all__ = ["router"]
