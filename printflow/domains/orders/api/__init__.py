"""
Orders API Layer
"""

from printflow.domains.orders.api.routes import router

__all__ = ["router"]
