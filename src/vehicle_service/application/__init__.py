"""Application layer: composition root."""

from vehicle_service.application.app_context import AppContext, create_app_context

__all__ = ["AppContext", "create_app_context"]
