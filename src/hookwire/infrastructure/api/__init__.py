"""FastAPI server integration."""

from hookwire.infrastructure.api.app import create_app, install_middleware

__all__ = ["create_app", "install_middleware"]
