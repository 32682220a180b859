"""API package for the wedding RSVP lookup."""

from wedding.api.app import app, create_app
from wedding.api.routes import router

__all__ = ["app", "create_app", "router"]
