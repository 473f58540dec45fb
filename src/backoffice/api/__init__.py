"""Back office domain API package."""

from backoffice.api.routes import message_router, testimonial_router

__all__ = ["message_router", "testimonial_router"]
