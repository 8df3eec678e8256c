"""
Application package initializer.

The project is organised into small pieces: ``core`` holds
configuration, logging, the database client and error handling;
``schemas`` the request/response models; ``services`` the queries; and
``api`` the HTTP routes.  Events, attendees and organizers share one
generic CRUD implementation parameterized by a resource definition.
"""

from .main import app  # noqa: F401
