"""
Pydantic schema definitions for API payloads.

Each resource (events, attendees, organizers) defines its own models
for request and response bodies.  Schemas are separated from the
storage layer so that the JSON representation (for example the
``eventId`` field name) is independent of column names.
"""
