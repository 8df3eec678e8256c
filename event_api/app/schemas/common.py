"""
Configuration shared by every resource schema.

Request bodies are only type-coerced, never validated further: numbers
sent for string fields are stored as strings and numeric strings sent
for integer fields are stored as integers.  Unknown fields are ignored.
"""

from pydantic import BaseModel

RESOURCE_MODEL_CONFIG = {
    "extra": "ignore",
    "coerce_numbers_to_str": True,
    "populate_by_name": True,
}


class ResourceModel(BaseModel):
    model_config = RESOURCE_MODEL_CONFIG
