# ============================================================================
# FILE: nbd_api/schemas/common.py
# ============================================================================
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    """Base schema: snake_case attributes, camelCase JSON"""

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True

class MessageResponse(BaseModel):
    message: str

class TagResponse(CamelModel):
    id: int
    name: str

class UserSummary(CamelModel):
    """Owner projection attached to releases and songs"""
    username: str
