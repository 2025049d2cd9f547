"""Request schemas for profile and client endpoints"""

from typing import Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class UpdateProfileRequestSchema(BaseModel):
    """
    Request schema for PATCH /profile

    All four fields are replaced; omitted fields are cleared.
    """

    business_name: Optional[str] = Field(default=None)
    business_address: Optional[str] = Field(default=None)
    business_phone: Optional[str] = Field(default=None)
    business_email: Optional[str] = Field(default=None)

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "businessName": "Studio Nine",
                "businessAddress": "9 Harbour Road",
                "businessPhone": "+1 555 0100",
                "businessEmail": "hello@studionine.test"
            }
        }


class CreateClientRequestSchema(BaseModel):
    name: str = Field(default="", description="Client name (required, non-empty)")
    email: Optional[str] = Field(default=None)
    address: Optional[str] = Field(default=None)
    phone: Optional[str] = Field(default=None)
