"""Request schemas for the Client API"""

from typing import List, Optional
from pydantic import BaseModel, EmailStr, Field


class ClientRequestSchema(BaseModel):
    """
    Request schema for creating or updating a client

    company_ids must name at least one company; on update it replaces the
    client's links.
    """

    name: str = Field(..., min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=50)
    company_ids: List[int] = Field(..., min_length=1)

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Acme Corp",
                "email": "billing@acme-corp.io",
                "phone": "+1 555 0100",
                "company_ids": [1],
            }
        }
