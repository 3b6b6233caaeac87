"""Request schemas for the Company API"""

from typing import Optional
from pydantic import BaseModel, Field


class CompanyRequestSchema(BaseModel):
    """
    Request schema for creating or updating a company

    Used for POST /companies and PUT /companies/{company_id}. Logo upload is
    handled elsewhere; only the stored file reference is accepted here.
    """

    name: str = Field(..., min_length=1, max_length=255)
    address: Optional[str] = None
    phone: Optional[str] = Field(default=None, max_length=50)
    logo_path: Optional[str] = Field(default=None, max_length=255)

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Alpa Studio",
                "address": "1 Main Street",
                "logo_path": "company-logos/alpa.png",
            }
        }
