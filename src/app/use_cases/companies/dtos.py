"""Data Transfer Objects for Company Use Cases"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class CompanyCommandDTO(BaseModel):
    """Command DTO for creating or updating a company"""

    name: str = Field(..., min_length=1, max_length=255)
    address: Optional[str] = Field(default=None)
    phone: Optional[str] = Field(default=None, max_length=50)
    logo_path: Optional[str] = Field(
        default=None,
        max_length=255,
        description="Reference to an already stored logo file"
    )


class CompanyResponseDTO(BaseModel):
    company_id: int
    name: str
    address: Optional[str] = None
    phone: Optional[str] = None
    logo_path: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        json_schema_extra = {
            "example": {
                "company_id": 1,
                "name": "Alpa Studio",
                "address": "1 Main Street",
                "phone": None,
                "logo_path": "company-logos/alpa.png",
                "created_at": "2025-03-01T10:00:00Z",
                "updated_at": "2025-03-01T10:00:00Z",
            }
        }


class CompanyListResponseDTO(BaseModel):
    data: List[CompanyResponseDTO] = Field(default_factory=list)
    total: int = 0


class DeleteCompanyResponseDTO(BaseModel):
    company_id: int
    message: str


def build_company_response(company) -> CompanyResponseDTO:
    return CompanyResponseDTO(
        company_id=company.id,
        name=company.name,
        address=company.address,
        phone=company.phone,
        logo_path=company.logo_path,
        created_at=company.created_at,
        updated_at=company.updated_at,
    )
