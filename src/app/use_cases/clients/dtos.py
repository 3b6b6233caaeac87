"""Data Transfer Objects for Client Use Cases"""

from datetime import datetime
from typing import List, Optional, Sequence
from pydantic import BaseModel, Field


class ClientCommandDTO(BaseModel):
    """
    Command DTO for creating or updating a client

    company_ids replaces the client's company links entirely.
    """

    name: str = Field(..., min_length=1, max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    company_ids: List[int] = Field(..., min_length=1)


class LinkedCompanyDTO(BaseModel):
    id: int
    name: str


class ClientResponseDTO(BaseModel):
    client_id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    companies: List[LinkedCompanyDTO] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    class Config:
        json_schema_extra = {
            "example": {
                "client_id": 3,
                "name": "Acme Corp",
                "email": "billing@acme.test",
                "phone": "+1 555 0100",
                "companies": [{"id": 1, "name": "Alpa Studio"}],
                "created_at": "2025-03-01T10:00:00Z",
                "updated_at": "2025-03-01T10:00:00Z",
            }
        }


class ClientListResponseDTO(BaseModel):
    data: List[ClientResponseDTO] = Field(default_factory=list)
    total: int = 0


class DeleteClientResponseDTO(BaseModel):
    client_id: int
    message: str


def build_client_response(client, companies: Sequence) -> ClientResponseDTO:
    return ClientResponseDTO(
        client_id=client.id,
        name=client.name,
        email=client.email,
        phone=client.phone,
        companies=[LinkedCompanyDTO(id=c.id, name=c.name) for c in companies],
        created_at=client.created_at,
        updated_at=client.updated_at,
    )
