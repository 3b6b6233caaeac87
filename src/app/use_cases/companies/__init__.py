"""Company use cases"""
from .create_company import CreateCompany
from .get_company import GetCompany, ListCompanies
from .update_company import UpdateCompany, DeleteCompany
from .dtos import (
    CompanyCommandDTO,
    CompanyResponseDTO,
    CompanyListResponseDTO,
    DeleteCompanyResponseDTO,
)

__all__ = [
    "CreateCompany",
    "GetCompany",
    "ListCompanies",
    "UpdateCompany",
    "DeleteCompany",
    "CompanyCommandDTO",
    "CompanyResponseDTO",
    "CompanyListResponseDTO",
    "DeleteCompanyResponseDTO",
]
