"""Helpers shared by the client use cases."""

from typing import Dict, List, Sequence

from src.app.repositories.company_repository import CompanyRepository


async def find_company_errors(
    company_ids: Sequence[int], company_repo: CompanyRepository
) -> Dict[str, List[str]]:
    """Field error per company_ids entry that is not a live company"""
    existing = await company_repo.get_by_ids(company_ids)
    return {
        f"company_ids.{index}": [f"The selected company_ids.{index} is invalid."]
        for index, company_id in enumerate(company_ids)
        if company_id not in existing
    }
