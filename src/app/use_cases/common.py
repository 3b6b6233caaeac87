"""Error helpers shared by every use case package."""

from typing import Dict, List

from libs.result import Error


def validation_error(errors: Dict[str, List[str]]) -> Error:
    """Field error map in the shape rendered for HTTP 422"""
    return Error(
        code="VALIDATION_ERROR",
        message="The given data was invalid.",
        reason="Request failed validation",
        details=errors,
    )


def not_found_error(entity: str, entity_id: int) -> Error:
    """``<ENTITY>_NOT_FOUND`` error for a missing or soft-deleted record"""
    return Error(
        code=f"{entity.upper()}_NOT_FOUND",
        message=f"{entity.capitalize()} with ID {entity_id} not found",
        reason=f"{entity.capitalize()} does not exist",
    )
