# inventory_api/schemas/common.py
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, AfterValidator

from inventory_api.utils.identifiers import is_uuid


# Base configuration for ORM compatibility
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


def _check_uuid(value: str) -> str:
    if not is_uuid(value):
        raise ValueError("Formato de ID inválido.")
    return value


UUIDStr = Annotated[str, AfterValidator(_check_uuid)]


def check_long_text(value: Optional[str], min_length: int = 10) -> Optional[str]:
    """Free-text descriptions are either empty or at least `min_length` characters."""
    if value is None:
        return value
    trimmed = value.strip()
    if trimmed and len(trimmed) < min_length:
        raise ValueError(f"La descripción debe tener al menos {min_length} caracteres o estar vacía.")
    return value


Description = Annotated[Optional[str], AfterValidator(check_long_text)]
