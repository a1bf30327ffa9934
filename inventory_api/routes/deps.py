from typing import Annotated, Any, Dict, Iterable, Sequence

from fastapi import Path
from pydantic import BaseModel

from inventory_api.errors import NotFoundError
from inventory_api.utils.identifiers import UUID_PATTERN

# Path parameter holding an entity identifier
IdPath = Annotated[str, Path(pattern=UUID_PATTERN)]


def require_rows(rows: Sequence, message: str) -> Sequence:
    """Empty collections are reported as 404 with an empty payload."""
    if not rows:
        raise NotFoundError(message)
    return rows


def patch_changes(payload: BaseModel, nullable: Iterable[str] = ()) -> Dict[str, Any]:
    """Fields the client sent. An explicit null clears only the columns listed in `nullable`."""
    changes = payload.model_dump(exclude_unset=True)
    return {key: value for key, value in changes.items() if value is not None or key in nullable}
