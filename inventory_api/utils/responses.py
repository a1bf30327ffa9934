from typing import Any, Iterable, Type, Union

from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel

SUCCESS = "Operación exitosa."


def serialize(schema: Type[BaseModel], obj: Union[Any, Iterable[Any]]):
    """Dump ORM rows through a response schema, keeping the JSON-ready values."""
    if isinstance(obj, (list, tuple)):
        return [schema.model_validate(o).model_dump(mode="json") for o in obj]
    return schema.model_validate(obj).model_dump(mode="json")


def respond(message: str, data: Any = None, status_code: int = 200) -> JSONResponse:
    body = {
        "status": SUCCESS,
        "message": message,
        "data": jsonable_encoder(data if data is not None else []),
    }
    return JSONResponse(status_code=status_code, content=body)
