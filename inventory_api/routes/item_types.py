from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from inventory_api.database import get_db
from inventory_api.routes.deps import require_rows
from inventory_api.services.catalog import ItemTypeService
from inventory_api.utils.responses import respond, serialize
from inventory_api.schemas.catalog import ItemTypeCreate, ItemTypeOut

router = APIRouter(prefix="/item-types", tags=["Item types"])

# Seeded types use their kind as id, so these ids are not always UUIDs
ItemTypeId = Annotated[str, Path(min_length=1, max_length=36)]


@router.get("/")
def list_item_types(db: Session = Depends(get_db)):
    item_types = require_rows(ItemTypeService(db).list(), "No se encontraron tipos de item.")
    return respond("Tipos de item obtenidos correctamente.", serialize(ItemTypeOut, item_types))


@router.get("/{item_type_id}")
def get_item_type(item_type_id: ItemTypeId, db: Session = Depends(get_db)):
    item_type = ItemTypeService(db).get_or_404(item_type_id)
    return respond("Tipo de item obtenido correctamente.", serialize(ItemTypeOut, item_type))


@router.post("/")
def create_item_type(payload: ItemTypeCreate, db: Session = Depends(get_db)):
    item_type = ItemTypeService(db).create(payload.model_dump())
    return respond("Tipo de item creado correctamente.", serialize(ItemTypeOut, item_type), 201)


@router.put("/{item_type_id}")
def update_item_type(item_type_id: ItemTypeId, payload: ItemTypeCreate, db: Session = Depends(get_db)):
    item_type = ItemTypeService(db).update(item_type_id, payload.model_dump())
    return respond("Tipo de item actualizado correctamente.", serialize(ItemTypeOut, item_type))


@router.delete("/{item_type_id}")
def delete_item_type(item_type_id: ItemTypeId, db: Session = Depends(get_db)):
    service = ItemTypeService(db)
    data = serialize(ItemTypeOut, service.get_or_404(item_type_id))
    service.delete(item_type_id)
    return respond("Tipo de item eliminado correctamente.", data)
