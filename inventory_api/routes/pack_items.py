from typing import List, Union

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory_api.database import get_db
from inventory_api.routes.deps import IdPath, patch_changes, require_rows
from inventory_api.services.packs import PackItemService
from inventory_api.utils.responses import respond, serialize
from inventory_api.schemas.pack import PackItemCreate, PackItemUpdate, PackItemOut

router = APIRouter(prefix="/pack-items", tags=["Pack items"])


@router.get("/")
def list_pack_items(db: Session = Depends(get_db)):
    items = require_rows(PackItemService(db).list(), "No se encontraron items de packs.")
    return respond("Items de packs obtenidos correctamente.", serialize(PackItemOut, items))


@router.get("/pack/{pack_id}")
def list_items_of_pack(pack_id: IdPath, db: Session = Depends(get_db)):
    items = require_rows(PackItemService(db).by_pack(pack_id), "El pack no tiene items.")
    return respond("Items del pack obtenidos correctamente.", serialize(PackItemOut, items))


@router.get("/{pack_item_id}")
def get_pack_item(pack_item_id: IdPath, db: Session = Depends(get_db)):
    item = PackItemService(db).get_or_404(pack_item_id)
    return respond("Item de pack obtenido correctamente.", serialize(PackItemOut, item))


# Accepts one line or a list; a line for a product already in the pack adds to its quantity
@router.post("/")
def create_pack_items(payload: Union[PackItemCreate, List[PackItemCreate]], db: Session = Depends(get_db)):
    service = PackItemService(db)
    if isinstance(payload, list):
        items, created = service.add_many([line.model_dump() for line in payload])
        data = serialize(PackItemOut, items)
    else:
        item, created = service.add(payload.pack_id, payload.product_id, payload.quantity)
        data = serialize(PackItemOut, item)

    if created:
        return respond("Item de pack creado correctamente.", data, 201)
    return respond("Cantidad del item de pack actualizada correctamente.", data)


@router.put("/{pack_item_id}")
def update_pack_item(pack_item_id: IdPath, payload: PackItemUpdate, db: Session = Depends(get_db)):
    item = PackItemService(db).update(pack_item_id, patch_changes(payload))
    return respond("Item de pack actualizado correctamente.", serialize(PackItemOut, item))


@router.delete("/{pack_item_id}")
def delete_pack_item(pack_item_id: IdPath, db: Session = Depends(get_db)):
    service = PackItemService(db)
    data = serialize(PackItemOut, service.get_or_404(pack_item_id))
    service.delete(pack_item_id)
    return respond("Item de pack eliminado correctamente.", data)
