# inventory_api/routes/packs.py
from typing import List, Union

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from inventory_api.database import get_db
from inventory_api.routes.deps import IdPath, patch_changes, require_rows
from inventory_api.services.packs import PackService, PackStockResolver, PackItemService
from inventory_api.utils.responses import respond, serialize
import inventory_api.schemas.pack as pack_schemas

router = APIRouter(prefix="/packs", tags=["Packs"])


@router.get("/")
def list_packs(db: Session = Depends(get_db)):
    packs = require_rows(PackService(db).list(), "No se encontraron packs.")
    return respond("Packs obtenidos correctamente.", serialize(pack_schemas.PackOut, packs))


@router.get("/{pack_id}")
def get_pack(pack_id: IdPath, db: Session = Depends(get_db)):
    pack = PackService(db).get_or_404(pack_id)
    return respond("Pack obtenido correctamente.", serialize(pack_schemas.PackOut, pack))


# Recipe lines joined with the current product data
@router.get("/{pack_id}/products")
def get_pack_products(pack_id: IdPath, db: Session = Depends(get_db)):
    PackService(db).get_or_404(pack_id)
    rows = require_rows(PackStockResolver(db).pack_products(pack_id), "El pack no tiene productos.")
    return respond(
        "Productos del pack obtenidos correctamente.",
        [pack_schemas.PackProductOut(**row).model_dump() for row in rows],
    )


@router.get("/{pack_id}/availability")
def get_pack_availability(pack_id: IdPath, quantity: int = Query(1, ge=1), db: Session = Depends(get_db)):
    PackService(db).get_or_404(pack_id)
    available = PackStockResolver(db).has_sufficient_stock(pack_id, quantity)
    data = pack_schemas.PackAvailabilityOut(pack_id=pack_id, quantity=quantity, available=available)
    return respond("Disponibilidad del pack calculada correctamente.", data.model_dump())


@router.post("/")
def create_pack(payload: pack_schemas.PackCreate, db: Session = Depends(get_db)):
    pack = PackService(db).create(payload.model_dump())
    return respond("Pack creado correctamente.", serialize(pack_schemas.PackOut, pack), 201)


@router.post("/{pack_id}/items")
def add_pack_items(
    pack_id: IdPath,
    payload: Union[pack_schemas.PackItemForPack, List[pack_schemas.PackItemForPack]],
    db: Session = Depends(get_db),
):
    lines = payload if isinstance(payload, list) else [payload]
    items, created = PackItemService(db).add_many(
        [{"pack_id": pack_id, **line.model_dump()} for line in lines]
    )
    data = serialize(pack_schemas.PackItemOut, items)
    if not isinstance(payload, list):
        data = data[0]
    return respond("Items agregados al pack correctamente.", data, 201 if created else 200)


@router.patch("/{pack_id}")
def update_pack(pack_id: IdPath, payload: pack_schemas.PackUpdate, db: Session = Depends(get_db)):
    pack = PackService(db).update(pack_id, patch_changes(payload, nullable=("description", "picture")))
    return respond("Pack actualizado correctamente.", serialize(pack_schemas.PackOut, pack))


@router.delete("/{pack_id}")
def delete_pack(pack_id: IdPath, db: Session = Depends(get_db)):
    service = PackService(db)
    data = serialize(pack_schemas.PackOut, service.get_or_404(pack_id))
    service.delete(pack_id)
    return respond("Pack eliminado correctamente.", data)
