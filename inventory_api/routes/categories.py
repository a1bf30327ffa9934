from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory_api.database import get_db
from inventory_api.routes.deps import IdPath, patch_changes, require_rows
from inventory_api.services.catalog import CategoryService
from inventory_api.utils.responses import respond, serialize
from inventory_api.schemas.category import CategoryCreate, CategoryUpdate, CategoryOut

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("/")
def list_categories(db: Session = Depends(get_db)):
    categories = require_rows(CategoryService(db).list(), "No se encontraron categorías.")
    return respond("Categorías obtenidas correctamente.", serialize(CategoryOut, categories))


@router.get("/{category_id}")
def get_category(category_id: IdPath, db: Session = Depends(get_db)):
    category = CategoryService(db).get_or_404(category_id)
    return respond("Categoría obtenida correctamente.", serialize(CategoryOut, category))


@router.post("/")
def create_category(payload: CategoryCreate, db: Session = Depends(get_db)):
    category = CategoryService(db).create(payload.model_dump())
    return respond("Categoría creada correctamente.", serialize(CategoryOut, category), 201)


@router.patch("/{category_id}")
def update_category(category_id: IdPath, payload: CategoryUpdate, db: Session = Depends(get_db)):
    category = CategoryService(db).update(category_id, patch_changes(payload, nullable=("description",)))
    return respond("Categoría actualizada correctamente.", serialize(CategoryOut, category))


@router.delete("/{category_id}")
def delete_category(category_id: IdPath, db: Session = Depends(get_db)):
    service = CategoryService(db)
    data = serialize(CategoryOut, service.get_or_404(category_id))
    service.delete(category_id)
    return respond("Categoría eliminada correctamente.", data)
