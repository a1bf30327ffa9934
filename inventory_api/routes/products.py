# inventory_api/routes/products.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory_api.database import get_db
from inventory_api.routes.deps import IdPath, patch_changes, require_rows
from inventory_api.services.products import ProductService
from inventory_api.utils.responses import respond, serialize
import inventory_api.schemas.product as product_schemas

router = APIRouter(prefix="/products", tags=["Products"])


# =========================
#  LECTURA
# =========================
@router.get("/")
def list_products(db: Session = Depends(get_db)):
    products = require_rows(ProductService(db).list(), "No se encontraron productos.")
    return respond(
        "Productos obtenidos correctamente.",
        serialize(product_schemas.ProductWithCategories, products),
    )


@router.get("/{product_id}")
def get_product(product_id: IdPath, db: Session = Depends(get_db)):
    product = ProductService(db).get_or_404(product_id)
    return respond("Producto obtenido correctamente.", serialize(product_schemas.ProductWithCategories, product))


# =========================
#  ESCRITURA
# =========================
@router.post("/")
def create_product(payload: product_schemas.ProductCreate, db: Session = Depends(get_db)):
    product = ProductService(db).create(payload.model_dump())
    return respond("Producto creado correctamente.", serialize(product_schemas.ProductOut, product), 201)


@router.patch("/{product_id}")
def update_product(product_id: IdPath, payload: product_schemas.ProductUpdate, db: Session = Depends(get_db)):
    product = ProductService(db).update(product_id, patch_changes(payload, nullable=("description", "picture")))
    return respond("Producto actualizado correctamente.", serialize(product_schemas.ProductOut, product))


@router.delete("/{product_id}")
def delete_product(product_id: IdPath, db: Session = Depends(get_db)):
    service = ProductService(db)
    data = serialize(product_schemas.ProductOut, service.get_or_404(product_id))
    service.delete(product_id)
    return respond("Producto eliminado correctamente.", data)
