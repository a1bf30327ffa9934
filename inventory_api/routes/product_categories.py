from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory_api.database import get_db
from inventory_api.routes.deps import IdPath, require_rows
from inventory_api.services.product_categories import ProductCategoryService
from inventory_api.utils.responses import respond, serialize
from inventory_api.schemas.category import (
    CategoryOut, ProductCategoryCreate, ProductCategoryUpdate,
    ProductCategoriesBatch, ProductCategoriesReplace,
)
from inventory_api.schemas.product import ProductOut

router = APIRouter(prefix="/products-category", tags=["Product categories"])


def _link_out(link):
    return {"product_id": link.product_id, "category_id": link.category_id}


@router.get("/products/category/{category_id}")
def products_by_category(category_id: IdPath, db: Session = Depends(get_db)):
    products = require_rows(
        ProductCategoryService(db).products_by_category(category_id),
        "No se encontraron productos para la categoría.",
    )
    return respond("Productos obtenidos correctamente.", serialize(ProductOut, products))


@router.get("/categories/product/{product_id}")
def categories_by_product(product_id: IdPath, db: Session = Depends(get_db)):
    categories = require_rows(
        ProductCategoryService(db).categories_by_product(product_id),
        "No se encontraron categorías para el producto.",
    )
    return respond("Categorías obtenidas correctamente.", serialize(CategoryOut, categories))


@router.post("/")
def assign_category(payload: ProductCategoryCreate, db: Session = Depends(get_db)):
    link = ProductCategoryService(db).assign(payload.product_id, payload.category_id)
    return respond("Categoría asignada al producto correctamente.", _link_out(link), 201)


@router.post("/batch")
def assign_categories(payload: ProductCategoriesBatch, db: Session = Depends(get_db)):
    links = ProductCategoryService(db).assign_many(payload.product_id, payload.category_ids)
    return respond("Categorías asignadas al producto correctamente.", [_link_out(l) for l in links], 201)


@router.patch("/product/{product_id_old}/category/{category_id_old}")
def update_relation(
    product_id_old: IdPath,
    category_id_old: IdPath,
    payload: ProductCategoryUpdate,
    db: Session = Depends(get_db),
):
    link = ProductCategoryService(db).update(
        product_id_old, category_id_old, payload.product_id, payload.category_id
    )
    return respond("Relación producto-categoría actualizada correctamente.", _link_out(link))


@router.patch("/product/{product_id}/categories")
def replace_categories(product_id: IdPath, payload: ProductCategoriesReplace, db: Session = Depends(get_db)):
    categories = ProductCategoryService(db).replace(product_id, payload.category_ids)
    return respond("Categorías del producto actualizadas correctamente.", serialize(CategoryOut, categories))


@router.delete("/product/{product_id}/category/{category_id}")
def unassign_category(product_id: IdPath, category_id: IdPath, db: Session = Depends(get_db)):
    link = ProductCategoryService(db).unassign(product_id, category_id)
    return respond("Categoría desasignada del producto correctamente.", _link_out(link))
