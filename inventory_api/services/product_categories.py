import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from inventory_api.database import transaction
from inventory_api.errors import NotFoundError, BusinessRuleError
from inventory_api.models.category import Category, ProductCategory
from inventory_api.models.product import Product

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "Producto no encontrado."
CATEGORY_NOT_FOUND = "Categoría no encontrada."
RELATION_NOT_FOUND = "La relación producto-categoría no existe."
RELATION_EXISTS = "El producto ya pertenece a esa categoría."


class ProductCategoryService:
    """Many-to-many links between products and categories."""

    def __init__(self, db: Session):
        self.db = db

    # ---- helpers ----
    def _product(self, product_id: str) -> Product:
        product = self.db.query(Product).filter(Product.product_id == product_id).first()
        if product is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        return product

    def _category(self, category_id: str) -> Category:
        category = self.db.query(Category).filter(Category.category_id == category_id).first()
        if category is None:
            raise NotFoundError(CATEGORY_NOT_FOUND)
        return category

    def _link(self, product_id: str, category_id: str) -> Optional[ProductCategory]:
        return (
            self.db.query(ProductCategory)
            .filter(ProductCategory.product_id == product_id, ProductCategory.category_id == category_id)
            .first()
        )

    # ---- reads ----
    def products_by_category(self, category_id: str) -> List[Product]:
        self._category(category_id)
        return (
            self.db.query(Product)
            .join(ProductCategory, ProductCategory.product_id == Product.product_id)
            .filter(ProductCategory.category_id == category_id)
            .order_by(Product.name)
            .all()
        )

    def categories_by_product(self, product_id: str) -> List[Category]:
        self._product(product_id)
        return (
            self.db.query(Category)
            .join(ProductCategory, ProductCategory.category_id == Category.category_id)
            .filter(ProductCategory.product_id == product_id)
            .order_by(Category.name)
            .all()
        )

    # ---- writes ----
    def assign(self, product_id: str, category_id: str) -> ProductCategory:
        self._product(product_id)
        self._category(category_id)
        if self._link(product_id, category_id) is not None:
            raise BusinessRuleError(RELATION_EXISTS)

        with transaction(self.db):
            link = ProductCategory(product_id=product_id, category_id=category_id)
            self.db.add(link)
        return link

    def update(
        self,
        product_id_old: str,
        category_id_old: str,
        product_id_new: Optional[str] = None,
        category_id_new: Optional[str] = None,
    ) -> ProductCategory:
        product_id_new = product_id_new or product_id_old
        category_id_new = category_id_new or category_id_old

        self._product(product_id_old)
        self._category(category_id_old)
        self._product(product_id_new)
        self._category(category_id_new)

        old = self._link(product_id_old, category_id_old)
        if old is None:
            raise NotFoundError(RELATION_NOT_FOUND)
        if (product_id_new, category_id_new) == (product_id_old, category_id_old):
            return old
        if self._link(product_id_new, category_id_new) is not None:
            raise BusinessRuleError(RELATION_EXISTS)

        with transaction(self.db):
            self.db.delete(old)
            self.db.flush()
            new = ProductCategory(product_id=product_id_new, category_id=category_id_new)
            self.db.add(new)
        return new

    def unassign(self, product_id: str, category_id: str) -> ProductCategory:
        link = self._link(product_id, category_id)
        if link is None:
            raise NotFoundError(RELATION_NOT_FOUND)
        with transaction(self.db):
            self.db.delete(link)
        return link

    def assign_many(self, product_id: str, category_ids: List[str]) -> List[ProductCategory]:
        """Link every given category; links that already exist are left alone."""
        self._product(product_id)
        for category_id in category_ids:
            self._category(category_id)

        created = []
        with transaction(self.db):
            for category_id in dict.fromkeys(category_ids):
                if self._link(product_id, category_id) is None:
                    link = ProductCategory(product_id=product_id, category_id=category_id)
                    self.db.add(link)
                    created.append(link)
        logger.info("Linked product %s to %d new categories", product_id, len(created))
        return created

    def replace(self, product_id: str, category_ids: List[str]) -> List[Category]:
        """Make the product's categories exactly `category_ids`."""
        self._product(product_id)
        wanted = list(dict.fromkeys(category_ids))
        for category_id in wanted:
            self._category(category_id)

        with transaction(self.db):
            current = self.db.query(ProductCategory).filter(ProductCategory.product_id == product_id).all()
            for link in current:
                if link.category_id not in wanted:
                    self.db.delete(link)
            have = {link.category_id for link in current}
            for category_id in wanted:
                if category_id not in have:
                    self.db.add(ProductCategory(product_id=product_id, category_id=category_id))
        return self.categories_by_product(product_id)
