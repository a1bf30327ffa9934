from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import BaseModel, Field, AfterValidator

from inventory_api.schemas.common import ORMBase, UUIDStr, check_long_text

CategoryDescription = Annotated[Optional[str], AfterValidator(lambda v: check_long_text(v, min_length=5))]


class CategoryCreate(BaseModel):
    name: str = Field(min_length=3)
    description: CategoryDescription = None


class CategoryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=3)
    description: CategoryDescription = None


class CategoryOut(ORMBase):
    category_id: str
    name: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime


# Product <-> category links
class ProductCategoryCreate(BaseModel):
    product_id: UUIDStr
    category_id: UUIDStr


class ProductCategoryUpdate(BaseModel):
    """New side(s) of the relation; a missing field keeps the old value."""
    product_id: Optional[UUIDStr] = None
    category_id: Optional[UUIDStr] = None


class ProductCategoriesBatch(BaseModel):
    product_id: UUIDStr
    category_ids: List[UUIDStr] = Field(min_length=1)


class ProductCategoriesReplace(BaseModel):
    category_ids: List[UUIDStr]
