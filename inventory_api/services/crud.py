import logging
from typing import Any, Dict, Generic, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from inventory_api.database import transaction
from inventory_api.errors import NotFoundError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class CrudService(Generic[ModelT]):
    """
    Plain list/get/create/update/delete over one model.

    Subclasses set `model`, `id_field` and the not-found message, and hook
    entity rules into `before_create`, `after_update` and `before_delete`.
    Every mutation commits (or rolls back) as one transaction.
    """

    model: Type[ModelT]
    id_field: str
    not_found_message = "Registro no encontrado."
    order_by: Optional[str] = None

    def __init__(self, db: Session):
        self.db = db

    @property
    def id_column(self):
        return getattr(self.model, self.id_field)

    def query(self):
        q = self.db.query(self.model)
        if self.order_by:
            q = q.order_by(getattr(self.model, self.order_by))
        return q

    def list(self):
        return self.query().all()

    def get(self, obj_id: str) -> Optional[ModelT]:
        return self.db.query(self.model).filter(self.id_column == obj_id).first()

    def get_or_404(self, obj_id: str) -> ModelT:
        obj = self.get(obj_id)
        if obj is None:
            raise NotFoundError(self.not_found_message)
        return obj

    def exists(self, obj_id: str) -> bool:
        return self.db.query(self.id_column).filter(self.id_column == obj_id).first() is not None

    # ---- hooks ----
    def before_create(self, fields: Dict[str, Any]) -> None:
        pass

    def after_update(self, obj: ModelT, changes: Dict[str, Any]) -> None:
        pass

    def before_delete(self, obj: ModelT) -> None:
        pass

    # ---- mutations ----
    def create(self, fields: Dict[str, Any]) -> ModelT:
        self.before_create(fields)
        with transaction(self.db):
            obj = self.model(**fields)
            self.db.add(obj)
        self.db.refresh(obj)
        logger.debug("Created %s %s", self.model.__tablename__, getattr(obj, self.id_field))
        return obj

    def update(self, obj_id: str, changes: Dict[str, Any]) -> ModelT:
        obj = self.get_or_404(obj_id)
        with transaction(self.db):
            previous = {key: getattr(obj, key) for key in changes}
            for key, value in changes.items():
                setattr(obj, key, value)
            self.after_update(obj, {k: (previous[k], v) for k, v in changes.items() if previous[k] != v})
        self.db.refresh(obj)
        return obj

    def delete(self, obj_id: str) -> ModelT:
        obj = self.get_or_404(obj_id)
        with transaction(self.db):
            self.before_delete(obj)
            self.db.delete(obj)
        logger.debug("Deleted %s %s", self.model.__tablename__, obj_id)
        return obj
