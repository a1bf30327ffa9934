from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory_api.database import get_db
from inventory_api.routes.deps import IdPath, patch_changes, require_rows
from inventory_api.services.catalog import PaymentMethodService
from inventory_api.utils.responses import respond, serialize
from inventory_api.schemas.catalog import PaymentMethodCreate, PaymentMethodUpdate, PaymentMethodOut

router = APIRouter(prefix="/payment-methods", tags=["Payment methods"])


@router.get("/")
def list_payment_methods(db: Session = Depends(get_db)):
    methods = require_rows(PaymentMethodService(db).list(), "No se encontraron métodos de pago.")
    return respond("Métodos de pago obtenidos correctamente.", serialize(PaymentMethodOut, methods))


@router.get("/{payment_method_id}")
def get_payment_method(payment_method_id: IdPath, db: Session = Depends(get_db)):
    method = PaymentMethodService(db).get_or_404(payment_method_id)
    return respond("Método de pago obtenido correctamente.", serialize(PaymentMethodOut, method))


@router.post("/")
def create_payment_method(payload: PaymentMethodCreate, db: Session = Depends(get_db)):
    method = PaymentMethodService(db).create(payload.model_dump())
    return respond("Método de pago creado correctamente.", serialize(PaymentMethodOut, method), 201)


@router.patch("/{payment_method_id}")
def update_payment_method(payment_method_id: IdPath, payload: PaymentMethodUpdate, db: Session = Depends(get_db)):
    method = PaymentMethodService(db).update(payment_method_id, patch_changes(payload))
    return respond("Método de pago actualizado correctamente.", serialize(PaymentMethodOut, method))


@router.delete("/{payment_method_id}")
def delete_payment_method(payment_method_id: IdPath, db: Session = Depends(get_db)):
    service = PaymentMethodService(db)
    data = serialize(PaymentMethodOut, service.get_or_404(payment_method_id))
    service.delete(payment_method_id)
    return respond("Método de pago eliminado correctamente.", data)
