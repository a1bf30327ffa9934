from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory_api.database import get_db
from inventory_api.routes.deps import IdPath, require_rows
from inventory_api.services.expenses import ExpenseItemService
from inventory_api.utils.responses import respond, serialize
from inventory_api.schemas.expense import ExpenseItemCreate, ExpenseItemOut

router = APIRouter(prefix="/expense-items", tags=["Expense items"])


@router.get("/")
def list_expense_items(db: Session = Depends(get_db)):
    items = require_rows(ExpenseItemService(db).list(), "No se encontraron items de gastos.")
    return respond("Items de gastos obtenidos correctamente.", serialize(ExpenseItemOut, items))


@router.get("/{expense_item_id}")
def get_expense_item(expense_item_id: IdPath, db: Session = Depends(get_db)):
    item = ExpenseItemService(db).get_or_404(expense_item_id)
    return respond("Item de gasto obtenido correctamente.", serialize(ExpenseItemOut, item))


# Adds the purchased quantity to the product's stock
@router.post("/")
def create_expense_item(payload: ExpenseItemCreate, db: Session = Depends(get_db)):
    item = ExpenseItemService(db).create(payload.model_dump())
    return respond("Item de gasto creado correctamente.", serialize(ExpenseItemOut, item), 201)


# Takes the purchased quantity back out of stock
@router.delete("/{expense_item_id}")
def delete_expense_item(expense_item_id: IdPath, db: Session = Depends(get_db)):
    service = ExpenseItemService(db)
    data = serialize(ExpenseItemOut, service.get_or_404(expense_item_id))
    service.delete(expense_item_id)
    return respond("Item de gasto eliminado correctamente.", data)
