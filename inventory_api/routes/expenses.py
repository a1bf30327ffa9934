from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory_api.database import get_db
from inventory_api.routes.deps import IdPath, require_rows
from inventory_api.services.expenses import ExpenseService
from inventory_api.utils.responses import respond, serialize
from inventory_api.schemas.expense import ExpenseCreate, ExpenseOut, ExpenseItemOut

router = APIRouter(prefix="/expenses", tags=["Expenses"])


@router.get("/")
def list_expenses(db: Session = Depends(get_db)):
    expenses = require_rows(ExpenseService(db).list(), "No se encontraron gastos.")
    return respond("Gastos obtenidos correctamente.", serialize(ExpenseOut, expenses))


@router.get("/{expense_id}")
def get_expense(expense_id: IdPath, db: Session = Depends(get_db)):
    expense = ExpenseService(db).get_or_404(expense_id)
    return respond("Gasto obtenido correctamente.", serialize(ExpenseOut, expense))


@router.get("/{expense_id}/items")
def get_expense_items(expense_id: IdPath, db: Session = Depends(get_db)):
    items = require_rows(ExpenseService(db).items_of(expense_id), "El gasto no tiene items.")
    return respond("Items del gasto obtenidos correctamente.", serialize(ExpenseItemOut, items))


@router.post("/")
def create_expense(payload: ExpenseCreate, db: Session = Depends(get_db)):
    expense = ExpenseService(db).create(payload.model_dump())
    return respond("Gasto creado correctamente.", serialize(ExpenseOut, expense), 201)


@router.delete("/{expense_id}")
def delete_expense(expense_id: IdPath, db: Session = Depends(get_db)):
    service = ExpenseService(db)
    data = serialize(ExpenseOut, service.get_or_404(expense_id))
    service.delete(expense_id)
    return respond("Gasto eliminado correctamente.", data)
