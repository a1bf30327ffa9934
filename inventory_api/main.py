# inventory_api/main.py
import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

load_dotenv()

from inventory_api.config import settings
from inventory_api.database import init_db
from inventory_api.errors import AppError, FAILED
from inventory_api.utils.responses import SUCCESS

# Routers
from inventory_api.routes.products import router as products_router
from inventory_api.routes.categories import router as categories_router
from inventory_api.routes.product_categories import router as product_categories_router
from inventory_api.routes.packs import router as packs_router
from inventory_api.routes.pack_items import router as pack_items_router
from inventory_api.routes.payment_methods import router as payment_methods_router
from inventory_api.routes.item_types import router as item_types_router
from inventory_api.routes.expenses import router as expenses_router
from inventory_api.routes.expense_items import router as expense_items_router
from inventory_api.routes.orders import router as orders_router
from inventory_api.routes.detail_orders import router as detail_orders_router
from inventory_api.routes.stock import router as stock_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Error interno del servidor."


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


app = FastAPI(title="Inventory API", version="1.0.0", lifespan=lifespan)

# CORS Configuration
origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
]
if settings.FRONTEND_URL:
    origins.append(settings.FRONTEND_URL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =========================
#  ERROR HANDLERS
# =========================
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# Spanish text for pydantic's built-in error types, formatted with the error's ctx
VALIDATION_MESSAGES = {
    "missing": "El campo es obligatorio.",
    "greater_than_equal": "El valor debe ser mayor o igual a {ge}.",
    "greater_than": "El valor debe ser mayor a {gt}.",
    "less_than_equal": "El valor debe ser menor o igual a {le}.",
    "less_than": "El valor debe ser menor a {lt}.",
    "string_too_short": "Debe tener al menos {min_length} caracteres.",
    "string_too_long": "Debe tener como máximo {max_length} caracteres.",
    "too_short": "Debe contener al menos {min_length} elementos.",
    "too_long": "Debe contener como máximo {max_length} elementos.",
    "string_type": "Debe ser un texto.",
    "int_type": "Debe ser un número entero.",
    "int_parsing": "Debe ser un número entero.",
    "int_from_float": "Debe ser un número entero.",
    "float_type": "Debe ser un número.",
    "float_parsing": "Debe ser un número.",
    "bool_type": "Debe ser verdadero o falso.",
    "bool_parsing": "Debe ser verdadero o falso.",
    "date_type": "Fecha inválida.",
    "date_parsing": "Fecha inválida.",
    "date_from_datetime_parsing": "Fecha inválida.",
    "enum": "Debe ser uno de: {expected}.",
    "literal_error": "Debe ser uno de: {expected}.",
    "list_type": "Debe ser una lista.",
    "dict_type": "Debe ser un objeto.",
    "model_type": "Debe ser un objeto.",
    "model_attributes_type": "Debe ser un objeto.",
    "json_invalid": "El cuerpo de la solicitud no es un JSON válido.",
    "string_pattern_mismatch": "Formato de ID inválido.",
}


def _validation_message(err: dict) -> str:
    kind = err.get("type", "")
    if kind in ("value_error", "assertion_error"):
        # Our own validators already raise with a Spanish message
        msg = err.get("msg", "")
        for prefix in ("Value error, ", "Assertion failed, "):
            if msg.startswith(prefix):
                return msg[len(prefix):]
        return msg
    template = VALIDATION_MESSAGES.get(kind)
    if template is None:
        return "Valor inválido."
    return template.format(**err.get("ctx", {}))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "path", "query")]
        errors.append({"field": ".".join(loc) or "body", "message": _validation_message(err)})
    return JSONResponse(
        status_code=400,
        content={"status": FAILED, "message": "Datos de entrada inválidos.", "data": {"errors": errors}},
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": FAILED, "message": str(exc.detail), "data": []},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"status": INTERNAL_ERROR, "message": INTERNAL_ERROR, "data": []})


# Every resource lives under the API prefix
for router in (
    products_router,
    categories_router,
    product_categories_router,
    packs_router,
    pack_items_router,
    payment_methods_router,
    item_types_router,
    expenses_router,
    expense_items_router,
    orders_router,
    detail_orders_router,
    stock_router,
):
    app.include_router(router, prefix=settings.API_PREFIX)


@app.get("/")
def root():
    return {"status": SUCCESS, "message": "Inventory API is running", "data": []}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("inventory_api.main:app", host=settings.HOST, port=settings.PORT)
