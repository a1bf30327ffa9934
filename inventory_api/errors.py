"""Application errors carried up to the HTTP boundary."""

FAILED = "Operación fallida."


class AppError(Exception):
    """Base error with an explicit HTTP status and an optional payload."""
    def __init__(self, message, status_code=400, data=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.data = data if data is not None else []

    def to_dict(self):
        return {"status": FAILED, "message": self.message, "data": self.data}


class NotFoundError(AppError):
    """Raised when a referenced entity does not exist, or a collection is empty."""
    def __init__(self, message="Registro no encontrado.", data=None):
        super().__init__(message, 404, data)


class BusinessRuleError(AppError):
    """Raised for business rule violations (duplicates, entities still in use)."""
    def __init__(self, message, data=None):
        super().__init__(message, 400, data)


class InsufficientStockError(BusinessRuleError):
    """Raised when a stock decrement would leave a product below zero."""
    def __init__(self, message="No hay suficiente stock disponible.", product_id=None):
        super().__init__(message, data={"product_id": product_id} if product_id else None)
        self.product_id = product_id
