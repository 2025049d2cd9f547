"""Error codes shared by the invoicing use cases"""

from typing import List
from libs.result import Error
from src.domain.invoice_aggregate import FieldError

VALIDATION_ERROR = "VALIDATION_ERROR"
INVOICE_NOT_FOUND = "INVOICE_NOT_FOUND"
INVALID_STATUS = "INVALID_STATUS"
INVALID_STATUS_TRANSITION = "INVALID_STATUS_TRANSITION"
RENDER_FAILED = "RENDER_FAILED"


def validation_error(errors: List[FieldError], message: str = "Invalid request") -> Error:
    return Error(
        code=VALIDATION_ERROR,
        message=message,
        reason="; ".join(f"{e.field}: {e.message}" for e in errors),
        details=[
            {"field": e.field, "code": e.code, "message": e.message}
            for e in errors
        ],
    )


def invoice_not_found(invoice_id: int) -> Error:
    # Same error whether the invoice is missing or belongs to someone else
    return Error(
        code=INVOICE_NOT_FOUND,
        message=f"Invoice with ID {invoice_id} not found",
    )
