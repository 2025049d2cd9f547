from .unit_of_work import UnitOfWork
from .invoice_renderer import InvoiceRenderer, RenderFailed

__all__ = [
    "UnitOfWork",
    "InvoiceRenderer",
    "RenderFailed",
]
