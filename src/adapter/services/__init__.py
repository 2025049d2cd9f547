from .unit_of_work import SqlAlchemyUnitOfWork
from .pdf_renderer import ReportLabInvoiceRenderer

__all__ = [
    "SqlAlchemyUnitOfWork",
    "ReportLabInvoiceRenderer",
]
