"""Invoicing use cases"""
from .create_invoice import CreateInvoice
from .get_invoice import GetInvoice
from .list_invoices import ListInvoices
from .delete_invoice import DeleteInvoice
from .set_invoice_status import SetInvoiceStatus
from .render_invoice import RenderInvoice
from .get_dashboard_stats import GetDashboardStats
from .dtos import (
    LineItemDTO,
    CreateInvoiceCommandDTO,
    InvoiceCreatedDTO,
    InvoiceItemDTO,
    InvoiceSummaryDTO,
    InvoiceDetailDTO,
    ListInvoicesResponseDTO,
    SetInvoiceStatusCommandDTO,
    InvoiceStatusDTO,
    RenderedInvoiceDTO,
    DashboardStatsDTO,
)

__all__ = [
    "CreateInvoice",
    "GetInvoice",
    "ListInvoices",
    "DeleteInvoice",
    "SetInvoiceStatus",
    "RenderInvoice",
    "GetDashboardStats",
    "LineItemDTO",
    "CreateInvoiceCommandDTO",
    "InvoiceCreatedDTO",
    "InvoiceItemDTO",
    "InvoiceSummaryDTO",
    "InvoiceDetailDTO",
    "ListInvoicesResponseDTO",
    "SetInvoiceStatusCommandDTO",
    "InvoiceStatusDTO",
    "RenderedInvoiceDTO",
    "DashboardStatsDTO",
]
