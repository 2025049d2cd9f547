"""Invoice API Routes

FastAPI routes for the invoice lifecycle and PDF export.
"""

import re
from urllib.parse import quote

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.invoice_request import CreateInvoiceRequestSchema, UpdateStatusRequestSchema
from src.app.use_cases.invoicing import (
    CreateInvoice,
    GetInvoice,
    ListInvoices,
    DeleteInvoice,
    SetInvoiceStatus,
    RenderInvoice,
    CreateInvoiceCommandDTO,
    LineItemDTO,
    SetInvoiceStatusCommandDTO,
    InvoiceCreatedDTO,
    InvoiceDetailDTO,
    InvoiceStatusDTO,
    ListInvoicesResponseDTO,
)
from src.app.services.invoice_renderer import InvoiceRenderer
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.issuer_profile_repository import SqlAlchemyIssuerProfileRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_current_owner, get_invoice_renderer
from src.api.error import ClientError

router = APIRouter(prefix="/invoices", tags=["Invoices"])

# Anything outside printable ASCII, plus the characters that end a quoted string
UNSAFE_FILENAME_CHARS = re.compile(r'[^\x20-\x7e]|["\\]')

NOT_FOUND_RESPONSE = {
    "description": "Invoice not found",
    "content": {
        "application/json": {
            "example": {
                "error": {
                    "code": "INVOICE_NOT_FOUND",
                    "message": "Invoice with ID 123 not found"
                }
            }
        }
    }
}


def attachment_disposition(filename: str) -> str:
    """
    Content-Disposition value for a download

    Carries an ASCII-only `filename` for old clients and the exact name as an
    RFC 5987 `filename*` value.
    """
    fallback = UNSAFE_FILENAME_CHARS.sub("_", filename)
    return f'attachment; filename="{fallback}"; filename*=UTF-8\'\'{quote(filename, safe="")}'


@router.post(
    "",
    response_model=InvoiceCreatedDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {
            "description": "Validation error",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "VALIDATION_ERROR",
                            "message": "Invalid invoice",
                            "details": [
                                {"field": "client_name", "code": "EMPTY_CLIENT_NAME", "message": "Client name is required"},
                                {"field": "items[0].rate", "code": "INVALID_LINE_ITEM", "message": "Rate must not be negative"}
                            ]
                        }
                    }
                }
            }
        }
    }
)
async def create_invoice(
    request: CreateInvoiceRequestSchema,
    owner_id: int = Depends(get_current_owner),
    session: AsyncSession = Depends(get_session),
):
    """
    Create an invoice with its line items.

    Subtotal, tax amount and total are computed from the items; the invoice
    starts as `unpaid`.

    **Returns:**
    - 201: Invoice created, body `{"invoiceId": ...}`
    - 400: One or more fields are invalid (all of them are listed)
    """
    uow = SqlAlchemyUnitOfWork(session)
    invoice_repo = SqlAlchemyInvoiceRepository(session)

    command = CreateInvoiceCommandDTO(
        owner_id=owner_id,
        invoice_number=request.invoice_number,
        client_name=request.client_name,
        client_email=request.client_email,
        client_address=request.client_address,
        issue_date=request.issue_date,
        due_date=request.due_date,
        items=[
            LineItemDTO(description=item.description, quantity=item.quantity, rate=item.rate)
            for item in request.items
        ],
        tax_rate=request.tax_rate,
        notes=request.notes,
    )

    use_case = CreateInvoice(uow, invoice_repo)
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.get("", response_model=ListInvoicesResponseDTO)
async def list_invoices(
    owner_id: int = Depends(get_current_owner),
    session: AsyncSession = Depends(get_session),
):
    """List the caller's invoices, most recently created first (no line items)."""
    use_case = ListInvoices(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(owner_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.get(
    "/{invoice_id}",
    response_model=InvoiceDetailDTO,
    responses={404: NOT_FOUND_RESPONSE},
)
async def get_invoice(
    invoice_id: int,
    owner_id: int = Depends(get_current_owner),
    session: AsyncSession = Depends(get_session),
):
    """Get one invoice with totals, status and line items."""
    use_case = GetInvoice(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(owner_id, invoice_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.patch(
    "/{invoice_id}/status",
    response_model=InvoiceStatusDTO,
    responses={
        404: NOT_FOUND_RESPONSE,
        400: {"description": "Status is not unpaid or paid"},
        409: {"description": "Paid invoices cannot go back to unpaid"},
    },
)
async def update_invoice_status(
    invoice_id: int,
    request: UpdateStatusRequestSchema,
    owner_id: int = Depends(get_current_owner),
    session: AsyncSession = Depends(get_session),
):
    """
    Change the payment status of an invoice.

    **Request body:**
    - `status` (required): `unpaid` or `paid`
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = SetInvoiceStatus(uow, SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(
        SetInvoiceStatusCommandDTO(owner_id=owner_id, invoice_id=invoice_id, status=request.status)
    )

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.delete("/{invoice_id}", responses={404: NOT_FOUND_RESPONSE})
async def delete_invoice(
    invoice_id: int,
    owner_id: int = Depends(get_current_owner),
    session: AsyncSession = Depends(get_session),
):
    """Delete an invoice together with its line items."""
    uow = SqlAlchemyUnitOfWork(session)
    use_case = DeleteInvoice(uow, SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(owner_id, invoice_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return {"success": True, "message": "Invoice deleted"}


@router.get(
    "/{invoice_id}/pdf",
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF document"
        },
        404: NOT_FOUND_RESPONSE,
    }
)
async def download_invoice_pdf(
    invoice_id: int,
    owner_id: int = Depends(get_current_owner),
    session: AsyncSession = Depends(get_session),
    renderer: InvoiceRenderer = Depends(get_invoice_renderer),
):
    """
    Download the invoice as a PDF file.

    The file is named `invoice-<invoice number>.pdf`.
    """
    use_case = RenderInvoice(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyIssuerProfileRepository(session),
        renderer,
    )
    result = await use_case.execute(owner_id, invoice_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    document = result.value
    return Response(
        content=document.content,
        media_type=document.media_type,
        headers={
            "Content-Disposition": attachment_disposition(document.filename)
        }
    )
