from typing import Optional
from fastapi import Header, Request, status
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.pdf_renderer import ReportLabInvoiceRenderer
from src.api.error import ClientError

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


def _config(request: Request):
    return getattr(request.app.state, "config", ApplicationConfig)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def get_current_owner(
    request: Request,
    x_account_id: Optional[int] = Header(default=None),
) -> int:
    """Account id verified by the upstream auth service"""
    if x_account_id is not None:
        return x_account_id

    config = _config(request)
    if config.AUTH_DISABLED:
        return int(config.DEFAULT_ACCOUNT_ID)

    raise ClientError(
        Error(code="MISSING_ACCOUNT", message="X-Account-Id header is required"),
        status_code=status.HTTP_401_UNAUTHORIZED,
    )


def get_invoice_renderer(request: Request) -> ReportLabInvoiceRenderer:
    config = _config(request)
    return ReportLabInvoiceRenderer(
        currency_prefix=config.CURRENCY_PREFIX,
        footer_text=config.INVOICE_FOOTER_TEXT,
    )
