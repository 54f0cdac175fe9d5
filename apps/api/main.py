"""
Storefront Orders - Main FastAPI Application.

REST API for the order lifecycle and payment reconciliation flow.
"""
from contextlib import asynccontextmanager
from typing import Optional
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from apps.api.errors import register_exception_handlers
from apps.api.v1.endpoints import admin, notifications, orders, payments, webhooks
from core.application.interfaces import IPaymentGateway
from core.application.services import (
    NotificationEmitter,
    NotificationInboxService,
    OrderLifecycleService,
    PaymentCoordinator,
    RefundService,
)
from core.infrastructure.adapters.payments import create_payment_gateway
from core.infrastructure.database import Database
from core.infrastructure.logging import configure_logging
from core.infrastructure.security import BearerTokenVerifier, FixedWindowRateLimiter, RateLimitRule
from core.settings import AppSettings, get_app_settings


# Setup logging
configure_logging()
logger = logging.getLogger(__name__)


def create_rate_limiter(settings: AppSettings) -> FixedWindowRateLimiter:
    rl = settings.rate_limit
    return FixedWindowRateLimiter(
        rules={
            "api": RateLimitRule(window_seconds=rl.api_window_seconds, max_requests=rl.api_max_requests),
            "strict": RateLimitRule(window_seconds=rl.strict_window_seconds, max_requests=rl.strict_max_requests),
        },
        enabled=rl.enabled,
    )


def create_app(
    settings: Optional[AppSettings] = None,
    database: Optional[Database] = None,
    gateway: Optional[IPaymentGateway] = None,
) -> FastAPI:
    """
    Build the application and its process-lifetime collaborators.

    The database, gateway, rate limiter and services are created here once
    and stored on `app.state`; route dependencies read them from there.
    """
    settings = settings or get_app_settings()
    database = database or Database(settings.database)
    gateway = gateway or create_payment_gateway(settings.razorpay)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("🚀 Storefront Orders API starting up...")
        if settings.database.create_tables:
            await database.create_tables()
        yield
        await database.dispose()
        logger.info("👋 Storefront Orders API shutting down...")

    app = FastAPI(
        title="Storefront Orders API",
        description="Order lifecycle, payments (Razorpay) and notifications.",
        version="1.0.0",
        lifespan=lifespan,
    )

    # =========================================================================
    # PROCESS-LIFETIME COLLABORATORS
    # =========================================================================

    emitter = NotificationEmitter(best_effort=settings.notifications.best_effort)
    session_factory = database.session_factory

    app.state.settings = settings
    app.state.database = database
    app.state.gateway = gateway
    app.state.rate_limiter = create_rate_limiter(settings)
    app.state.token_verifier = BearerTokenVerifier(
        secret=settings.auth.jwt_secret,
        leeway_seconds=settings.auth.leeway_seconds,
    )
    app.state.order_service = OrderLifecycleService(session_factory, emitter)
    app.state.payment_coordinator = PaymentCoordinator(
        session_factory, gateway, emitter, currency=settings.razorpay.currency
    )
    app.state.refund_service = RefundService(session_factory, emitter)
    app.state.inbox_service = NotificationInboxService(session_factory)

    # =========================================================================
    # MIDDLEWARE
    # =========================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all requests with timing."""
        start_time = time.time()
        logger.info(f"→ {request.method} {request.url.path}")

        response = await call_next(request)

        duration = time.time() - start_time
        logger.info(
            f"← {request.method} {request.url.path} "
            f"[{response.status_code}] ({duration:.3f}s)"
        )
        return response

    register_exception_handlers(app)

    # =========================================================================
    # ROUTERS
    # =========================================================================

    app.include_router(orders.router, prefix="/api/v1")
    app.include_router(payments.router, prefix="/api/v1")
    app.include_router(webhooks.router, prefix="/api/v1")
    app.include_router(notifications.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint.

        Returns:
            Health status
        """
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
