"""FastAPI webhook server for the hotel simulator.

Run:
    hotelhook serve --port 3000

POST /webhook accepts two payload shapes:

- verification: {"type": "webhook_verification", "challenge": "..."}
- use case:     {"metadata": {"use_case_id": "...", ...}, "arguments": {...}}
"""

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import Body, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, Field, ValidationError

from hotelhook import __version__
from hotelhook.core.config import HotelHookConfig
from hotelhook.core.models import WebhookPayload
from hotelhook.wiring import HotelRuntime, bootstrap

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = [
    'webhook_verification: { type: "webhook_verification", challenge: "..." }',
    "generic_use_case: { metadata: {...}, arguments: {...} }",
]

LOGGED_HEADERS = ("content-type", "x-roddy-timestamp", "x-roddy-webhook-id")
SIGNATURE_HEADER = "x-roddy-signature"


class HealthResponse(BaseModel):
    """Liveness report."""

    status: str = Field(..., examples=["ok"])
    timestamp: str = Field(..., description="Server time (ISO 8601, UTC)")
    message: str
    use_cases: list[str] = Field(default_factory=list, description="Registered use case ids")


class UseCaseInfo(BaseModel):
    id: str
    name: str


def _masked_signature(value: str | None) -> str:
    if not value:
        return "N/A"
    return "***" + value[-8:]


def _log_request(request: Request, body: Any) -> None:
    headers = {name: request.headers.get(name, "N/A") for name in LOGGED_HEADERS}
    headers[SIGNATURE_HEADER] = _masked_signature(request.headers.get(SIGNATURE_HEADER))
    logger.info("webhook.request: %s %s headers=%s", request.method, request.url.path, headers)
    logger.debug("webhook.body: %r", body)


def _unknown_format(body: Any) -> JSONResponse:
    keys = list(body) if isinstance(body, dict) else []
    logger.warning("webhook.unknown_format: keys=%s", keys)
    return JSONResponse(
        status_code=400,
        content={
            "error": "Unknown webhook format",
            "received_body_keys": keys,
            "supported_formats": SUPPORTED_FORMATS,
        },
    )


def create_app(runtime: HotelRuntime | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        runtime: Assembled application graph (defaults to one configured
            from the environment and ``.env``)
    """
    runtime = runtime or bootstrap(HotelHookConfig.from_env())
    config = runtime.config

    app = FastAPI(
        title=config.service_name,
        description="Webhook backend answering hotel use cases "
        "(promotions, room prices, reservations, phone directory).",
        version=__version__,
    )
    app.state.runtime = runtime

    @app.exception_handler(RequestValidationError)
    async def malformed_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("webhook.malformed: %s", exc.errors())
        return JSONResponse(
            status_code=400,
            content={
                "error": "Malformed request body",
                "received_body_keys": [],
                "supported_formats": SUPPORTED_FORMATS,
            },
        )

    @app.post("/webhook", tags=["Webhook"], summary="Receive a webhook")
    def webhook(request: Request, body: Any = Body(default=None)):
        """Handle verification handshakes and use case invocations."""
        _log_request(request, body)

        if not isinstance(body, dict):
            return _unknown_format(body)

        try:
            payload = WebhookPayload.model_validate(body)
        except ValidationError:
            return _unknown_format(body)

        if payload.is_verification:
            if not payload.challenge:
                logger.error("webhook.verification_failed: missing challenge")
                return JSONResponse(
                    status_code=400,
                    content={"error": "Missing challenge field in request body"},
                )
            logger.info("webhook.verified")
            return {"challenge": payload.challenge}

        if not payload.is_use_case:
            return _unknown_format(body)

        use_case_id = payload.metadata.get("use_case_id")
        if not use_case_id:
            logger.error("webhook.rejected: use_case_id missing in metadata")
            return JSONResponse(
                status_code=400, content={"error": "Missing use_case_id in metadata"}
            )

        try:
            text = runtime.dispatcher.execute(use_case_id, payload.arguments, payload.metadata)
        except Exception as e:
            logger.exception("webhook.failed: %s", use_case_id)
            return PlainTextResponse(f"Error: {e}", status_code=500)

        return PlainTextResponse(text, status_code=200)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    def health() -> HealthResponse:
        return HealthResponse(
            status="ok",
            timestamp=datetime.now(timezone.utc).isoformat(),
            message=f"{config.service_name} is running",
            use_cases=list(runtime.catalog.keys()),
        )

    @app.get("/", tags=["Health"], summary="Service information")
    def info() -> dict[str, Any]:
        return {
            "message": f"{config.service_name} Backend",
            "endpoints": {
                "POST /webhook": "Receives webhooks (verification and generic use cases)",
                "GET /services/status": "Internal service status",
                "GET /health": "Health check",
                "GET /": "This information",
            },
            "supported_use_cases": [
                UseCaseInfo(id=key, name=operation.name).model_dump()
                for key, operation in runtime.catalog.items()
            ],
        }

    @app.get("/services/status", tags=["Debug"], summary="Internal service status")
    def services_status() -> dict[str, Any]:
        services = runtime.services
        promotions = services.promotions.get_all_promotions()
        rooms = services.rooms.get_all_rooms()
        reservations = services.reservations.get_all_reservations()

        return {
            "promotions": {
                "total": len(promotions),
                "active": sum(1 for p in promotions if p.is_active),
                "promotions": [
                    {"id": p.id, "name": p.name, "is_active": p.is_active} for p in promotions
                ],
            },
            "rooms": {
                "total": len(rooms),
                "rooms": [
                    r.model_dump(
                        include={
                            "room_id",
                            "type",
                            "name",
                            "base_price_per_night",
                            "available_count",
                        }
                    )
                    for r in rooms
                ],
            },
            "reservations": {
                "total": len(reservations),
                "recent": [
                    r.model_dump(
                        include={
                            "reservation_id",
                            "guest_name",
                            "room_type",
                            "check_in_date",
                            "total_price",
                            "status",
                        }
                    )
                    for r in reservations[:5]
                ],
            },
            "use_cases": list(runtime.catalog.keys()),
        }

    return app
