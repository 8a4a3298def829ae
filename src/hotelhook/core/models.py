"""Pydantic models for HotelHook."""

from typing import Any

from pydantic import BaseModel, Field


class Promotion(BaseModel):
    """A hotel promotion."""

    id: str = Field(..., description="Promotion identifier (e.g., 'PROM001')")
    name: str = Field(..., description="Display name")
    description: str = Field(default="", description="Guest-facing description")
    discount_percentage: float = Field(..., description="Discount applied to the stay total")
    valid_from: str = Field(..., description="First valid day (YYYY-MM-DD)")
    valid_until: str = Field(..., description="Last valid day (YYYY-MM-DD)")
    min_nights: int | None = Field(default=None, description="Minimum stay length")
    is_active: bool = Field(default=True, description="Whether the promotion can be used")
    applicable_room_types: list[str] = Field(
        default_factory=list, description="Room types the promotion applies to"
    )


class Room(BaseModel):
    """A room category with its inventory."""

    room_id: str = Field(..., description="Room identifier (e.g., 'ROOM001')")
    type: str = Field(..., description="Room type key (standard, deluxe, suite)")
    name: str = Field(..., description="Display name")
    description: str = Field(default="", description="Guest-facing description")
    base_price_per_night: float = Field(..., description="Nightly rate")
    max_occupancy: int = Field(..., description="Maximum number of guests")
    available_count: int = Field(default=0, description="Rooms of this type still available")
    amenities: list[str] = Field(default_factory=list, description="Included amenities")


class AppliedPromotion(BaseModel):
    """Promotion summary stored on a reservation."""

    id: str
    name: str
    discount_percentage: float


class Reservation(BaseModel):
    """A confirmed reservation."""

    reservation_id: str = Field(..., description="Reservation identifier (format: RES-XXXX)")
    guest_name: str
    guest_email: str
    guest_phone: str
    room_type: str
    room_name: str
    check_in_date: str
    check_out_date: str
    nights: int
    base_price: float = Field(..., description="Price before discount")
    discount: float = Field(default=0.0, description="Discount amount")
    total_price: float = Field(..., description="Price after discount")
    promotion: AppliedPromotion | None = None
    status: str = Field(default="confirmed")
    created_at: str = Field(default="", description="Creation timestamp (ISO 8601)")


class Contact(BaseModel):
    """An entry of the hotel phone directory."""

    area: str = Field(..., description="Area key (recepcion, piscina, ...)")
    name: str
    position: str = ""
    phone: str = ""
    extension: str = ""
    email: str = ""
    schedule: str = ""


class WebhookPayload(BaseModel):
    """Body of an inbound webhook.

    Either a verification request (``type`` + ``challenge``) or a generic
    use case invocation (``metadata`` + ``arguments``).
    """

    type: str | None = Field(default=None, description="'webhook_verification' for handshakes")
    challenge: Any = Field(default=None, description="Value to echo during verification")
    metadata: dict[str, Any] | None = Field(
        default=None, description="Invocation metadata; must contain use_case_id"
    )
    arguments: Any = Field(default=None, description="Loosely-typed argument bag")

    @property
    def is_verification(self) -> bool:
        return self.type == "webhook_verification"

    @property
    def is_use_case(self) -> bool:
        return self.metadata is not None and "arguments" in self.model_fields_set
