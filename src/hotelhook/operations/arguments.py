"""Typed argument bags for operations.

Callers name the same field in several ways (``guest_name``, ``nombre``,
``nombre_huesped``). Each model lists the accepted names per field with
``AliasChoices``; the first non-empty one wins.
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, model_validator

from hotelhook.utils.exceptions import OperationError

ArgumentsT = TypeVar("ArgumentsT", bound="OperationArguments")


def aliases(*names: str) -> Any:
    """Field accepting any of ``names``, in priority order."""
    return Field(default=None, validation_alias=AliasChoices(*names))


class OperationArguments(BaseModel):
    """Base for argument bags; unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_empty(cls, data: Any) -> Any:
        # Empty values count as absent so the next alias can match
        if isinstance(data, Mapping):
            return {k: v for k, v in data.items() if v is not None and v != ""}
        return data


def parse_arguments(model: type[ArgumentsT], arguments: Mapping[str, Any]) -> ArgumentsT:
    """Validate an argument bag.

    Raises:
        OperationError: If a value has the wrong type
    """
    try:
        return model.model_validate(dict(arguments))
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise OperationError(f"Argumentos inválidos: {problems}") from e


class PromotionArguments(OperationArguments):
    room_type: str | None = aliases("room_type", "tipo_habitacion")
    check_in_date: str | None = aliases("check_in_date", "fecha_entrada")


class RoomPriceArguments(OperationArguments):
    room_type: str | None = aliases("room_type", "tipo_habitacion")
    check_in_date: str | None = aliases("check_in_date", "fecha_entrada")
    check_out_date: str | None = aliases("check_out_date", "fecha_salida")
    nights: int | None = aliases("nights", "noches")


class ReservationArguments(OperationArguments):
    guest_name: str | None = aliases("guest_name", "nombre", "nombre_huesped")
    guest_email: str | None = aliases("guest_email", "email", "correo")
    guest_phone: str | None = aliases("guest_phone", "telefono", "phone")
    room_type: str | None = aliases("room_type", "tipo_habitacion")
    check_in_date: str | None = aliases("check_in_date", "fecha_entrada", "check_in")
    check_out_date: str | None = aliases("check_out_date", "fecha_salida", "check_out")
    promotion_id: str | None = aliases("promotion_id", "promocion_id")

    def missing_required(self) -> list[str]:
        """Names of required fields that were not supplied."""
        required = (
            "guest_name",
            "guest_email",
            "guest_phone",
            "room_type",
            "check_in_date",
            "check_out_date",
        )
        return [name for name in required if not getattr(self, name)]


class ReservationQueryArguments(OperationArguments):
    reservation_id: str | None = aliases("reservation_id", "reservationId")
    guest_email: str | None = aliases("guest_email", "guestEmail", "email")
    status: str | None = aliases("status")
    limit: int = Field(default=10, ge=0, validation_alias=AliasChoices("limit", "limite"))


class DirectoryArguments(OperationArguments):
    area: str | None = aliases("area", "departamento", "department")
    name: str | None = aliases("name", "nombre")
    extension: str | None = aliases("extension", "ext")
    all: bool = Field(default=False, validation_alias=AliasChoices("all", "todos", "todo"))
