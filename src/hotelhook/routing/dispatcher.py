"""Use case dispatcher: resolves loose identifiers to catalog operations."""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from hotelhook.routing.catalog import OperationCatalog
from hotelhook.routing.normalizer import normalize, normalize_light
from hotelhook.routing.patterns import PATTERN_TABLE
from hotelhook.routing.response import to_text
from hotelhook.utils.logging import preview

logger = logging.getLogger(__name__)

OPERATION_ERROR_PREFIX = "Error al ejecutar caso de uso"

DIRECTORY_TOKENS = ("directorio",)
TELEPHONE_TOKENS = ("telefonico", "telef")

# (identifier, registered keys) -> selected key or None
Stage = Callable[[str, tuple[str, ...]], str | None]


@dataclass(frozen=True)
class Resolution:
    """Outcome of identifier matching."""

    stage: str
    key: str


def match_exact(identifier: str, keys: tuple[str, ...]) -> str | None:
    """The identifier is itself a registered key."""
    return identifier if identifier in keys else None


def match_normalized_key(identifier: str, keys: tuple[str, ...]) -> str | None:
    """A key equal to the identifier once case and punctuation are ignored."""
    target = normalize(identifier)
    if not target:
        return None

    for key in keys:
        if normalize(key) == target:
            return key
    return None


def _is_directory_phone(light: str) -> bool:
    return any(t in light for t in DIRECTORY_TOKENS) and any(
        t in light for t in TELEPHONE_TOKENS
    )


def match_directory_phone(identifier: str, keys: tuple[str, ...]) -> str | None:
    """Recover the phone directory key from mangled upstream identifiers.

    The upstream system registered this use case as
    ``gen_directorio_telef_nico_<timestamp>`` (the accented 'ó' was replaced
    and a timestamp appended), and the suffix changes between deployments.
    Only the directorio + telef pair is handled here.
    """
    if not _is_directory_phone(normalize_light(identifier)):
        return None

    for key in keys:
        if _is_directory_phone(normalize_light(key)):
            return key
    return None


def matches_category(identifier: str, tokens: tuple[str, ...]) -> bool:
    """Two-way containment test between an identifier and synonym tokens."""
    raw = identifier.lower()
    cleaned = normalize_light(identifier)

    for token in tokens:
        token_clean = normalize_light(token)
        if token_clean in cleaned or cleaned in token_clean:
            return True
        if token in raw or raw in token:
            return True
    return False


def _key_for_tokens(keys: tuple[str, ...], tokens: tuple[str, ...]) -> str | None:
    for key in keys:
        key_lower = key.lower()
        if any(t in key_lower or key_lower in t for t in tokens):
            return key
    return None


def match_pattern(
    identifier: str,
    keys: tuple[str, ...],
    table: Mapping[str, tuple[str, ...]] = PATTERN_TABLE,
) -> str | None:
    """Match the identifier to a synonym category, then the category to a key."""
    for tokens in table.values():
        if matches_category(identifier, tokens):
            key = _key_for_tokens(keys, tokens)
            if key is not None:
                return key
    return None


STAGES: tuple[tuple[str, Stage], ...] = (
    ("exact", match_exact),
    ("normalized_key", match_normalized_key),
    ("directory_phone", match_directory_phone),
    ("pattern", match_pattern),
)


def _as_arguments(arguments: Any) -> dict[Any, Any]:
    if arguments is None:
        return {}
    if isinstance(arguments, Mapping):
        return dict(arguments)
    return {"value": arguments}


class UseCaseDispatcher:
    """Resolves a raw use case identifier and runs the matching operation.

    ``execute`` always returns text: unknown identifiers get a generic
    acknowledgment and operation failures are rendered as an error message.
    """

    def __init__(
        self,
        catalog: OperationCatalog,
        stages: tuple[tuple[str, Stage], ...] = STAGES,
    ):
        """Initialize the dispatcher.

        Args:
            catalog: Registered operations
            stages: Ordered (name, matcher) pairs; the first match wins
        """
        self.catalog = catalog
        self.stages = stages

    def resolve(self, raw_identifier: Any) -> Resolution | None:
        """Select the catalog key for an identifier without running anything."""
        identifier = "" if raw_identifier is None else str(raw_identifier)
        keys = self.catalog.keys()
        searchable = bool(normalize(identifier))

        for stage_name, stage in self.stages:
            # An empty identifier is contained in every token
            if not searchable and stage_name != "exact":
                continue
            key = stage(identifier, keys)
            if key is not None:
                return Resolution(stage=stage_name, key=key)
        return None

    def execute(
        self,
        raw_identifier: Any,
        arguments: Any = None,
        context: Mapping[str, Any] | None = None,
    ) -> str:
        """Run the operation matching ``raw_identifier``.

        Args:
            raw_identifier: Use case id as sent by the caller
            arguments: Argument bag passed to the operation
            context: Invocation metadata (agent id, etc.), used for logging

        Returns:
            Operation output, acknowledgment text, or an error message
        """
        identifier = "" if raw_identifier is None else str(raw_identifier)
        args = _as_arguments(arguments)
        metadata = context if isinstance(context, Mapping) else {}

        logger.info(
            "dispatch.received: use_case_id=%r agent_id=%s argument_keys=%s",
            identifier,
            metadata.get("agent_id", "N/A"),
            list(args),
        )
        logger.debug("dispatch.arguments: %r metadata=%r", args, metadata)

        resolution = self.resolve(identifier)
        if resolution is None:
            logger.warning(
                "dispatch.unmatched: %r (available: %s)",
                identifier,
                ", ".join(self.catalog.keys()),
            )
            return self._acknowledge(identifier, args)

        operation = self.catalog.lookup(resolution.key)
        if operation is None:
            logger.error("dispatch.missing: %s resolved but not registered", resolution.key)
            return f'Error: Caso de uso "{identifier}" no está disponible.'

        logger.info(
            "dispatch.matched: %r -> %s via %s (%s)",
            identifier,
            resolution.key,
            resolution.stage,
            operation.name,
        )

        try:
            response = to_text(operation.execute(args))
        except Exception as e:
            logger.exception("dispatch.failed: %s", resolution.key)
            return f"{OPERATION_ERROR_PREFIX}: {e}"

        logger.info("dispatch.completed: %s -> %s", resolution.key, preview(response))
        return response

    def _acknowledge(self, identifier: str, arguments: dict[Any, Any]) -> str:
        """Generic reply for identifiers that match no operation."""
        summary = ", ".join(f"{key}: {value}" for key, value in arguments.items())
        return (
            f'Caso de uso "{identifier}" ejecutado exitosamente. '
            f"Parámetros recibidos: {summary or 'ninguno'}."
        )
