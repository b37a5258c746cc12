"""structlog configuration for nulluuid.

Library modules log through stdlib ``logging.getLogger(__name__)``; the
CLI calls :func:`configure_logging` once so those records are rendered by
structlog, either for humans (default) or as JSON lines (``--log-json``).
Both go to stderr so stdout stays clean for encoded payloads.
"""

from __future__ import annotations

import logging
import sys
import uuid
from typing import Any

import structlog

from nulluuid.domain.nullable import NullUUID


def stringify_uuids(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Render UUID and NullUUID values in canonical text form.

    An absent NullUUID is rendered as None so JSON output shows ``null``.
    """
    for key, val in event_dict.items():
        if isinstance(val, NullUUID):
            event_dict[key] = str(val.value) if val.valid else None
        elif isinstance(val, uuid.UUID):
            event_dict[key] = str(val)
    return event_dict


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        stringify_uuids,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog processors and output routing.

    Idempotent: repeated calls replace the root handler instead of stacking.

    Args:
        verbose: Enable DEBUG-level output for ``nulluuid.*``. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    shared = _shared_processors()
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("nulluuid").setLevel(logging.DEBUG if verbose else logging.WARNING)
    # Engine echo would print every bound UUID parameter.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
