"""Invoice and play-catalog file loading.

Accepts JSON (``.json``) or YAML (``.yaml``/``.yml``). Every failure,
whether the file is missing, unparseable, or the wrong shape, surfaces as
:class:`InvalidInputError` naming the file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from playbill.domain.errors import InvalidInputError
from playbill.domain.models import Invoice, Play

logger = logging.getLogger(__name__)

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def _read_document(path: Path) -> Any:
    """Parse *path* as JSON or YAML according to its suffix."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InvalidInputError(str(path), exc.strerror or "unreadable") from exc
    except UnicodeDecodeError as exc:
        raise InvalidInputError(str(path), "not valid UTF-8") from exc

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            return YAML(typ="safe").load(raw)
        return json.loads(raw)
    except (json.JSONDecodeError, YAMLError) as exc:
        raise InvalidInputError(str(path), f"parse error: {exc}") from exc


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err["loc"])
    return f"{loc}: {err['msg']}" if loc else err["msg"]


def load_invoice(path: Path) -> Invoice:
    """Load one invoice. A top-level list of invoices yields its first entry."""
    data = _read_document(path)
    if isinstance(data, list):
        if not data:
            raise InvalidInputError(str(path), "no invoices in file")
        data = data[0]
    try:
        invoice = Invoice.model_validate(data)
    except ValidationError as exc:
        raise InvalidInputError(str(path), _first_error(exc)) from exc
    logger.debug("Loaded invoice for %s from %s", invoice.customer, path)
    return invoice


def load_catalog(path: Path) -> dict[str, Play]:
    """Load a play catalog keyed by play ID."""
    data = _read_document(path)
    if not isinstance(data, dict):
        raise InvalidInputError(str(path), "expected a mapping of play ID to play")
    catalog: dict[str, Play] = {}
    for play_id, entry in data.items():
        try:
            catalog[str(play_id)] = Play.model_validate(entry)
        except ValidationError as exc:
            raise InvalidInputError(str(path), f"{play_id}: {_first_error(exc)}") from exc
    logger.debug("Loaded %d plays from %s", len(catalog), path)
    return catalog
