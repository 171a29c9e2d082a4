"""
Boundary validation for inbound FDA label payloads.

Runs on the raw JSON body of the process-fda-label endpoints before any
persistence logic. Structural problems with the body itself are rejected
with PayloadValidationError; problems inside the label are neutralized in
place and logged as warnings. No HTML stripping or text extraction happens
here.
"""

import logging
from collections.abc import MutableMapping
from typing import Any

from drug_info.constants import LABEL_LIST_FIELDS, LABEL_STRING_FIELDS

logger = logging.getLogger(__name__)


class PayloadValidationError(Exception):
    """Raised when an inbound payload is structurally invalid (HTTP 400)."""

    status_code = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


def validate_process_label_payload(body: Any) -> dict[str, Any]:
    """Check the request shape, then sanitize the label in place.

    Returns the same body object it was given.
    """
    if body is None:
        raise PayloadValidationError("Request body is required")
    if not isinstance(body, MutableMapping):
        raise PayloadValidationError("Request body must be a JSON object")

    fda_label = body.get("fdaLabel")
    if fda_label is not None and not isinstance(fda_label, MutableMapping):
        raise PayloadValidationError("FDA label data must be an object")

    drug_id = body.get("drugId")
    if drug_id is not None and not isinstance(drug_id, str):
        raise PayloadValidationError("Drug ID must be a string")

    sanitize_label_structure(fda_label if fda_label is not None else body)
    return body


def sanitize_label_structure(label: MutableMapping[str, Any]) -> None:
    """Neutralize wrongly typed well-known fields and prune the label."""
    for field in LABEL_STRING_FIELDS:
        value = label.get(field)
        if value is not None and not isinstance(value, str):
            logger.warning("Invalid %s format (%s), skipping", field, type(value).__name__)
            label[field] = None

    for field in LABEL_LIST_FIELDS:
        value = label.get(field)
        if value is not None and not isinstance(value, list):
            logger.warning("Invalid %s format, converting to list", field)
            label[field] = [value] if value else None

    prune_nested(label)


def prune_nested(obj: MutableMapping[str, Any]) -> None:
    """Drop None values and blank list entries throughout *obj*, in place."""
    for key in list(obj):
        value = obj[key]
        if value is None:
            del obj[key]
        elif isinstance(value, MutableMapping):
            prune_nested(value)
        elif isinstance(value, list):
            obj[key] = _prune_list(value)


def _prune_list(items: list[Any]) -> list[Any]:
    pruned = []
    for item in items:
        if item is None:
            continue
        if isinstance(item, str):
            item = item.strip()
            if not item:
                continue
        elif isinstance(item, MutableMapping):
            prune_nested(item)
        pruned.append(item)
    return pruned
