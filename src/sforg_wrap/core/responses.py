"""Typed parsing of ``sf`` JSON responses.

This module is the only place that knows the shape of the Salesforce
CLI's responses.  Only the fields actually consumed are read; the rest
of each document is passed through untouched.

Expected creation response (abridged)::

    {
      "status": 0,
      "result": {
        "scratchOrgInfo": {"Id": "2SR...", ...},
        ...
      }
    }
"""

from __future__ import annotations

import json
from typing import Any

from sforg_wrap.core.models import JobHandle
from sforg_wrap.exceptions import InvalidJsonError, NoJobIdError

# jq renders a missing or null field as this literal.
NULL_MARKER: str = "null"


def load_document(raw: str) -> Any:
    """Parse *raw* as a single JSON value.

    Raises
    ------
    InvalidJsonError
        When *raw* is empty or not valid JSON.
    """
    if not raw.strip():
        raise InvalidJsonError("Response is empty.")
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidJsonError(
            f"Response is not valid JSON: {exc.msg}",
            details=raw,
        ) from exc


def is_valid_document(raw: str) -> bool:
    """Return ``True`` when *raw* parses as a single JSON value."""
    try:
        load_document(raw)
    except InvalidJsonError:
        return False
    return True


def _scratch_org_info_id(document: Any) -> object:
    if not isinstance(document, dict):
        return None
    result = document.get("result")
    if not isinstance(result, dict):
        return None
    info = result.get("scratchOrgInfo")
    if not isinstance(info, dict):
        return None
    return info.get("Id")


def parse_job_handle(raw: str) -> JobHandle:
    """Extract the asynchronous job id from a creation response.

    Reads ``result.scratchOrgInfo.Id``.

    Raises
    ------
    NoJobIdError
        When the response is not JSON, the field is absent, null, empty,
        or the literal ``"null"``.  The raw response is attached as
        details.
    """
    message = "Could not extract job ID from scratch org creation output."
    try:
        document = load_document(raw)
    except InvalidJsonError as exc:
        raise NoJobIdError(message, details=raw.strip() or None) from exc

    job_id = _scratch_org_info_id(document)
    if not isinstance(job_id, str):
        raise NoJobIdError(message, details=raw.strip())

    job_id = job_id.strip()
    if not job_id or job_id == NULL_MARKER:
        raise NoJobIdError(message, details=raw.strip())
    return JobHandle(job_id=job_id)
