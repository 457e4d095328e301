from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi import Body

from checksync import (
    ChecklistItem,
    build_text_field,
    derive,
    is_checklist,
    load_config,
    parse,
    serialize,
    to_checklist,
    to_plain,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="checksync", version="0.1.0")


# ── Payload helpers ───────────────────────────────────────────

def _text(payload: dict[str, Any]) -> str | None:
    text = payload.get("text")
    if text is not None and not isinstance(text, str):
        raise HTTPException(status_code=400, detail="text must be a string or null")
    return text


def _items(payload: dict[str, Any]) -> list[ChecklistItem]:
    raw = payload.get("items")
    if not isinstance(raw, list) or not all(isinstance(i, dict) for i in raw):
        raise HTTPException(status_code=400, detail="items must be a list of objects")
    return [ChecklistItem.from_dict(i) for i in raw]


def _flag(payload: dict[str, Any], key: str, default: bool) -> bool:
    value = payload.get(key, default)
    if not isinstance(value, bool):
        raise HTTPException(status_code=400, detail=f"{key} must be a boolean")
    return value


# ── Endpoints ─────────────────────────────────────────────────

@app.get("/healthz")
def healthz() -> dict[str, str]:
    return {"ok": "true"}


@app.post("/api/checklist/parse")
def api_parse(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
    text = _text(payload)
    items = parse(text)
    return {
        "is_checklist": is_checklist(text),
        "items": [i.to_dict() for i in items],
        "total": len(items),
        "checked": sum(1 for i in items if i.checked),
    }


@app.post("/api/checklist/serialize")
def api_serialize(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
    items = _items(payload)
    as_checklist = _flag(payload, "as_checklist", True)
    return {"text": serialize(items, as_checklist)}


@app.post("/api/checklist/progress")
def api_progress(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
    text = _text(payload)
    result: dict[str, Any] = {"is_checklist": is_checklist(text), "percent_complete": None, "status": None}
    if not result["is_checklist"]:
        return result
    items = parse(text)
    if items:
        result.update(derive(items).to_dict())
    return result


@app.post("/api/checklist/apply")
def api_apply(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
    text = _text(payload)
    values = payload.get("values") or {}
    if not isinstance(values, dict):
        raise HTTPException(status_code=400, detail="values must be an object")

    try:
        field = build_text_field(load_config())
        field.validate_and_set(values, text)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.debug("Applied %s", field)
    return {"values": values}


@app.post("/api/checklist/convert")
def api_convert(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
    text = _text(payload)
    target = payload.get("to", "checklist")
    if target == "checklist":
        return {"text": to_checklist(text)}
    if target == "plain":
        return {"text": to_plain(text)}
    raise HTTPException(status_code=400, detail=f"Invalid conversion target: {target}")
