# backend/app/api/analysis.py
import asyncio
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

from backend.app.api.dependencies import get_ai_client, get_settings
from backend.app.status import result_store
from mail_insight.config.settings import Settings
from mail_insight.errors import EmptyInputError
from mail_insight.parsing.parser import parse
from mail_insight.pipeline.orchestrator import process_text

router = APIRouter()


class EmailTextRequest(BaseModel):
    text: str = ""


def _empty_input(exc: EmptyInputError) -> HTTPException:
    return HTTPException(status_code=400, detail={"code": "empty_input", "message": str(exc)})


@router.post("/parse")
async def parse_endpoint(
    payload: EmailTextRequest,
    settings: Settings = Depends(get_settings),
) -> dict:
    sequence = result_store.begin()
    # Fixed pause before parsing; configurable, zero in tests.
    await asyncio.sleep(settings.parse_delay_seconds)

    try:
        result = parse(payload.text).to_dict()
    except EmptyInputError as exc:
        raise _empty_input(exc) from exc

    result_store.publish(sequence, "parse", {"basic": result})
    return {"ok": True, "result": result}


@router.post("/analyze")
async def analyze_endpoint(
    payload: EmailTextRequest,
    settings: Settings = Depends(get_settings),
    client: Any = Depends(get_ai_client),
) -> dict:
    sequence = result_store.begin()
    await asyncio.sleep(settings.parse_delay_seconds)

    try:
        # The backend call blocks; keep it off the event loop.
        processed = await run_in_threadpool(
            process_text,
            payload.text,
            advanced=True,
            settings=settings,
            client=client,
        )
    except EmptyInputError as exc:
        raise _empty_input(exc) from exc

    body = processed.to_dict()
    result_store.publish(sequence, "analyze", body)
    return {"ok": True, **body}


@router.get("/results/latest")
async def latest_result() -> dict:
    return {"ok": True, "latest": result_store.snapshot()}
