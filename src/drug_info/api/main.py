"""FastAPI application."""

import json
import logging
from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from drug_info import __version__
from drug_info.db.session import get_db
from drug_info.models.model_drug import DrugResponse
from drug_info.services.label_processor import DrugNotFoundError, process_fda_label
from drug_info.services.validation import (
    PayloadValidationError,
    validate_process_label_payload,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Drug Info API",
    description="API for FDA drug label data",
    version=__version__,
)


@app.exception_handler(PayloadValidationError)
async def payload_validation_handler(
    request: Request, exc: PayloadValidationError
) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(DrugNotFoundError)
async def drug_not_found_handler(request: Request, exc: DrugNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


async def validated_body(request: Request) -> dict[str, Any]:
    """Read the raw JSON body and run boundary validation on it."""
    raw = await request.body()
    if not raw.strip():
        body = None
    else:
        try:
            body = json.loads(raw)
        except ValueError as e:
            raise PayloadValidationError("Request body must be valid JSON") from e
    return validate_process_label_payload(body)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.post("/drugs/process-fda-label", response_model=DrugResponse)
def process_label(
    body: dict[str, Any] = Depends(validated_body),
    db: Session = Depends(get_db),
) -> DrugResponse:
    """Process FDA label data for the drug named by ``drugId``."""
    drug_id = body.get("drugId")
    if not drug_id:
        raise PayloadValidationError("Drug ID is required")
    drug = process_fda_label(db, drug_id, body.get("fdaLabel"))
    return DrugResponse.model_validate(drug)


@app.post("/drugs/{drug_id}/process-fda-label", response_model=DrugResponse)
def process_label_by_id(
    drug_id: str,
    body: dict[str, Any] = Depends(validated_body),
    db: Session = Depends(get_db),
) -> DrugResponse:
    """Process FDA label data posted as the whole body for a specific drug."""
    drug = process_fda_label(db, drug_id, body)
    return DrugResponse.model_validate(drug)
