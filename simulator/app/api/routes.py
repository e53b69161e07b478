"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from simulator.config import SimulatorConfig
from simulator.core.ping import build_ping_response
from simulator.core.projection import project, summarize
from simulator.core.validation import ValidationFailure, validate
from simulator.schemas.simulation import (
    LimitsResponse,
    SimulationRequest,
    SimulationResponse,
    ValidationErrorResponse,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _config() -> SimulatorConfig:
    return current_app.config["SIMULATOR"]


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    detail = [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    return jsonify({"detail": detail}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(build_ping_response().model_dump())


@api_bp.get("/simulations/limits")
def limits() -> Any:
    """Bounds a client needs to build its input form."""
    config = _config()
    response = LimitsResponse(
        min_years=config.limits.min_years,
        max_years=config.limits.max_years,
    )
    return jsonify(response.model_dump(by_alias=True))


@api_bp.post("/simulations")
def simulate() -> Any:
    """Validate the raw inputs and return the full projection."""
    raw_payload = request.get_json(force=True, silent=False)
    payload = SimulationRequest.model_validate(raw_payload)

    outcome = validate(payload.model_dump(by_alias=True), limits=_config().limits)
    if isinstance(outcome, ValidationFailure):
        response = ValidationErrorResponse.model_validate({"detail": outcome.to_detail()})
        return jsonify(response.model_dump(by_alias=True)), HTTPStatus.UNPROCESSABLE_ENTITY

    result = project(outcome)
    logger.info(
        "simulated %d years, final balance %.2f",
        outcome.term_years,
        result.final.ending_balance,
    )
    response = SimulationResponse(
        parameters=outcome,
        projection=list(result.years),
        summary=summarize(result),
    )
    return jsonify(response.model_dump(by_alias=True))
