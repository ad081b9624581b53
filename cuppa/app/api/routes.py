"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from cuppa.core.form import calculate_from_form, frequency_options
from cuppa.schemas.future_value import (
    CalculationInput,
    FormInput,
    FormResult,
    FutureValueResponse,
)

api_bp = Blueprint("api", __name__)
logger = logging.getLogger(__name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("Rejected payload with %d validation error(s)", exc.error_count())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify({"message": "pong"})


@api_bp.get("/frequencies")
def frequencies() -> Any:
    """Deposit and compounding choices, in picker order."""
    return jsonify(frequency_options().model_dump())


@api_bp.post("/calc/future-value")
def future_value() -> Any:
    """Future value from already-parsed numeric inputs (fractional rate)."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = CalculationInput.model_validate(raw_payload)
    value = payload.future_value()
    logger.info(
        "Calculated future value %.2f (%s deposits, %s compounding)",
        value,
        payload.deposit_frequency.value,
        payload.compounding_frequency.value,
    )
    return jsonify(FutureValueResponse.from_value(value).model_dump())


@api_bp.post("/calc/future-value/form")
def future_value_form() -> Any:
    """Future value from the calculator form's raw text fields.

    Unparsable text withholds the result instead of failing the request.
    """
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    form = FormInput.model_validate(raw_payload)
    symbol = current_app.config["CUPPA_SETTINGS"].currency_symbol
    formatted = calculate_from_form(form, symbol)
    logger.info("Form calculation %s", "shown" if formatted is not None else "withheld")
    result = FormResult(future_value=formatted, displayed=formatted is not None)
    return jsonify(result.model_dump())
