"""Configuration assessment endpoint."""

from fastapi import APIRouter

from shadesail.application import assess
from shadesail.application.config import (
    config_to_policy,
    config_to_shade,
    load_config_from_dict,
    merge_rates,
)
from shadesail.infrastructure import JsonExporter
from shadesail.web.dependencies import RateTableDep
from shadesail.web.schemas.requests import CalculateRequest
from shadesail.web.schemas.responses import AssessmentSchema, ErrorResponseSchema

router = APIRouter(prefix="/calculate", tags=["calculate"])


@router.post(
    "",
    response_model=AssessmentSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def calculate(request: CalculateRequest, rates: RateTableDep) -> AssessmentSchema:
    """Validate, price and build the manufacturing record for a configuration.

    Raises:
        ConfigError: If the configuration fails schema validation (422).
    """
    config = load_config_from_dict(request.config)
    if config.rates is not None:
        rates = merge_rates(rates, config.rates)
    assessment = assess(config_to_shade(config), rates, config_to_policy(config))
    return AssessmentSchema.model_validate(JsonExporter(rates).to_dict(assessment))
