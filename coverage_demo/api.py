"""REST API endpoints for the coverage demo service."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from coverage_demo.models.dto import (
    CalculationResponse,
    GreetingResponse,
    InfoResponse,
    ParityResponse,
)
from coverage_demo.services.app_service import AppService, get_app_service
from coverage_demo.utils.parsing import (
    parse_greeting_request,
    parse_numeric_pair,
    parse_parity_query,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
def get_hello(app_service: AppService = Depends(get_app_service)) -> str:
    return app_service.get_hello()


@router.get("/info", response_model=InfoResponse)
def get_info(app_service: AppService = Depends(get_app_service)) -> InfoResponse:
    """Static application information."""
    return InfoResponse.from_payload(app_service.get_info())


@router.get("/calculate/sum", response_model=CalculationResponse)
def calculate_sum(
    a: Optional[str] = None,
    b: Optional[str] = None,
    app_service: AppService = Depends(get_app_service),
) -> CalculationResponse:
    """Calculate the sum of two numbers; unparseable input yields 0."""
    pair = parse_numeric_pair(a, b)

    if pair is None:
        logger.debug("calculate/sum: unparseable input a=%r b=%r", a, b)
        return CalculationResponse(result=0)

    return CalculationResponse(result=app_service.calculate_sum(pair.a, pair.b))


@router.get("/calculate/product", response_model=CalculationResponse)
def calculate_product(
    a: Optional[str] = None,
    b: Optional[str] = None,
    app_service: AppService = Depends(get_app_service),
) -> CalculationResponse:
    """Calculate the product of two numbers; unparseable input yields 0."""
    pair = parse_numeric_pair(a, b)

    if pair is None:
        logger.debug("calculate/product: unparseable input a=%r b=%r", a, b)
        return CalculationResponse(result=0)

    return CalculationResponse(result=app_service.calculate_product(pair.a, pair.b))


@router.get("/check/even/{num}", response_model=ParityResponse)
def is_even(
    num: str,
    app_service: AppService = Depends(get_app_service),
) -> ParityResponse:
    """Check if a number is even.

    A non-numeric path value reports number 0 as even.
    """
    query = parse_parity_query(num)

    if query is None:
        logger.debug("check/even: unparseable input num=%r", num)
        return ParityResponse(number=0, is_even=True)

    return ParityResponse(number=query.n, is_even=app_service.is_even(query.n))


@router.get("/greet", response_model=GreetingResponse)
def generate_greeting(
    name: Optional[str] = None,
    time: Optional[str] = None,
    app_service: AppService = Depends(get_app_service),
) -> GreetingResponse:
    """Generate a greeting for a user, optionally for a time of day.

    An absent name greets "guest"; an unrecognized time is ignored.
    """
    request = parse_greeting_request(name, time)
    return GreetingResponse(greeting=app_service.generate_greeting(request.name, request.time))
