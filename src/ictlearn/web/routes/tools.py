"""Lesson calculator endpoints.

Number conversion, IP address breakdown, subnet plans and logic gates,
backing the interactive widgets of the lesson pages.
"""

import structlog
from fastapi import APIRouter, HTTPException, Query, status

from ictlearn.core import lessons
from ictlearn.web.schemas import (
    ConversionResponse,
    LogicGateRequest,
    LogicGateResponse,
    NetworkInfoResponse,
    SubnetListResponse,
    SubnetResponse,
    TruthTableResponse,
    TruthTableRow,
    VlsmRequest,
    invalid_request,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/tools", tags=["tools"])


def _bad_request(error: Exception) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


@router.get(
    "/convert",
    response_model=ConversionResponse,
    openapi_extra=invalid_request("Invalid conversion request"),
)
async def convert(
    value: str = Query(..., min_length=1, max_length=64),
    from_base: int = Query(...),
    to_base: int = Query(...),
) -> ConversionResponse:
    """Convert a number between bases 2, 10 and 16."""
    try:
        result = lessons.convert_number(value, from_base, to_base)
    except lessons.ConversionError as e:
        raise _bad_request(e)
    return ConversionResponse(value=value, from_base=from_base, to_base=to_base, result=result)


@router.get(
    "/ip-info",
    response_model=NetworkInfoResponse,
    openapi_extra=invalid_request("Invalid address request"),
)
async def ip_info(
    ip: str = Query(...),
    mask: str = Query(default="255.255.255.0"),
) -> NetworkInfoResponse:
    """Class, network and broadcast address for an IP and mask."""
    try:
        info = lessons.get_network_info(ip, mask)
    except lessons.InvalidAddressError as e:
        raise _bad_request(e)
    return NetworkInfoResponse.model_validate(info)


@router.get(
    "/subnets",
    response_model=SubnetListResponse,
    openapi_extra=invalid_request("Invalid subnet request"),
)
async def subnets(
    network: str = Query(...),
    bits: int = Query(default=2),
) -> SubnetListResponse:
    """Split a /24 into equal subnets."""
    try:
        plan = lessons.calculate_subnets(network, bits)
    except (lessons.InvalidAddressError, lessons.SubnetError) as e:
        raise _bad_request(e)
    items = [SubnetResponse.model_validate(s) for s in plan]
    return SubnetListResponse(subnets=items, count=len(items))


@router.post(
    "/vlsm",
    response_model=SubnetListResponse,
    openapi_extra=invalid_request("Invalid subnet request"),
)
async def vlsm(body: VlsmRequest) -> SubnetListResponse:
    """Allocate variable length subnets for host requirements."""
    try:
        plan = lessons.calculate_vlsm(body.network, body.hosts)
    except (lessons.InvalidAddressError, lessons.SubnetError) as e:
        raise _bad_request(e)

    logger.info("vlsm_planned", network=body.network, subnets=len(plan))
    items = [SubnetResponse.model_validate(s) for s in plan]
    return SubnetListResponse(subnets=items, count=len(items))


@router.post(
    "/logic-gate",
    response_model=LogicGateResponse,
    openapi_extra=invalid_request("Invalid logic gate request"),
)
async def logic_gate(body: LogicGateRequest) -> LogicGateResponse:
    """Evaluate a logic gate."""
    try:
        output = lessons.evaluate_gate(body.gate, body.inputs)
    except lessons.GateError as e:
        raise _bad_request(e)

    gate = body.gate.strip().upper()
    return LogicGateResponse(
        gate=gate,
        inputs=body.inputs,
        output=output,
        description=lessons.GATE_DESCRIPTIONS[gate],
    )


@router.get(
    "/logic-gate/{gate}/truth-table",
    response_model=TruthTableResponse,
    openapi_extra=invalid_request("Invalid logic gate request"),
)
async def gate_truth_table(
    gate: str,
    inputs: int = Query(default=2, ge=2, le=4),
) -> TruthTableResponse:
    """Full truth table for a gate."""
    try:
        rows = lessons.truth_table(gate, inputs)
    except lessons.UnknownGateError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    name = gate.strip().upper()
    return TruthTableResponse(
        gate=name,
        description=lessons.GATE_DESCRIPTIONS[name],
        rows=[TruthTableRow(**row) for row in rows],
    )
