from fastapi import APIRouter

from ..schemas.calculators import (
    AirflowRequest,
    AirflowResult,
    DuctLengthRequest,
    DuctLengthResult,
    PipeSizingRequest,
    PipeSizingResult,
    PressureLossRequest,
    PressureLossResult,
)
from ..services import calculators


router = APIRouter(prefix="/calculators", tags=["calculators"])


@router.post("/pipe-sizing", response_model=PipeSizingResult)
def pipe_sizing(req: PipeSizingRequest):
    return calculators.pipe_sizing(req.flow, req.velocity)


@router.post("/duct-length", response_model=DuctLengthResult)
def duct_length(req: DuctLengthRequest):
    return calculators.duct_equivalent_length(req.straight, req.bends, req.branches)


@router.post("/airflow", response_model=AirflowResult)
def airflow(req: AirflowRequest):
    return calculators.airflow(req.volume, req.air_changes)


@router.post("/pressure-loss", response_model=PressureLossResult)
def pressure_loss(req: PressureLossRequest):
    return calculators.pressure_loss(req.length, req.diameter, req.velocity)
