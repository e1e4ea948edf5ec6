"""
HVAC calculators.

Pure functions: no store access. Required inputs must parse to a finite,
positive number; bend and branch counts fall back to 0 when left empty.
"""
import math
from typing import Any

from ..errors import InvalidInput
from ..schemas.calculators import (
    AirflowResult,
    DuctLengthResult,
    PipeSizingResult,
    PressureLossResult,
)


SECONDS_PER_HOUR = 3600
BEND_EQUIVALENT_M = 1.5
BRANCH_EQUIVALENT_M = 2.0
FRICTION_FACTOR = 0.02
AIR_DENSITY = 1.2  # kg/m³

FILL_ALL_FIELDS = "Please fill in all fields"


def _required(value: Any, field: str, message: str = FILL_ALL_FIELDS) -> float:
    if value is None or isinstance(value, bool):
        raise InvalidInput(message, field=field)
    if isinstance(value, str):
        value = value.strip()
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidInput(message, field=field)
    # zero, negatives and NaN/inf are rejected alike
    if not math.isfinite(number) or number <= 0:
        raise InvalidInput(message, field=field)
    return number


def _count(value: Any, field: str) -> int:
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, str):
        value = value.strip()
    try:
        count = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0
    if count < 0:
        raise InvalidInput(f"{field} cannot be negative", field=field)
    return count


def pipe_sizing(flow: Any, velocity: Any) -> PipeSizingResult:
    """Pipe diameter for a flow (m³/h) at a given velocity (m/s)."""
    flow = _required(flow, "flow")
    velocity = _required(velocity, "velocity")

    flow_si = flow / SECONDS_PER_HOUR
    area = flow_si / velocity
    diameter = math.sqrt(4 * area / math.pi)
    return PipeSizingResult(
        flow=flow,
        velocity=velocity,
        flow_si=flow_si,
        area=area,
        diameter_m=diameter,
        diameter_mm=diameter * 1000,
    )


def duct_equivalent_length(straight: Any, bends: Any = None, branches: Any = None) -> DuctLengthResult:
    """Straight length plus the equivalent length of bends and branches."""
    straight = _required(straight, "straight", "Please enter the straight length")
    bends = _count(bends, "bends")
    branches = _count(branches, "branches")

    bend_length = bends * BEND_EQUIVALENT_M
    branch_length = branches * BRANCH_EQUIVALENT_M
    return DuctLengthResult(
        straight=straight,
        bends=bends,
        branches=branches,
        bend_length=bend_length,
        branch_length=branch_length,
        total_length=straight + bend_length + branch_length,
    )


def airflow(volume: Any, air_changes: Any) -> AirflowResult:
    volume = _required(volume, "volume")
    air_changes = _required(air_changes, "air_changes")

    flow = volume * air_changes
    return AirflowResult(
        volume=volume,
        air_changes=air_changes,
        flow=flow,
        flow_si=flow / SECONDS_PER_HOUR,
    )


def pressure_loss(length: Any, diameter: Any, velocity: Any) -> PressureLossResult:
    """
    Friction pressure loss (Pa) of a straight duct, Darcy-Weisbach with a
    fixed friction factor and air density.
    """
    length = _required(length, "length")
    diameter = _required(diameter, "diameter")
    velocity = _required(velocity, "velocity")

    diameter_m = diameter / 1000
    loss = FRICTION_FACTOR * (length / diameter_m) * (AIR_DENSITY * velocity * velocity / 2)
    return PressureLossResult(
        length=length,
        diameter_mm=diameter,
        diameter_m=diameter_m,
        velocity=velocity,
        pressure_loss=loss,
    )
