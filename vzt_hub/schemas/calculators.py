from typing import Optional, Union

from pydantic import BaseModel


Number = Optional[Union[float, int, str]]


class PipeSizingRequest(BaseModel):
    flow: Number = None  # m³/h
    velocity: Number = None  # m/s


class PipeSizingResult(BaseModel):
    flow: float  # m³/h
    velocity: float
    flow_si: float  # m³/s
    area: float  # m²
    diameter_m: float
    diameter_mm: float


class DuctLengthRequest(BaseModel):
    straight: Number = None  # m
    bends: Number = None
    branches: Number = None


class DuctLengthResult(BaseModel):
    straight: float
    bends: int
    branches: int
    bend_length: float
    branch_length: float
    total_length: float


class AirflowRequest(BaseModel):
    volume: Number = None  # m³
    air_changes: Number = None  # 1/h


class AirflowResult(BaseModel):
    volume: float
    air_changes: float
    flow: float  # m³/h
    flow_si: float  # m³/s


class PressureLossRequest(BaseModel):
    length: Number = None  # m
    diameter: Number = None  # mm
    velocity: Number = None  # m/s


class PressureLossResult(BaseModel):
    length: float
    diameter_mm: float
    diameter_m: float
    velocity: float
    pressure_loss: float  # Pa
