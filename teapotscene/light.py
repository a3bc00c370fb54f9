"""Point, spot and directional light sources for the scene shader."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Sequence

import numpy as np

from teapotscene.maths import as_vec3, scale, translate

_MARKER_SCALE = 0.1


class LightType(IntEnum):
    POINT = 1
    SPOT = 2
    DIRECTIONAL = 3


def _zeros() -> np.ndarray:
    return np.zeros(3)


@dataclass
class LightSource:
    """One light's parameters as the shader sees them."""

    type: LightType
    position: np.ndarray = field(default_factory=_zeros)
    colour: np.ndarray = field(default_factory=_zeros)
    direction: np.ndarray = field(default_factory=_zeros)
    constant: float = 0.0
    linear: float = 0.0
    quadratic: float = 0.0
    cos_phi: float = 0.0


Vec3 = Sequence[float] | np.ndarray


class Light:
    """An ordered collection of light sources."""

    def __init__(self) -> None:
        self.light_sources: list[LightSource] = []

    def __len__(self) -> int:
        return len(self.light_sources)

    def __iter__(self):
        return iter(self.light_sources)

    def add_point_light(
        self,
        position: Vec3,
        colour: Vec3,
        constant: float,
        linear: float,
        quadratic: float,
    ) -> LightSource:
        light = LightSource(
            type=LightType.POINT,
            position=as_vec3(position).copy(),
            colour=as_vec3(colour).copy(),
            constant=constant,
            linear=linear,
            quadratic=quadratic,
        )
        self.light_sources.append(light)
        return light

    def add_spot_light(
        self,
        position: Vec3,
        direction: Vec3,
        colour: Vec3,
        constant: float,
        linear: float,
        quadratic: float,
        cos_phi: float,
    ) -> LightSource:
        light = LightSource(
            type=LightType.SPOT,
            position=as_vec3(position).copy(),
            direction=as_vec3(direction).copy(),
            colour=as_vec3(colour).copy(),
            constant=constant,
            linear=linear,
            quadratic=quadratic,
            cos_phi=cos_phi,
        )
        self.light_sources.append(light)
        return light

    def add_directional_light(self, direction: Vec3, colour: Vec3) -> LightSource:
        light = LightSource(
            type=LightType.DIRECTIONAL,
            direction=as_vec3(direction).copy(),
            colour=as_vec3(colour).copy(),
        )
        self.light_sources.append(light)
        return light

    def uniforms(self, view: np.ndarray) -> dict[str, object]:
        """Shader uniform values with positions and directions in view space."""
        view = np.asarray(view, dtype=float)
        values: dict[str, object] = {"numLights": len(self.light_sources)}
        for i, light in enumerate(self.light_sources):
            prefix = f"lightSources[{i}]"
            values[f"{prefix}.position"] = (view @ np.append(light.position, 1.0))[:3]
            values[f"{prefix}.direction"] = (view @ np.append(light.direction, 0.0))[:3]
            values[f"{prefix}.colour"] = light.colour.copy()
            values[f"{prefix}.constant"] = light.constant
            values[f"{prefix}.linear"] = light.linear
            values[f"{prefix}.quadratic"] = light.quadratic
            values[f"{prefix}.cosPhi"] = light.cos_phi
            values[f"{prefix}.type"] = int(light.type)
        return values

    def draw_transforms(
        self, view: np.ndarray, projection: np.ndarray
    ) -> list[tuple[LightSource, np.ndarray]]:
        """MVP matrix of the small marker drawn at each non-directional light."""
        view_proj = np.asarray(projection, dtype=float) @ np.asarray(view, dtype=float)
        marker = scale((_MARKER_SCALE,) * 3)
        return [
            (light, view_proj @ translate(light.position) @ marker)
            for light in self.light_sources
            if light.type is not LightType.DIRECTIONAL
        ]