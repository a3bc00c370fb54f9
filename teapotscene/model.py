"""Triangle meshes loaded from Wavefront OBJ files, with tangents and textures."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

import numpy as np
from PIL import Image

_FORMATS = {1: "RED", 3: "RGB", 4: "RGBA"}


class ObjFormatError(ValueError):
    """Raised when an OBJ file cannot be understood."""


@dataclass
class Texture:
    """An image bound to a material slot such as ``diffuse`` or ``normal``."""

    kind: str
    image: np.ndarray

    @property
    def height(self) -> int:
        return int(self.image.shape[0])

    @property
    def width(self) -> int:
        return int(self.image.shape[1])

    @property
    def channels(self) -> int:
        return 1 if self.image.ndim == 2 else int(self.image.shape[2])

    @property
    def format(self) -> str:
        """Pixel layout name: ``RED``, ``RGB`` or ``RGBA``."""
        return _FORMATS[self.channels]

    @property
    def uniform_name(self) -> str:
        """Name of the sampler uniform this texture feeds."""
        return f"{self.kind}Map"


def load_texture(path: str | PathLike[str]) -> np.ndarray:
    """Load an image as a uint8 array of 1, 3 or 4 channels.

    Raises OSError if the file cannot be read as an image and ValueError
    if its channel count has no matching pixel format.
    """
    try:
        with Image.open(path) as img:
            img.load()
            if img.mode in ("1", "I", "I;16", "F"):
                img = img.convert("L")
            elif img.mode == "P":
                img = img.convert("RGBA" if "transparency" in img.info else "RGB")
            elif img.mode not in ("L", "LA", "RGB", "RGBA"):
                img = img.convert("RGB")
            data = np.asarray(img, dtype=np.uint8).copy()
    except OSError as exc:
        raise OSError(f"texture {path} failed to load") from exc
    channels = 1 if data.ndim == 2 else data.shape[2]
    if channels not in _FORMATS:
        raise ValueError(f"texture {path} has unsupported channel count {channels}")
    return data


def _floats(parts: list[str], count: int, line_no: int) -> list[float]:
    if len(parts) < count:
        raise ObjFormatError(f"line {line_no}: expected {count} numbers")
    try:
        return [float(p) for p in parts[:count]]
    except ValueError as exc:
        raise ObjFormatError(f"line {line_no}: invalid number") from exc


def _face_corner(token: str, line_no: int) -> tuple[int, int, int]:
    pieces = token.split("/")
    if len(pieces) != 3:
        raise ObjFormatError(f"line {line_no}: face must use v/vt/vn indices")
    try:
        v, t, n = (int(p) for p in pieces)
    except ValueError as exc:
        raise ObjFormatError(f"line {line_no}: face must use v/vt/vn indices") from exc
    return v, t, n


def _lookup(items: list, index: int, what: str) -> object:
    if not 1 <= index <= len(items):
        raise ObjFormatError(f"{what} index {index} out of range")
    return items[index - 1]


def load_obj(path: str | PathLike[str]) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Read a triangulated OBJ file into unindexed vertex, uv and normal arrays.

    Faces must list three ``v/vt/vn`` corners; any further corners on a face
    line are ignored. Lines with other keywords are skipped.
    """
    positions: list[list[float]] = []
    tex_coords: list[list[float]] = []
    normals: list[list[float]] = []
    corners: list[tuple[int, int, int]] = []

    text = Path(path).read_text()
    for line_no, line in enumerate(text.splitlines(), start=1):
        parts = line.split()
        if not parts:
            continue
        keyword, args = parts[0], parts[1:]
        if keyword == "v":
            positions.append(_floats(args, 3, line_no))
        elif keyword == "vt":
            tex_coords.append(_floats(args, 2, line_no))
        elif keyword == "vn":
            normals.append(_floats(args, 3, line_no))
        elif keyword == "f":
            if len(args) < 3:
                raise ObjFormatError(f"line {line_no}: face needs three corners")
            corners.extend(_face_corner(tok, line_no) for tok in args[:3])

    out_v = [_lookup(positions, v, "vertex") for v, _, _ in corners]
    out_t = [_lookup(tex_coords, t, "uv") for _, t, _ in corners]
    out_n = [_lookup(normals, n, "normal") for _, _, n in corners]
    return (
        np.array(out_v, dtype=float).reshape(-1, 3),
        np.array(out_t, dtype=float).reshape(-1, 2),
        np.array(out_n, dtype=float).reshape(-1, 3),
    )


def calculate_tangents(
    vertices: np.ndarray, uvs: np.ndarray
) -> tuple[np.ndarray, np.ndarray]:
    """Per-vertex tangents and bitangents, shared by each triangle's corners."""
    vertices = np.asarray(vertices, dtype=float).reshape(-1, 3)
    uvs = np.asarray(uvs, dtype=float).reshape(-1, 2)
    if len(vertices) % 3:
        raise ValueError("vertex count must be a multiple of three")
    if len(uvs) != len(vertices):
        raise ValueError("need one uv per vertex")

    tri = vertices.reshape(-1, 3, 3)
    tri_uv = uvs.reshape(-1, 3, 2)
    e1 = tri[:, 1] - tri[:, 0]
    e2 = tri[:, 2] - tri[:, 1]
    du1 = (tri_uv[:, 1, 0] - tri_uv[:, 0, 0])[:, None]
    dv1 = (tri_uv[:, 1, 1] - tri_uv[:, 0, 1])[:, None]
    du2 = (tri_uv[:, 2, 0] - tri_uv[:, 1, 0])[:, None]
    dv2 = (tri_uv[:, 2, 1] - tri_uv[:, 1, 1])[:, None]

    with np.errstate(divide="ignore", invalid="ignore"):
        denom = 1.0 / (du1 * dv2 - du2 * dv1)
        tangent = (dv2 * e1 - dv1 * e2) * denom
        bitangent = (du1 * e2 - du2 * e1) * denom

    return np.repeat(tangent, 3, axis=0), np.repeat(bitangent, 3, axis=0)


class Model:
    """A mesh with material coefficients and a list of textures."""

    def __init__(self, path: str | PathLike[str]) -> None:
        self.vertices, self.uvs, self.normals = load_obj(path)
        self.tangents, self.bitangents = calculate_tangents(self.vertices, self.uvs)
        self.textures: list[Texture] = []
        self.ka = 0.0
        self.kd = 0.0
        self.ks = 0.0
        self.ns = 0.0

    def __len__(self) -> int:
        return len(self.vertices)

    def add_texture(self, path: str | PathLike[str], kind: str) -> Texture:
        """Load the image at ``path`` and attach it under ``kind``."""
        texture = Texture(kind=kind, image=load_texture(path))
        self.textures.append(texture)
        return texture

    def material_uniforms(self) -> dict[str, float]:
        """Material coefficients keyed by shader uniform name."""
        return {"ka": self.ka, "kd": self.kd, "ks": self.ks, "Ns": self.ns}

    def texture_units(self) -> list[tuple[str, int, Texture]]:
        """Sampler uniform name, texture unit and texture, in attach order."""
        return [(tex.uniform_name, unit, tex) for unit, tex in enumerate(self.textures)]