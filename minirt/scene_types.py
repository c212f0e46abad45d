"""Data types describing a ray-tracing scene: colours, vectors, lights and shapes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Union

WIN_WIDTH = 256.0
WIN_HEIGHT = 256.0
DEG_TO_RAD = 0.017453292519943


class ElementType(IntEnum):
    """Kind of renderable object stored in a scene."""

    SPHERE = 0
    PLANE = 1
    CYLINDER = 2


class ElementToParse(IntEnum):
    """Kind of entry that a scene description line declares."""

    AMBIENT_LIGHT = 0
    CAMERA = 1
    FOCAL_LIGHT = 2
    SPHERE = 3
    PLANE = 4
    CYLINDER = 5


@dataclass(frozen=True)
class Rgba:
    """A colour with 8-bit red, green, blue and alpha channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"channel {name} must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name} out of range 0..255: {value}")


@dataclass(frozen=True)
class Vec3:
    """A point or direction in three-dimensional space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class AmbientLight:
    """Light that reaches every point of the scene equally."""

    light_ratio: float = 0.0
    rgba: Rgba = field(default_factory=Rgba)


@dataclass
class Camera:
    """A viewpoint: position, viewing direction and field of view in degrees."""

    coords: Vec3 = field(default_factory=Vec3)
    orientation: Vec3 = field(default_factory=Vec3)
    fov: int = 0


@dataclass
class FocalLight:
    """A point light source."""

    coords: Vec3 = field(default_factory=Vec3)
    bright: float = 0.0
    rgba: Rgba = field(default_factory=Rgba)


@dataclass
class Sphere:
    """A sphere given by its centre and diameter."""

    kind: ClassVar[ElementType] = ElementType.SPHERE

    coords: Vec3 = field(default_factory=Vec3)
    diameter: float = 0.0
    rgba: Rgba = field(default_factory=Rgba)

    @property
    def radius(self) -> float:
        return self.diameter / 2


@dataclass
class Plane:
    """An infinite plane through a point with a normal vector."""

    kind: ClassVar[ElementType] = ElementType.PLANE

    coords: Vec3 = field(default_factory=Vec3)
    rotate_vec: Vec3 = field(default_factory=Vec3)
    module: float = 0.0
    rgba: Rgba = field(default_factory=Rgba)


@dataclass
class Cylinder:
    """A finite cylinder with centre, axis, diameter and height."""

    kind: ClassVar[ElementType] = ElementType.CYLINDER

    coords: Vec3 = field(default_factory=Vec3)
    rotate_vec: Vec3 = field(default_factory=Vec3)
    module: float = 0.0
    diameter: float = 0.0
    height: float = 0.0
    rgba: Rgba = field(default_factory=Rgba)


SceneElement = Union[Sphere, Plane, Cylinder]


@dataclass
class Ray:
    """A ray cast into the scene, carrying the colour it has gathered."""

    rgba: Rgba = field(default_factory=Rgba)
    direction: Vec3 = field(default_factory=Vec3)
    position: Vec3 = field(default_factory=Vec3)
    normalized: Vec3 = field(default_factory=Vec3)


@dataclass
class Scene:
    """Everything needed to render: cameras, lights and objects."""

    cameras: list[Camera] = field(default_factory=list)
    camera_idx: int = 0
    ambient_light: AmbientLight = field(default_factory=AmbientLight)
    lights: list[FocalLight] = field(default_factory=list)
    elements: list[SceneElement] = field(default_factory=list)

    @property
    def camera_count(self) -> int:
        return len(self.cameras)

    @property
    def lights_count(self) -> int:
        return len(self.lights)

    @property
    def element_count(self) -> int:
        return len(self.elements)

    @property
    def element_types(self) -> list[ElementType]:
        """The kind of each stored element, in storage order."""
        return [element.kind for element in self.elements]