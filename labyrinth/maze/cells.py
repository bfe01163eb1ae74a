from typing import Iterator, List, Tuple

Coord3D = Tuple[int, int, int]
Voxel = Tuple[int, int, int]
Color = Tuple[float, float, float]
Bug = Tuple[int, int, int]

# 6-connectivity, fixed order: +x, -x, +y, -y, +z, -z
DIRECTIONS: List[Coord3D] = [(1, 0, 0), (-1, 0, 0), (0, 1, 0), (0, -1, 0), (0, 0, 1), (0, 0, -1)]
AXES = (0, 1, 2)


def unit(axis: int, sign: int = 1) -> Coord3D:
    v = [0, 0, 0]
    v[axis] = sign
    return (v[0], v[1], v[2])


def add(a: Coord3D, b: Coord3D) -> Coord3D:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def axis_of(d: Coord3D) -> int:
    for axis in AXES:
        if d[axis]:
            return axis
    raise ValueError(f"null direction {d}")


def to_voxel(c: Coord3D) -> Voxel:
    return (2 * c[0], 2 * c[1], 2 * c[2])


def perpendicular(axis: int) -> Iterator[Coord3D]:
    for other in AXES:
        if other != axis:
            yield unit(other, 1)
            yield unit(other, -1)


UNITS = tuple(unit(axis) for axis in AXES)
NEGATIVE_UNITS = tuple(unit(axis, -1) for axis in AXES)
