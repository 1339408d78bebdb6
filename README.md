# gfxkit

Building blocks for interactive 3D graphics programs. The package is written
in pure Python and has no dependencies:

- `gfxkit.vector`: an immutable `Vector` of any dimension. It supports
  `+`, `-`, scaling by a scalar with `*` and `/`, and the dot product with
  `@`. It also has `dot`, `cross`, `norm`, `norm2`, `unitized` and `proj`
  (homogeneous projection). The module-level helpers `cross`, `norm`,
  `norm2`, `unitize` and `proj` do the same jobs.
- `gfxkit.mat2`, `gfxkit.mat3`, `gfxkit.mat4`: immutable `Mat2`, `Mat3`
  and `Mat4`, built from rows.
  - Each has `row`, `col`, `transpose` and `det`. `Mat2` and `Mat3` also
    have `trace`.
  - Use `@` to multiply by a matrix or a vector.
  - Each module has an `invert` function, which raises `ZeroDivisionError`
    for a singular matrix.
  - `gfxkit.mat2` has `eigenvalues`, `eigenvectors` and `eigen`.
    `eigenvalues` raises `ValueError` when the matrix has no distinct real
    eigenvalues.
  - `gfxkit.mat3` has `diag`, `adjoint` and `row_extend`, plus
    `Mat3.diagonal` and `Mat3.outer_product`.
  - `gfxkit.mat4` has `translation_matrix`, `scaling_matrix`,
    `rotation_matrix_rad`, `perspective_matrix`, `lookat_matrix`,
    `viewport_matrix`, `adjoint`, `invert_cramer` and `invert` (Gaussian
    elimination).
- `gfxkit.quat`: an immutable `Quat` made of a 3-vector part and a scalar
  part. It has `+`, `-`, quaternion and scalar `*`, scalar `/`, `norm` (the
  squared magnitude), `conjugate`, `inverse`, `unitized` and
  `Quat.identity()`.
- `gfxkit.symmat`: mutable symmetric matrices `SymMat2` and `SymMat4`.
  They store only the upper triangle and are indexed as `m[i, j]`.
- `gfxkit.geom3d`:
  - triangle functions: `triangle_raw_normal`, `triangle_normal`,
    `triangle_area`, `triangle_plane`, `triangle_raw_plane` and
    `triangle_compactness`;
  - bounding-box functions: `compute_bbox`, `update_bbox`,
    `is_inside_bbox` and `clamp_to_bbox`;
  - tetrahedron functions: `tetrahedron_determinant` and
    `tetrahedron_volume`.
- `gfxkit.color`:
  - conversions: `rgb_to_hsv`, `hsv_to_rgb`, `rgb_to_yiq`, `rgb_to_xyz`
    and `xyz_to_rgb`;
  - luminance: `rgb_luminance_ntsc` and `rgb_luminance_alt`;
  - `xyz_chromaticity`.
- `gfxkit.raster`:
  - a `Raster` pixel buffer, stored as a flat row-major list of samples,
    with `pixel`, `reverse`, `hflip`, `vflip` and `is_valid_address`;
  - `ImageType`, an enumeration of image file formats (PNM, PNG, TIFF,
    JPEG).
- `gfxkit.baseball`, `gfxkit.arcball`: the `Baseball` and `Arcball`
  controllers for mouse-driven rotation and translation. Each saves its
  state as text with `write` and loads it back with `read`.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Examples

```python
import math

from gfxkit.vector import Vector, cross
from gfxkit.mat4 import rotation_matrix_rad, invert
from gfxkit.geom3d import triangle_area

x = Vector(1.0, 0.0, 0.0)
y = Vector(0.0, 1.0, 0.0)
print(cross(x, y))                            # 0 0 1

print(triangle_area(Vector(0, 0, 0), x, y))   # 0.5

r = rotation_matrix_rad(math.pi / 2, Vector(0.0, 0.0, 1.0))
r_inv = invert(r)
print(r @ Vector(1.0, 0.0, 0.0, 1.0))
```

```python
from gfxkit.color import rgb_to_hsv, hsv_to_rgb

hsv = rgb_to_hsv((1.0, 0.0, 0.0))       # hue 0, full saturation and value
rgb = hsv_to_rgb(hsv)
```

An `Arcball` takes mouse positions in window pixels, with the origin at the
top left. It also takes the viewport as `(x, y, width, height)`.

- Button 1 rotates.
- Button 2 pans.
- Button 3 moves along the view axis.

Call `update` to bring the current rotation up to date during a drag.

```python
from gfxkit.arcball import Arcball

ball = Arcball()
viewport = (0, 0, 640, 480)
ball.mouse_down((320, 240), 1, viewport)
ball.mouse_drag((400, 240), (320, 240), 1, viewport)
ball.update()
center, translation, rotation = ball.get_transform()
ball.mouse_up((400, 240), 1)
```

## What it does not do

- There is no drawing, window or GUI layer. The controllers only keep
  state and answer mouse events; applying their transform to a scene is up
  to the caller.
- `Raster` lives only in memory. `ImageType` names file formats, but
  nothing here reads or writes image files.
- `Quat` has no conversion to a rotation matrix, no exponential or
  logarithm, and no interpolation between rotations.