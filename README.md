# shadekit

Building blocks for a physically based renderer. They are written with numpy.

## What is in it

### `shadekit.transforms`

Each class has `matrix(time)`, which returns a 4x4 numpy array.

- `IdentityTransform` is the transform that leaves everything in place.
- `MatrixTransform(m)` takes 16 row-major entries.
  - If the last row is not `(0, 0, 0, 1)`, it is reset to that row and a warning is logged.
  - Any count other than 0 or 16 raises `ValueError`.
  - Given no entries, it is the identity.
- `ScaleRotateTranslate(scale, rotate, translate)`:
  - `scale` is a scalar or a 3-vector.
  - `rotate` is `(axis_x, axis_y, axis_z, degrees)`.
  - The matrix scales first, then rotates, then translates.
- `TransformStack(transforms)` chains transforms. Later transforms are applied after earlier ones. When every child is static, the product is computed once.
- `LerpTransform(transforms, time_points)` animates between keyframes.
  - Keyframes are sorted by time, and duplicate time points are dropped with a warning.
  - Between keyframes, it interpolates the decomposed scaling and translation linearly and the rotation by slerp.
  - Outside the keyframe range, it holds the first or last keyframe.
  - Mismatched or empty lists raise `ValueError`.
- Helpers:
  - `translation`, `rotation(axis, angle)` (angle in radians) and `scaling`.
  - `quaternion_rotation(q)`, with `q` given as `(x, y, z, w)`.
  - `decompose(m)` returns a `DecomposedTransform` with `scaling`, `quaternion` and `translation`.
  - `slerp(q0, q1, t)`.

### `shadekit.mix`

Blends two surface evaluations.

- `Evaluation` holds `f`, `pdf`, `normal`, `roughness` and `eta`.
- `mix_ratio(ratio)` returns 0.5 for `None`. Otherwise it clamps the ratio to [0, 1].
- `split_lobe_sample(u_lobe, ratio)` returns `(True, u)` when the first surface is chosen and `(False, u)` otherwise. The returned `u` is remapped to its sub-range.
- `mix_evaluations(ratio, wi, eval_a, eval_b, normal)` weights the two values by their cosines and converts the result to the frame of `normal`. It blends `pdf`, `roughness` and `eta` by the ratio.

### `shadekit.disney_lobes`

Lobes of the Disney principled BSDF, evaluated in the local shading frame, where the normal is +z.

- Functions: `schlick_weight`, `fr_schlick`, `schlick_r0_from_eta`, `gtr1` and `smith_g_ggx`.
- `DisneyDiffuse(r)` has `evaluate(wo, wi)` and `backward(wo, wi, df)`. `backward` returns the gradient with respect to the reflectance.
- `DisneyFakeSS(r, roughness)`, `DisneyRetro(r, roughness)` and `DisneySheen(r)` each have `evaluate(wo, wi)`.
- `DisneyClearcoat(weight, gloss)` has:
  - `evaluate(wo, wi)`;
  - `pdf(wo, wi)`;
  - `sample(wo, u)`, which returns `(wi, value, pdf)`. The value and pdf are zero for an invalid sample.

### `shadekit.metal_ior_a` and `shadekit.metal_ior_b`

Tables of complex refractive index `(n, k)`. Each table has 95 entries, from 360 nm to 830 nm in 5 nm steps.

- `metal_ior_a`: `AG`, `AL`, `AU`, `CU` and `CUZN` (brass).
- `metal_ior_b`: `FE`, `TI`, `V`, `VN` and `LI`.

## Installation

```
pip install .
```

## Examples

```python
from shadekit.transforms import LerpTransform, ScaleRotateTranslate

a = ScaleRotateTranslate(scale=1.0, rotate=(0, 0, 1, 0), translate=(0, 0, 0))
b = ScaleRotateTranslate(scale=2.0, rotate=(0, 0, 1, 90), translate=(1, 0, 0))
animated = LerpTransform([a, b], [0.0, 1.0])
m = animated.matrix(0.5)   # 4x4 numpy array
```

```python
from shadekit.disney_lobes import schlick_weight, fr_schlick

schlick_weight(1.0)      # 0.0 at normal incidence
fr_schlick(0.04, 0.0)    # 1.0 at grazing angles
```

```python
from shadekit.metal_ior_a import AU

n, k = AU[(550 - 360) // 5]   # gold at 550 nm
```

## What it does not do

- There are no textures.
- There is no mirror Fresnel term.
- There are no complete surface models such as metal, mirror or a full Disney BSDF.
- There is no lookup or interpolation of the metal tables by name or by wavelength. The tables are plain data.
- There is no computation of Disney lobe weights and no selection of a sampling technique.
- There is no renderer, scene loader or command-line tool.

## Tests

```
pip install .[test]
pytest
```