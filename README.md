# noisekit

Composable building blocks for procedural textures and terrain made from coherent noise.

Every noise function has a `get(point)` method. It takes a sequence of
coordinates and returns a float. Functions can be chained, and any object with
such a method can serve as a source.

## Installation

```
pip install noisekit
```

To run the test suite:

```
pip install "noisekit[test]"
pytest
```

## What is included

- **Generators**: `noisekit.generators.Constant` returns the same value at
  every point.
- **Fractals**:
  - `noisekit.fbm.Fbm`
  - `noisekit.billow.Billow`
  - `noisekit.basic_multi.BasicMulti`
  - `noisekit.hybrid_multi.HybridMulti`
  - `noisekit.ridged_multi.RidgedMulti`, which also has `set_attenuation`

  All of them share the settings of `noisekit.multifractal.MultiFractal`:
  `set_octaves` (clamped to 1..32), `set_frequency`, `set_lacunarity`,
  `set_persistence`, `set_seed` and `set_sources`. Each fractal is built from a
  `source_factory`, which is called with a seed and returns a noise source. The
  fractal makes one source for each octave, with seeds `seed`, `seed + 1`, and
  so on. `noisekit.multifractal.build_sources` does this step on its own.
- **Modifiers**:
  - `Abs`, `Clamp`, `Exponent`, `Negate` and `ScaleBias` in
    `noisekit.modifiers`
  - `noisekit.curve.Curve` maps values onto a cubic spline through control
    points.
  - `noisekit.terrace.Terrace` maps values onto a terrace-forming curve. It can
    be inverted with `set_invert_terraces`.
- **Selectors**: `Blend` and `Select` in `noisekit.selectors`. `Select` takes
  bounds and an optional edge falloff.
- **Transformers**:
  - `Displace`, `RotatePoint`, `ScalePoint` and `TranslatePoint` in
    `noisekit.transformers`
  - `noisekit.turbulence.Turbulence` displaces the input point with fBm noise.
- **Caching**: `noisekit.cache.Cache` returns the previous result when it is
  asked again for the same point.
- **Colours**: `noisekit.color_gradient.ColorGradient` maps values to RGBA
  tuples.
  - It has grayscale, terrain and rainbow presets.
  - `interpolate_color` blends two colours.

The `set_*` and `add_*` methods return a new object and leave the original
unchanged.

## Example

```python
from noisekit.color_gradient import ColorGradient
from noisekit.fbm import Fbm
from noisekit.generators import Constant
from noisekit.modifiers import Clamp, ScaleBias
from noisekit.terrace import Terrace

shaped = Clamp(ScaleBias(Constant(0.25)).set_scale(2.0).set_bias(-0.5))
value = shaped.get([0.1, 0.2])

terrace = Terrace(shaped).add_control_point(-1.0).add_control_point(0.0).add_control_point(1.0)
print(terrace.get([0.1, 0.2]))

gradient = ColorGradient().build_terrain_gradient()
print(gradient.get_color(value))

fbm = Fbm(lambda seed: Constant(0.1), 0).set_octaves(4).set_frequency(2.0)
print(fbm.get([0.1, 0.2, 0.3]))
```

## Behaviour notes

- Fractals, transformers and `Turbulence` accept points with 2, 3 or 4
  coordinates. Any other number of coordinates raises `ValueError`.
- `RotatePoint` rotates 2- and 3-dimensional points only. A 4-dimensional point
  raises `ValueError`.
- `Displace` needs a `z_displace` source for 3-dimensional points, and a
  `u_displace` source as well for 4-dimensional points.
- `Curve.get` needs at least four control points, and `Terrace.get` needs at
  least two. With fewer points, each raises `ValueError`.
- `Cache.get` raises `ValueError` when it is given a point with a different
  number of coordinates from the cached one.

## What this package does not do

- It has no gradient-noise generators of its own, such as Perlin, simplex,
  value or Worley noise. Fractals and `Turbulence` need a `source_factory`
  supplied by the caller.
- It has no grid types for noise maps or images.
- It has no map builders, and it does not render or write image files.
- There is no command-line tool.