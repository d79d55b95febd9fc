# shadekit

Building blocks for image processing on grids and for writing full-screen
GLSL passes, in plain Python with no dependencies.

## Modules

- `shadekit.array2d` – `Array2D(width, height, fill=0.0)`, a grid stored row by row and
  indexed with `(x, y)` pairs. Out-of-range indexing raises `IndexError`;
  `wr` / `set_wr` / `wrap_point` wrap coordinates around the edges. Also `size()`,
  `points()` (every `(x, y)` in storage order), `contains`, `clone`, and the helpers
  `empty_like` (filled with `None`), `ones_like`, `zeros_like`, `rotate(point, angle)`
  and `rand_float()`.
- `shadekit.bicubic` – `get_bicubic(src, xn, yn)` samples an `Array2D` at normalised
  coordinates with Catmull-Rom weights, wrapping at the edges; `get_bicubic2` does the
  same along x only. Also `lerp`, `cubic` (Hermite), `cubic_coefs` and `dot4`.
- `shadekit.simplexnoise` – `raw_noise_2d`, `raw_noise_3d`, `raw_noise_4d`: deterministic
  simplex noise in roughly (-1, 1); plus `fastfloor`.
- `shadekit.octavenoise` – `octave_noise_2d/3d/4d(octaves, persistence, scale, ...)`
  sums octaves of doubling frequency and normalises by the total amplitude
  (`ValueError` for a non-positive octave count); `scaled_octave_noise_*` and
  `scaled_raw_noise_*` map the result onto `[lo_bound, hi_bound]`.
- `shadekit.fft_common` – `get_a_and_b(n, FFTDir.FORWARD)` (or `FFTDir.BACKWARD`) returns
  the A and B tables, `n // 2` `(re, im)` pairs each, used to obtain a real FFT of
  length `n` from a complex FFT of half that length.
- `shadekit.shade` – GLSL source assembly. `ShadeOpts` holds the options of a pass and
  is set fluently (`ifmt`, `scale`, `scope`, `target_tex`, `target_texs`, `target_img`,
  `dst_pos`, `dst_rect_size`, `src_area`, `enable_result`, `uniform`, `vshader_extra`).
  `uniform_declarations`, `complete_fragment_shader` and `complete_vertex_shader` produce
  the shader text; `viewport_size` gives a pass's output size. `TextureSpec` describes an
  input texture, `Uniform` a user uniform, `type_to_string` maps a value to `float`,
  `int`, `vec2` or `ivec2`, `sampler_name(i)` gives `tex`, `tex2`, `tex3`, ... and
  `Str` is a newline-joining text builder.
- `shadekit.stopwatch` – `Stopwatch` records nested timings per frame (`measure` as a
  context manager, or `timeit(desc, func)`), in whole milliseconds, and `end_frame`
  writes them as `desc took Nms`, indented with tabs by depth.
- `shadekit.input_state` – `InputState` records key presses (`keys`, and `keys2`, which
  flips when a key is pressed with control), mouse buttons (`MouseButton`) and the mouse
  position relative to a window.
- `shadekit.stuff` – `sign`, `exp_range`, `nice_exp_range`, `ilog2`, `compdiv`,
  `safe_normalized`, `clamp_point`, `pop_front`, `to_strings`, `my_assert` (raises
  `RuntimeError`), `DenormalCheck` (counts single-precision denormals), `FileCache`
  (reads files under a root directory once) and `QDebug` / `q_debug` (stream values with
  `<<`, newline when the `with` block ends).

## Installing

```
pip install .
```

`pip install .[test]` also installs pytest for the test suite.

## Examples

```python
from shadekit.array2d import Array2D
from shadekit.bicubic import get_bicubic
from shadekit.simplexnoise import raw_noise_2d

img = Array2D(16, 16, 0.0)
for x, y in img.points():
    img[x, y] = raw_noise_2d(x * 0.1, y * 0.1)

print(get_bicubic(img, 0.5, 0.5))
```

Timing a frame:

```python
import sys
from shadekit.stopwatch import Stopwatch

sw = Stopwatch()
sw.begin_frame()
with sw.measure("blur"):
    ...
sw.end_frame(sys.stdout)
```

Building a fragment shader:

```python
from shadekit.shade import ShadeOpts, TextureSpec, complete_fragment_shader, viewport_size

opts = ShadeOpts().uniform("gain", 2.0).scale(0.5)
source = complete_fragment_shader(
    [TextureSpec(640, 480)],
    opts.uniforms,
    "void shade() { _out.rgb = fetch3() * gain; }",
)
print(viewport_size(640, 480, opts))  # (320, 240)
```

## What it does not do

The package only produces shader source text; it does not compile or run shaders,
create textures or talk to a GPU. It opens no window and runs no event loop:
`InputState` only records the events you pass to it.