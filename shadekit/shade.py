"""Assembly of fragment and vertex shader sources for full-screen passes.

A pass reads one or more textures and writes a result.  This module builds
the complete GLSL text for such a pass from the user's ``shade()`` body and
holds the options that describe the pass.  It does not talk to a GPU.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

Size = tuple[int, int]
Area = tuple[int, int, int, int]

ZERO_AREA: Area = (0, 0, 0, 0)


class Str:
    """Text builder: each piece appended with ``<<`` is followed by a newline."""

    def __init__(self) -> None:
        self.text = ""

    def __lshift__(self, other: str | Str) -> Str:
        piece = other.text if isinstance(other, Str) else other
        self.text += f"{piece}\n"
        return self

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Uniform:
    """A named uniform value and its GLSL declaration (``"float gain"``)."""

    name: str
    value: Any
    short_decl: str


@dataclass(frozen=True)
class TextureSpec:
    """What shader assembly needs to know about a texture."""

    width: int
    height: int
    unsigned_int: bool = False

    @property
    def size(self) -> Size:
        return (self.width, self.height)


def type_to_string(value: Any) -> str:
    """GLSL type name of a uniform value: float, int, vec2 or ivec2."""
    if isinstance(value, bool):
        raise TypeError("bool uniforms are not supported")
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, tuple) and len(value) == 2:
        if all(isinstance(c, int) and not isinstance(c, bool) for c in value):
            return "ivec2"
        if all(isinstance(c, (int, float)) and not isinstance(c, bool) for c in value):
            return "vec2"
    raise TypeError(f"no GLSL type for uniform value {value!r}")


@dataclass
class ShadeOpts:
    """Options of a shading pass, set fluently: ``ShadeOpts().scale(2).scope("x")``."""

    internal_format: int | None = None
    scale_x: float = 1.0
    scale_y: float = 1.0
    scope_name: str = ""
    target_textures: list[Any] = field(default_factory=list)
    target_image: Any = None
    area: Area = ZERO_AREA
    dst_position: Size = (0, 0)
    dst_rect: Size = (0, 0)
    result_enabled: bool = True
    uniforms: list[Uniform] = field(default_factory=list)
    vshader_extra_code: str = ""

    def ifmt(self, val: int) -> ShadeOpts:
        self.internal_format = val
        return self

    def scale(self, val_x: float, val_y: float | None = None) -> ShadeOpts:
        self.scale_x = val_x
        self.scale_y = val_x if val_y is None else val_y
        return self

    def scope(self, name: str) -> ShadeOpts:
        self.scope_name = name
        return self

    def target_tex(self, val: Any) -> ShadeOpts:
        self.target_textures = [val]
        return self

    def target_texs(self, val: Iterable[Any]) -> ShadeOpts:
        self.target_textures = list(val)
        return self

    def target_img(self, val: Any) -> ShadeOpts:
        self.target_image = val
        return self

    def dst_pos(self, val: Size) -> ShadeOpts:
        self.dst_position = val
        return self

    def dst_rect_size(self, val: Size) -> ShadeOpts:
        self.dst_rect = val
        return self

    def src_area(self, val: Area) -> ShadeOpts:
        self.area = val
        return self

    def enable_result(self, val: bool) -> ShadeOpts:
        self.result_enabled = val
        return self

    def uniform(self, name: str, val: Any) -> ShadeOpts:
        self.uniforms.append(Uniform(name, val, f"{type_to_string(val)} {name}"))
        return self

    def vshader_extra(self, val: str) -> ShadeOpts:
        self.vshader_extra_code = val
        return self


def sampler_suffix(i: int) -> str:
    """Suffix of the ``i``-th sampler: none for the first, then 2, 3, ..."""
    return "" if i == 0 else str(1 + i)


def sampler_name(i: int) -> str:
    return "tex" + sampler_suffix(i)


def uniform_declarations(
    textures: Sequence[TextureSpec], uniforms: Iterable[Uniform]
) -> str:
    """Declarations of the built-in, per-texture and user uniforms, with locations."""
    decls: list[str] = ["ivec2 viewportSize", "vec2 mouse"]
    for i, tex in enumerate(textures):
        sampler_type = "usampler2D" if tex.unsigned_int else "sampler2D"
        decls.append(f"{sampler_type} {sampler_name(i)}")
        decls.append(f"vec2 {sampler_name(i)}Size")
        decls.append(f"vec2 tsize{sampler_suffix(i)}")
    decls.extend(u.short_decl for u in uniforms)
    return "".join(
        f"layout(location={location}) uniform {decl};\n"
        for location, decl in enumerate(decls)
    )


_FETCH_KINDS = (("vec4", 4, "rgba"), ("vec3", 3, "rgb"), ("vec2", 2, "rg"), ("float", 1, "r"))


def _fetch_helpers() -> list[str]:
    variants = (
        ("sampler2D tex_, vec2 tc_", "tex_, tc_"),
        ("sampler2D tex_", "tex_, tc"),
        ("", "tex, tc"),
    )
    lines: list[str] = []
    for params, args in variants:
        for type_name, n, swizzle in _FETCH_KINDS:
            lines.append(f"{type_name} fetch{n}({params}) {{")
            lines.append(f"\treturn texture2D({args}).{swizzle};")
            lines.append("}")
    for type_name in ("vec2", "vec3", "vec4"):
        lines.append(
            f"{type_name} safeNormalized({type_name} v) "
            "{ return length(v)==0.0 ? v : normalize(v); }"
        )
    # The blank lines after #line work around a driver bug.
    lines.append("#line 0\n\n")
    return lines


def complete_fragment_shader(
    textures: Sequence[TextureSpec], uniforms: Iterable[Uniform], fshader: str
) -> str:
    """The full fragment shader around a body that defines ``void shade()``."""
    intro = Str()
    for line in (
        "#version 150",
        "#extension GL_ARB_explicit_uniform_location : enable",
        "#extension GL_ARB_texture_gather : enable",
        uniform_declarations(textures, uniforms),
        "in vec2 tc;",
        "in highp vec2 relOutTc;",
        "/*precise*/ out vec4 _out;",
    ):
        intro << line
    helpers = Str()
    for line in _fetch_helpers():
        helpers << line
    outro = Str()
    for line in (
        "void main()",
        "{",
        "\t_out = vec4(0.0f, 0.0f, 0.0f, 1.0f);",
        "\tshade();",
        "}",
    ):
        outro << line
    return str(intro) + str(helpers) + fshader + str(outro)


def complete_vertex_shader(declarations: str, vshader_extra: str = "") -> str:
    """The vertex shader of a full-screen pass."""
    text = Str()
    for line in (
        "#version 150",
        "#extension GL_ARB_explicit_uniform_location : enable",
        "in vec4 ciPosition;",
        "in vec2 ciTexCoord0;",
        "out highp vec2 tc;",
        "out highp vec2 relOutTc;",
        "uniform vec2 uTexCoordOffset, uTexCoordScale;",
        declarations,
        "void main()",
        "{",
        "\tgl_Position = ciPosition * 2 - 1;",
        "\ttc = ciTexCoord0;",
        "\trelOutTc = tc;",
        "\ttc = uTexCoordOffset + uTexCoordScale * tc;",
        vshader_extra,
        "}",
    ):
        text << line
    return str(text)


def viewport_size(width: int, height: int, opts: ShadeOpts) -> Size:
    """Output size of a pass over a ``width`` x ``height`` first input."""
    if opts.dst_rect != (0, 0):
        return opts.dst_rect
    return (math.floor(width * opts.scale_x), math.floor(height * opts.scale_y))