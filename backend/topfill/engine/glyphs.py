"""Glyph sets, opacity levels and colour pools shared by the pattern builders."""

from __future__ import annotations

# Discrete opacities keep the number of distinct symbols small.
OPACITY_LEVELS: tuple[float, ...] = (0.45, 0.6, 0.75, 0.9, 1.0)

# Full emoticon set; several entries need fonts with wide Unicode coverage.
GLYPHS_ALL: tuple[str, ...] = (
    ":-)", ":-D", ":-(", ";-)", ":-P", ":-O", "8-)", ":/", "XD", "<3",
    "(^^)", "(◕‿◕)", "(UwU)", "(OwO)", "(*^ω^)", "(✿◠‿◠)", "(>ᴗ<)", "^^",
    "(T_T)", "( ;; )", "(..)", "(--)", "(><)", "(x_x)", "(..)?", "¯_(ツ)/¯",
    "(ಠ_ಠ)", "(¬¬)", "(╬ Ò﹏Ó)", "t(--t)", "(╯°□°）╯︵ ┻━┻", "(ง'̀-'́)ง",
    "(=^･^=)", "(^(I)^)", "ʕ•ᴥ•ʔ", "(V) (;,,;) (V)", "[¬º-°]¬", "><((((º>",
    "( ͡° ͜ʖ ͡°)", "($_$)", "(_)", "(¬‿¬)",
)

# Renders with a plain Arial face, no fallback fonts needed.
GLYPHS_ASCII: tuple[str, ...] = (
    ":-)", ":-D", ":-(", ";-)", ":-P", ":-O", "8-)", ":/", "XD", "<3",
    "(^^)", "^^", "(T_T)", "( ;; )", "(..)", "(--)", "(><)", "(x_x)", "(..)?",
    "t(--t)", "($_$)", "(_)", "(V) (;,,;) (V)",
)

# Pool the bars pattern draws its 3 / 6 / 9 colour palette from.
BARS_COLOR_POOL: tuple[str, ...] = (
    "#ffcc00", "#ff6a00", "#00c2ff", "#7c4dff", "#00d18f", "#ff3d71",
    "#ff5fa2", "#23c55e", "#0ea5e9", "#f97316", "#a855f7", "#22c55e",
    "#06b6d4", "#f43f5e", "#eab308", "#6366f1", "#14b8a6", "#111111",
)

# Background choices for the faces pattern.
FACES_BACKGROUNDS: tuple[str, ...] = (
    "#ffcc00", "#ff6a00", "#00c2ff", "#7c4dff",
    "#00d18f", "#ff3d71", "#e6e6e6", "#111111",
)


def glyph_set(ascii_only: bool = True) -> tuple[str, ...]:
    return GLYPHS_ASCII if ascii_only else GLYPHS_ALL
