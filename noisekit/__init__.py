"""Composable coherent-noise functions, fractals, modifiers and colour gradients."""

__version__ = "0.1.0"

__all__ = [
    "basic_multi",
    "billow",
    "cache",
    "color_gradient",
    "curve",
    "fbm",
    "generators",
    "hybrid_multi",
    "modifiers",
    "multifractal",
    "ridged_multi",
    "selectors",
    "terrace",
    "transformers",
    "turbulence",
]