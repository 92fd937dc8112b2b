"""Forward-mode automatic differentiation with higher-order Taylor and dual numbers."""

__version__ = "0.1.0"

__all__ = [
    "binomial",
    "traits",
    "vector",
    "real",
    "dual",
    "derivative",
    "taylorseries",
    "gradient",
]