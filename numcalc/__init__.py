"""Classical numerical methods: matrices, linear systems, decompositions, eigenvalues, roots, optimisation and ODEs."""

__version__ = "0.1.0"

__all__ = [
    "matrix",
    "vector",
    "norms",
    "linear",
    "decompose",
    "eigen",
    "ode_boundary",
    "roots",
    "optimize",
    "ode_single",
    "ode_multistep",
]