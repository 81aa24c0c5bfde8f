from .combinators import Add, Cylinders, Max, Min, Multiply
from .hasher import NoiseHasher, hash_lattice
from .map2d import PlaneMapBuilder
from .noise_1d import Perlin1D
from .noise_2d import Perlin2D, fbm2
from .noise_3d import Perlin3D
from .table import (
    PermutationTable,
    TableError,
    TableLengthError,
    TableValueError,
    expand_seed,
)
from .value_noise_2d import ValueNoise2D
from .xorshift import NumpyRng, RngCore, XorShiftRng

__all__ = [
    "Add",
    "Cylinders",
    "Max",
    "Min",
    "Multiply",
    "NoiseHasher",
    "NumpyRng",
    "PermutationTable",
    "Perlin1D",
    "Perlin2D",
    "Perlin3D",
    "PlaneMapBuilder",
    "RngCore",
    "TableError",
    "TableLengthError",
    "TableValueError",
    "ValueNoise2D",
    "XorShiftRng",
    "expand_seed",
    "fbm2",
    "hash_lattice",
]
