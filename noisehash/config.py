"""Fixed constants of the permutation table and its consumers.

These are part of the reproducibility contract: changing any of the table or
generator values changes every table derived from a seed.
"""

from __future__ import annotations

# --- Permutation table ---
TABLE_SIZE = 256
BYTE_MASK = 0xFF

# --- Seed expansion ---
# Byte 0 of the 16-byte expansion buffer. Keeps the generator state non-zero
# for every seed, including 0.
SEED_MARKER = 1
SEED_BYTES = 16
# The seed is written little-endian into blocks 1..3 of the buffer.
SEED_BLOCKS = (1, 2, 3)
SEED_MASK = 0xFFFFFFFF

# --- XorShift128 ---
U32_MASK = 0xFFFFFFFF
# State used when a generator is seeded with sixteen zero bytes.
XORSHIFT_ZERO_SEED = 0x0BAD5EED

# --- Noise consumers ---
DEFAULT_SEED = 0

# --- Map building ---
DEFAULT_MAP_SIZE = (100, 100)
DEFAULT_MAP_BOUNDS = (-1.0, 1.0)
