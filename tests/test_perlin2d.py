import numpy as np
import pytest

from noisehash.core import grad2_table
from noisehash.noise_2d import Perlin2D, fbm2
from noisehash.table import PermutationTable


def test_perlin2d_deterministic_for_seed():
    p1 = Perlin2D(seed=123)
    p2 = Perlin2D(seed=123)
    x = np.array([0.1, 1.25, 10.5])
    y = np.array([0.2, 2.75, 9.0])
    assert np.allclose(p1.noise(x, y), p2.noise(x, y))


def test_perlin2d_changes_with_seed():
    p1 = Perlin2D(seed=1)
    p2 = Perlin2D(seed=2)
    xg, yg = np.meshgrid(np.linspace(0.1, 7.9, 16), np.linspace(0.3, 5.7, 16))
    assert not np.allclose(p1.noise(xg, yg), p2.noise(xg, yg))


def test_perlin2d_zero_on_lattice():
    p = Perlin2D(seed=0)
    xg, yg = np.meshgrid(np.arange(-3.0, 3.0), np.arange(-2.0, 2.0))
    assert np.allclose(p.noise(xg, yg), 0.0)


def test_perlin2d_hasher_overrides_seed():
    t = PermutationTable.from_seed(9)
    x = np.array([0.1, 1.25, 10.5])
    y = np.array([0.2, 2.75, 9.0])
    assert np.allclose(Perlin2D(seed=0, hasher=t).noise(x, y), Perlin2D(seed=9).noise(x, y))


def test_fbm2_shape_and_finite():
    p = Perlin2D(seed=0)
    xg, yg = np.meshgrid(np.linspace(0, 3, 64), np.linspace(0, 3, 32))
    z = fbm2(p, xg, yg, octaves=4, lacunarity=2.0, persistence=0.5)
    assert z.shape == xg.shape
    assert np.isfinite(z).all()


def test_fbm2_single_octave_is_base_noise():
    p = Perlin2D(seed=0)
    xg, yg = np.meshgrid(np.linspace(0, 3, 16), np.linspace(0, 3, 8))
    assert np.allclose(fbm2(p, xg, yg, octaves=1), p.noise(xg, yg))


def test_perlin2d_reasonable_range():
    p = Perlin2D(seed=0)
    xg, yg = np.meshgrid(np.linspace(0, 5, 64), np.linspace(0, 5, 64))
    z = p.noise(xg, yg)
    assert float(np.max(np.abs(z))) < 2.0


def test_perlin2d_continuity_small_step():
    p = Perlin2D(seed=0)
    xg, yg = np.meshgrid(np.linspace(0, 5, 64), np.linspace(0, 5, 64))
    d = 1e-4
    z0 = p.noise(xg, yg)
    z1 = p.noise(xg + d, yg)
    assert float(np.max(np.abs(z1 - z0))) < 0.1


@pytest.mark.parametrize("grad_set", ["diag8", "axis4", "circle16"])
def test_perlin2d_grad_sets(grad_set):
    p = Perlin2D(seed=0, grad_set=grad_set)
    xg, yg = np.meshgrid(np.linspace(0, 4, 32), np.linspace(0, 4, 32))
    z = p.noise(xg, yg)
    assert np.isfinite(z).all()


def test_perlin2d_unknown_grad_set():
    with pytest.raises(ValueError):
        Perlin2D(seed=0, grad_set="hex6")


def test_debug_point_matches_noise():
    p = Perlin2D(seed=3)
    for x, y in [(0.1, 0.2), (1.25, 2.75), (-3.5, 9.0)]:
        dbg = p.debug_point(x, y)
        assert np.isclose(dbg["noise"], p.get((x, y)))


def test_debug_point_corner_hashes_use_table():
    t = PermutationTable.from_seed(3)
    p = Perlin2D(hasher=t)
    dbg = p.debug_point(-0.5, 4.25)
    assert dbg["cell"] == {"xi0": -1, "yi0": 4, "xi1": 0, "yi1": 5}
    assert dbg["hash"]["aa"] == t.hash([-1, 4])
    assert dbg["hash"]["bb"] == t.hash([0, 5])
    c00 = dbg["corners"]["c00"]
    g = grad2_table("diag8")[t.hash([-1, 4]) % 8]
    assert np.isclose(c00["gx"], g[0])
    assert np.isclose(c00["gy"], g[1])
