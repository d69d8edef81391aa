"""Unit tests for the attraction law and its configuration."""

import numpy as np
import pytest

from plife.core.attraction import AttractionMatrix, AttractionRadius, attraction_factor
from plife.core.errors import ConfigurationError


RMIN, RMAX = 0.04, 0.4


class TestAttractionRadius:
    """Tests for AttractionRadius."""

    def test_defaults(self):
        r = AttractionRadius()
        assert r.rmin == 0.04
        assert r.rmax == 0.4
        assert r.peak_distance == pytest.approx(0.22)

    def test_valid(self):
        AttractionRadius(rmin=0.1, rmax=0.2).validate()

    @pytest.mark.parametrize("rmin,rmax", [(0.0, 0.4), (-0.1, 0.4), (0.4, 0.4), (0.5, 0.4)])
    def test_invalid(self, rmin, rmax):
        with pytest.raises(ConfigurationError):
            AttractionRadius(rmin=rmin, rmax=rmax).validate()


class TestAttractionMatrix:
    """Tests for AttractionMatrix."""

    def test_from_rows(self):
        m = AttractionMatrix.from_rows([[0.3, 0.1], [-0.2, 0.3]])
        assert m.n_colors == 2
        assert m.peak(0, 1) == 0.1
        assert m.peak(1, 0) == -0.2

    def test_not_square(self):
        with pytest.raises(ConfigurationError):
            AttractionMatrix([[0.1, 0.2], [0.3, 0.4], [0.5, 0.6]])

    def test_ragged(self):
        with pytest.raises(ConfigurationError):
            AttractionMatrix([[0.1, 0.2], [0.3]])

    def test_empty(self):
        with pytest.raises(ConfigurationError):
            AttractionMatrix([])

    def test_non_finite(self):
        with pytest.raises(ConfigurationError):
            AttractionMatrix([[np.nan]])

    def test_ring(self):
        m = AttractionMatrix.ring(
            4,
            self_attraction=1.0,
            next_attraction=2.0,
            previous_attraction=3.0,
            other_attraction=4.0,
        )
        expected = [
            [1.0, 2.0, 4.0, 3.0],
            [3.0, 1.0, 2.0, 4.0],
            [4.0, 3.0, 1.0, 2.0],
            [2.0, 4.0, 3.0, 1.0],
        ]
        assert np.array_equal(m.values, expected)

    def test_random_in_range(self, rng):
        m = AttractionMatrix.random(5, rng, low=-0.5, high=0.5)
        assert m.values.shape == (5, 5)
        assert np.all(m.values >= -0.5)
        assert np.all(m.values < 0.5)

    def test_copy_and_equality(self):
        m = AttractionMatrix([[0.3, 0.1], [-0.2, 0.3]])
        c = m.copy()
        assert c == m
        c.values[0, 0] = 0.0
        assert c != m


class TestAttractionFactor:
    """Tests for the three distance bands."""

    @pytest.fixture
    def matrix(self):
        return AttractionMatrix([[0.3, 0.3], [-0.1, 0.2]])

    def test_repulsive_core_symmetric(self, matrix):
        assert attraction_factor(0.02, 0, 1, matrix, RMIN, RMAX) == (-0.5, -0.5)

    def test_core_ignores_matrix(self):
        repel = AttractionMatrix([[-1.0]])
        attract = AttractionMatrix([[1.0]])
        assert attraction_factor(0.01, 0, 0, repel, RMIN, RMAX) == attraction_factor(
            0.01, 0, 0, attract, RMIN, RMAX
        )

    def test_zero_at_rmin(self, matrix):
        assert attraction_factor(RMIN, 0, 1, matrix, RMIN, RMAX) == (0.0, 0.0)

    def test_band_value(self, matrix):
        a_by_b, b_by_a = attraction_factor(0.3, 0, 1, matrix, RMIN, RMAX)
        # |0.3 - 0.22| = 0.08
        assert a_by_b == pytest.approx(0.024)
        assert b_by_a == pytest.approx(-0.008)

    def test_band_is_asymmetric(self, matrix):
        a_by_b, b_by_a = attraction_factor(0.1, 0, 1, matrix, RMIN, RMAX)
        assert a_by_b > 0
        assert b_by_a < 0

    def test_band_zero_at_midpoint(self, matrix):
        a_by_b, b_by_a = attraction_factor(0.22, 0, 0, matrix, RMIN, RMAX)
        assert a_by_b == pytest.approx(0.0, abs=1e-12)
        assert b_by_a == pytest.approx(0.0, abs=1e-12)

    def test_band_largest_at_edges(self, matrix):
        near_edge, _ = attraction_factor(0.05, 0, 0, matrix, RMIN, RMAX)
        interior, _ = attraction_factor(0.2, 0, 0, matrix, RMIN, RMAX)
        far_edge, _ = attraction_factor(0.39, 0, 0, matrix, RMIN, RMAX)
        assert near_edge > interior
        assert far_edge > interior

    def test_rmax_inclusive(self, matrix):
        a_by_b, _ = attraction_factor(RMAX, 0, 0, matrix, RMIN, RMAX)
        assert a_by_b == pytest.approx(0.18 * 0.3)

    def test_beyond_rmax(self, rng):
        m = AttractionMatrix.random(3, rng)
        for d in [0.41, 0.5, 1.0, 3.8]:
            for a in range(3):
                for b in range(3):
                    assert attraction_factor(d, a, b, m, RMIN, RMAX) == (0.0, 0.0)

    def test_accepts_raw_array(self):
        values = np.array([[0.3]])
        a_by_b, _ = attraction_factor(0.3, 0, 0, values, RMIN, RMAX)
        assert a_by_b == pytest.approx(0.024)

    def test_vectorized_matches_scalar(self, rng):
        m = AttractionMatrix.random(3, rng)
        d = rng.uniform(0.0, 0.5, size=50)
        ca = rng.integers(0, 3, size=50)
        cb = rng.integers(0, 3, size=50)

        a_by_b, b_by_a = attraction_factor(d, ca, cb, m, RMIN, RMAX)

        for k in range(50):
            expected = attraction_factor(float(d[k]), int(ca[k]), int(cb[k]), m, RMIN, RMAX)
            assert a_by_b[k] == pytest.approx(expected[0])
            assert b_by_a[k] == pytest.approx(expected[1])
