"""
Unit tests for the friction module.

Tests Reynolds number, regime classification and friction factor
calculations.
"""

import pytest
import numpy as np

from injection_hydraulics.config import Config
from injection_hydraulics.friction import (
    LAMINAR,
    TRANSITIONAL,
    TURBULENT,
    classify_regime,
    friction_factor,
    friction_factor_and_regime,
    friction_factor_laminar,
    friction_factor_swamee_jain,
    friction_pressure_loss,
    reynolds_number,
)


class TestReynoldsNumber:
    """Test Reynolds number calculation."""

    def test_turbulent_water(self):
        """Water at 2 m/s in 100 mm pipe."""
        Re = reynolds_number(2.0, 0.1, 1000.0, 0.001)
        assert np.isclose(Re, 200000.0)

    def test_laminar_water(self):
        """Water at 1 cm/s in 100 mm pipe."""
        Re = reynolds_number(0.01, 0.1, 1000.0, 0.001)
        assert np.isclose(Re, 1000.0)

    def test_zero_viscosity(self):
        """Zero viscosity returns exactly 0 instead of failing."""
        for v in (0.0, 1.0, 50.0):
            assert reynolds_number(v, 0.1, 1000.0, 0.0) == 0

    def test_zero_diameter(self):
        """Zero diameter returns exactly 0."""
        for rho, mu in ((1000.0, 0.001), (800.0, 0.5)):
            assert reynolds_number(2.0, 0.0, rho, mu) == 0

    def test_formula(self):
        """Re = ρ*v*D/μ."""
        rho, v, D, mu = 1100.0, 3.2, 0.0762, 0.002
        assert np.isclose(reynolds_number(v, D, rho, mu), rho * v * D / mu)


class TestRegime:
    """Test regime classification."""

    def test_thresholds(self):
        """Laminar below 2300, transitional below 4000, turbulent above."""
        assert classify_regime(0.0) == LAMINAR
        assert classify_regime(2299.9) == LAMINAR
        assert classify_regime(2300.0) == TRANSITIONAL
        assert classify_regime(3999.9) == TRANSITIONAL
        assert classify_regime(4000.0) == TURBULENT
        assert classify_regime(1e6) == TURBULENT

    def test_custom_thresholds(self):
        """Thresholds come from the configuration."""
        config = Config(LAMINAR_FLOW_LIMIT=2000.0, TURBULENT_FLOW_START=3000.0)
        assert classify_regime(2100.0, config) == TRANSITIONAL
        assert classify_regime(3000.0, config) == TURBULENT

    def test_label_matches_factor(self):
        """Reported regime and the factor formula always agree."""
        eps_D = 0.001
        for Re in np.linspace(100.0, 10000.0, 60):
            f, regime = friction_factor_and_regime(Re, eps_D)
            assert regime == classify_regime(Re)
            assert f == friction_factor(Re, eps_D)
            if regime == LAMINAR:
                assert np.isclose(f, 64.0 / Re)
            elif regime == TURBULENT:
                assert np.isclose(f, friction_factor_swamee_jain(Re, eps_D))


class TestFrictionFactor:
    """Test friction factor calculations."""

    def test_laminar_friction(self):
        """Test laminar friction factor f = 64/Re."""
        for Re in (10.0, 500.0, 2000.0, 2299.0):
            assert np.isclose(friction_factor(Re, 0.001), 64.0 / Re)

    def test_laminar_rejects_nonpositive(self):
        """The bare laminar formula needs a positive Reynolds number."""
        with pytest.raises(ValueError):
            friction_factor_laminar(0.0)

    def test_degenerate_reynolds(self):
        """Re <= 0 gives a zero friction factor."""
        assert friction_factor(0.0, 0.001) == 0
        assert friction_factor(-10.0, 0.001) == 0

    def test_turbulent_range(self):
        """Swamee-Jain gives a reasonable turbulent value."""
        f = friction_factor(1e5, 0.001)
        assert 0.01 < f < 0.1

    def test_turbulent_rough_above_smooth(self):
        """Rough pipe has higher friction than a smooth one."""
        f_rough = friction_factor(1e5, 0.001)
        f_smooth = friction_factor(1e5, 0.0)
        assert f_rough > f_smooth
        assert 0.015 < f_smooth < 0.025

    def test_smooth_pipe_finite(self):
        """Zero and tiny roughness stay finite through the roughness floor."""
        assert np.isfinite(friction_factor(1e5, 0.0))
        assert np.isclose(friction_factor(1e5, 0.0), friction_factor(1e5, 1e-12))
        assert 0 < friction_factor(1e5, 1e-9) < 0.1

    def test_swamee_jain_value(self):
        """Spot check of the explicit formula."""
        Re, eps_D = 147365.7, 0.0005
        expected = 0.25 / np.log10(eps_D / 3.7 + 5.74 / Re ** 0.9) ** 2
        assert np.isclose(friction_factor_swamee_jain(Re, eps_D), expected)
        assert np.isclose(expected, 0.01951, atol=1e-4)

    def test_transitional_interpolation(self):
        """Transitional value lies on the line between the two endpoints."""
        eps_D = 0.001
        f_lam = 64.0 / 2300.0
        f_turb = friction_factor_swamee_jain(4000.0, eps_D)

        f = friction_factor(3000.0, eps_D)
        alpha = (3000.0 - 2300.0) / 1700.0
        assert np.isclose(f, f_lam + alpha * (f_turb - f_lam))
        assert min(f_lam, f_turb) < f < max(f_lam, f_turb)

    def test_continuity_at_laminar_limit(self):
        """No jump at Re = 2300."""
        eps_D = 0.0005
        below = friction_factor(2300.0 - 1e-6, eps_D)
        above = friction_factor(2300.0, eps_D)
        assert np.isclose(below, above, rtol=1e-6)

    def test_continuity_at_turbulent_start(self):
        """No jump at Re = 4000."""
        eps_D = 0.0005
        below = friction_factor(4000.0 - 1e-6, eps_D)
        above = friction_factor(4000.0, eps_D)
        assert np.isclose(below, above, rtol=1e-6)


class TestDarcyWeisbach:
    """Test Darcy-Weisbach pressure loss."""

    def test_pressure_loss_positive(self):
        """Test that pressure loss is positive."""
        dP = friction_pressure_loss(0.02, 1000.0, 0.1, 1000.0, 1.5)
        assert dP > 0

    def test_pressure_loss_formula(self):
        """ρ*g*hf equals f*(L/D)*ρ*v²/2."""
        f, L, D, rho, v = 0.02, 1000.0, 0.1, 1000.0, 1.5
        dP = friction_pressure_loss(f, L, D, rho, v)
        assert np.isclose(dP, f * (L / D) * rho * v ** 2 / 2.0)

    def test_pressure_loss_scaling(self):
        """Test that pressure loss scales with velocity squared."""
        f, L, D, rho = 0.02, 1000.0, 0.2, 600.0
        ratio = friction_pressure_loss(f, L, D, rho, 2.0) / friction_pressure_loss(f, L, D, rho, 1.0)
        assert np.isclose(ratio, 4.0)

    def test_zero_velocity(self):
        """No flow, no friction."""
        assert friction_pressure_loss(0.02, 1000.0, 0.1, 1000.0, 0.0) == 0
