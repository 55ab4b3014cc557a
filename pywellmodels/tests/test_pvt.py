#!/usr/bin/env python3
"""
Validation tests for the PVT property models (density, viscosity, relative permeability,
solubility and formation volume factor).
Run with: python3 -m pytest pywellmodels/tests/ -v
Or standalone: python3 pywellmodels/tests/test_pvt.py
"""

import sys
import os
import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
import pywellmodels.density as density
import pywellmodels.viscosity as viscosity
import pywellmodels.relperm as relperm
import pywellmodels.solubility as solubility
import pywellmodels.fvf as fvf
from pywellmodels.errors import DomainError, ConfigurationError

RTOL = 1e-12

# =============================================================================
# Density
# =============================================================================

def test_constant_density_ignores_pressure():
    m = density.ConstantDensityModel(998.0)
    assert m.compute_density(1e5) == 998.0
    assert m.compute_density(5e7) == 998.0
    arr = m.compute_density([1e5, 2e5, 3e5])
    assert np.all(arr == 998.0) and arr.shape == (3,)

def test_well_compressible_density_linear():
    """rho = rho_ref + (p - p_ref) / a^2"""
    m = density.WellCompressibleDensityModel(1000.0, 1e5, 1500.0)
    assert m.compute_density(1e5) == pytest.approx(1000.0, rel=RTOL)
    expected = 1000.0 + (2.26e7 - 1e5) / 1500.0 ** 2
    assert m.compute_density(2.26e7) == pytest.approx(expected, rel=RTOL)
    # Below reference pressure the density drops, still finite
    assert m.compute_density(0.0) < 1000.0

def test_well_compressible_density_gas_form():
    """Ideal gas written as rho = p / (R T)"""
    rt = 287.0 * 300.0
    m = density.WellCompressibleDensityModel(0.0, 0.0, np.sqrt(rt))
    assert m.compute_density(1e6) == pytest.approx(1e6 / rt, rel=1e-10)

def test_well_compressible_density_zero_sound_speed():
    with pytest.raises(ConfigurationError):
        density.WellCompressibleDensityModel(1000.0, 1e5, 0.0)

def test_compressible_density():
    m = density.CompressibleDensityModel(850.0)
    assert m.compute_density(1.25) == pytest.approx(680.0, rel=RTOL)

@pytest.mark.parametrize('bo', [0.0, -1.2])
def test_compressible_density_rejects_non_positive_fvf(bo):
    m = density.CompressibleDensityModel(850.0)
    with pytest.raises(DomainError):
        m.compute_density(bo)

def test_oil_density_uses_set_solubility():
    m = density.OilDensityModel(850.0, 0.9)
    assert m.solubility == 0.0
    assert m.compute_density(1.3) == pytest.approx(850.0 / 1.3, rel=RTOL)
    m.set_solubility(100.0)
    expected = (1 + 0.9 / 850.0 * 100.0) * (850.0 / 1.3)
    assert m.compute_density(1.3) == pytest.approx(expected, rel=RTOL)

def test_oil_density_explicit_solubility_leaves_stored_value():
    m = density.OilDensityModel(850.0, 0.9)
    m.set_solubility(50.0)
    explicit = m.compute_density(1.3, solubility=100.0)
    assert explicit == pytest.approx((1 + 0.9 / 850.0 * 100.0) * (850.0 / 1.3), rel=RTOL)
    assert m.solubility == 50.0, "Explicit solubility must not overwrite the stored one"

def test_oil_density_rejects_zero_fvf():
    with pytest.raises(DomainError):
        density.OilDensityModel(850.0, 0.9).compute_density(0.0)

# =============================================================================
# Viscosity
# =============================================================================

def test_power_viscosity():
    m = viscosity.PowerViscosityModel(1e-3, 0.1)
    assert m.compute_viscosity(1e6) == pytest.approx(1e-3 * 1e6 ** 0.1, rel=RTOL)
    assert m.alpha == 1e-3 and m.exponent == 0.1

def test_power_viscosity_array():
    m = viscosity.PowerViscosityModel(2.0, 0.5)
    out = m.compute_viscosity([4.0, 9.0, 16.0])
    assert isinstance(out, np.ndarray)
    assert np.allclose(out, [4.0, 6.0, 8.0])

def test_power_viscosity_negative_pressure():
    m = viscosity.PowerViscosityModel(1e-3, 0.1)
    with pytest.raises(DomainError):
        m.compute_viscosity(-1.0)
    with pytest.raises(DomainError):
        m.compute_viscosity([1e5, -1.0])

# =============================================================================
# Relative Permeability
# =============================================================================

def test_relperm_scenario():
    """min=0.2, max=0.8, kr_max=0.9, n=2"""
    m = relperm.PowerRelativePermeabilityModel(0.2, 0.8, 0.9, 2)
    assert m.compute_relative_permeability(0.1) == 0.0
    assert m.compute_relative_permeability(0.9) == 0.9
    assert m.compute_relative_permeability(0.5) == pytest.approx(0.225, rel=1e-12)

def test_relperm_regions():
    m = relperm.PowerRelativePermeabilityModel(0.2, 0.8, 0.9, 3)
    for s in [-0.5, 0.0, 0.1, 0.199999]:
        assert m.compute_relative_permeability(s) == 0.0, f"kr({s}) should be zero below minimum"
    for s in [0.800001, 0.9, 1.0, 1.5]:
        assert m.compute_relative_permeability(s) == 0.9, f"kr({s}) should be clamped above maximum"
    assert m.compute_relative_permeability(0.2) == 0.0
    assert m.compute_relative_permeability(0.8) == pytest.approx(0.9, rel=1e-12)

def test_relperm_monotonic():
    m = relperm.PowerRelativePermeabilityModel(0.15, 0.75, 0.6, 2.5)
    s = np.linspace(0.0, 1.0, 201)
    kr = m.compute_relative_permeability(s)
    assert np.all(np.diff(kr) >= 0), "kr must be non-decreasing in saturation"
    assert np.all(kr >= 0) and np.all(kr <= 0.6)

def test_relperm_limits_and_alpha():
    m = relperm.PowerRelativePermeabilityModel(0.2, 0.8, 1.0)
    assert m.alpha == pytest.approx(1 / 0.6)
    m.set_saturation_limits(0.1, 0.6)
    assert m.alpha == pytest.approx(2.0)
    assert m.compute_relative_permeability(0.35) == pytest.approx(0.5)

@pytest.mark.parametrize('smin, smax', [(0.8, 0.2), (0.5, 0.5)])
def test_relperm_bad_limits(smin, smax):
    with pytest.raises(ConfigurationError):
        relperm.PowerRelativePermeabilityModel(smin, smax, 0.9, 2)

def test_relperm_bad_reset_keeps_model():
    m = relperm.PowerRelativePermeabilityModel(0.2, 0.8, 0.9, 2)
    with pytest.raises(ConfigurationError):
        m.set_saturation_limits(0.7, 0.3)
    assert m.minimum_saturation == 0.2 and m.maximum_saturation == 0.8

# =============================================================================
# Solubility
# =============================================================================

def test_solubility_below_ceiling():
    m = solubility.PowerSolubilityModel(0.8, 1e-4, 850.0, 0.9)
    rs = m.compute_solubility(1e6, 0.9, 0.1)
    assert rs == pytest.approx(1e-4 * 1e6 ** 0.8, rel=RTOL)

def test_solubility_capped_by_mass_balance():
    m = solubility.PowerSolubilityModel(1.0, 1.0, 850.0, 0.9)
    ceiling = 850.0 / 0.9 * 0.001 / 0.999
    assert m.compute_solubility(1e7, 0.999, 0.001) == pytest.approx(ceiling, rel=RTOL)

def test_solubility_never_exceeds_ceiling():
    m = solubility.PowerSolubilityModel(0.9, 5e-4, 850.0, 0.9)
    for p in [1e5, 1e6, 1e7, 3e7]:
        for xo in [0.05, 0.3, 0.7, 1.0]:
            for xg in [0.0, 0.01, 0.2, 0.6]:
                rs = m.compute_solubility(p, xo, xg)
                ceiling = 850.0 / 0.9 * xg / xo
                assert rs <= ceiling * (1 + RTOL), f"Rs={rs} above ceiling {ceiling} at p={p}, xo={xo}, xg={xg}"

def test_solubility_zero_oil_fraction():
    m = solubility.PowerSolubilityModel(0.9, 5e-4, 850.0, 0.9)
    with pytest.raises(DomainError):
        m.compute_solubility(1e6, 0.0, 0.1)

# =============================================================================
# Formation Volume Factor
# =============================================================================

def test_liquid_fvf_scenario():
    m = fvf.LiquidFormationVolumeFactorModel(compressibility=1e-5, ref_pressure=2000, ref_formation_volume_factor=1.2)
    b = m.compute_formation_volume_factor(3000)
    assert b == pytest.approx(1.2 / (1 + 1e-5 * 1000), rel=RTOL)
    assert 1.188 < b < 1.189

def test_liquid_fvf_reference_point():
    m = fvf.LiquidFormationVolumeFactorModel(1e-9, 1e7, 1.35)
    assert m.compute_formation_volume_factor(1e7) == pytest.approx(1.35, rel=RTOL)

def test_liquid_fvf_non_positive_denominator():
    m = fvf.LiquidFormationVolumeFactorModel(1e-3, 2000, 1.2)
    with pytest.raises(DomainError):
        m.compute_formation_volume_factor(1000)  # 1 + 1e-3 * -1000 == 0
    with pytest.raises(DomainError):
        m.compute_formation_volume_factor(500)

def test_gas_fvf():
    m = fvf.GasFormationVolumeFactorModel(1e5, 0.005)
    assert m.compute_formation_volume_factor(1e5) == pytest.approx(0.005, rel=RTOL)
    assert m.compute_formation_volume_factor(1e6) == pytest.approx(0.005 * 1e6 / (2e6 - 1e5), rel=RTOL)

def test_gas_fvf_singular():
    m = fvf.GasFormationVolumeFactorModel(1e5, 0.005)
    with pytest.raises(DomainError):
        m.compute_formation_volume_factor(5e4)

# =============================================================================
# Composition of formation volume factor and density
# =============================================================================

def test_fvf_density_roundtrip():
    """rho_std / B(p) matches the FVF based density model"""
    b_model = fvf.LiquidFormationVolumeFactorModel(1.5e-9, 1e5, 1.02)
    d_model = density.CompressibleDensityModel(1000.0)
    for p in [1e5, 5e6, 2e7, 4e7]:
        b = b_model.compute_formation_volume_factor(p)
        rho = d_model.compute_density(b)
        assert rho == pytest.approx(1000.0 / b, rel=RTOL)
        # Same as 1 + c(p - p_ref) scaled, to first principles
        assert rho == pytest.approx(1000.0 * (1 + 1.5e-9 * (p - 1e5)) / 1.02, rel=RTOL)

def test_fvf_density_roundtrip_array():
    b_model = fvf.GasFormationVolumeFactorModel(1e5, 0.005)
    d_model = density.CompressibleDensityModel(0.8)
    p = np.linspace(2e5, 2e7, 25)
    rho = d_model.compute_density(b_model.compute_formation_volume_factor(p))
    assert np.allclose(rho, 0.8 * (2 * p - 1e5) / (0.005 * p), rtol=RTOL, atol=0)


if __name__ == '__main__':
    sys.exit(pytest.main([__file__, '-v']))
