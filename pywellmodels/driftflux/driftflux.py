#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pyWellModels - Fluid property and drift-flux closure models for well flow
              Copyright (C) 2022, Mark Burgoyne

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.

          Contact author at mark.w.burgoyne@gmail.com
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from typing import Optional

from pywellmodels.constants import SHI_K_LOW
from pywellmodels.errors import ConfigurationError, domain_error, numerical_error
from pywellmodels.shared_fns import ConstantModel, PowerModel, check_finite
from pywellmodels.validate import check_ordered

# ============================================================================
#  Evaluation states
# ============================================================================

@dataclass(frozen=True)
class DriftVelocityState:
    """ Local flow state for a drift velocity evaluation

        volume_fraction: Volume fraction of the dispersed phase
        characteristic_velocity: Characteristic (bubble rise / Kutateladze) velocity (m/s)
        profile_parameter: Profile parameter C0 at the same point
        dispersed_density: Dispersed phase density (kg/m3)
        continuous_density: Continuous phase density (kg/m3)
        critical_kutateladze: Critical Kutateladze number, the slip coefficient at high void fraction
    """
    volume_fraction: float
    characteristic_velocity: Optional[float] = None
    profile_parameter: Optional[float] = None
    dispersed_density: Optional[float] = None
    continuous_density: Optional[float] = None
    critical_kutateladze: Optional[float] = None

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ProfileParameterState:
    """ Local flow state for a profile parameter evaluation

        volume_fraction: Volume fraction of the dispersed phase
        mixture_velocity: Mixture velocity (m/s)
        flooding_velocity: Flooding velocity (m/s)
    """
    volume_fraction: float
    mixture_velocity: float = 0.0
    flooding_velocity: Optional[float] = None

    def as_dict(self) -> dict:
        return asdict(self)


_FINITE_FIELDS = ('volume_fraction', 'mixture_velocity')


def _require(model, state, *names):
    missing = [n for n in names if getattr(state, n) is None]
    if missing:
        raise domain_error(f"State is missing {', '.join(missing)}", model=model, **state.as_dict())
    # max() and min() drop NaN, so a NaN volume fraction would pass the breakpoints unnoticed
    bad = [n for n in names if n in _FINITE_FIELDS and not math.isfinite(getattr(state, n))]
    if bad:
        raise domain_error(f"State has non-finite {', '.join(bad)}", model=model, **state.as_dict())


def _clamp(val, lo, hi):
    return max(lo, min(hi, val))


# ============================================================================
#  Drift Velocity Models
# ============================================================================

class DriftVelocityModel(ABC):
    @abstractmethod
    def compute_drift_velocity(self, state: DriftVelocityState) -> float:
        ...


class ConstantDriftVelocityModel(DriftVelocityModel):
    def __init__(self, drift_velocity: float):
        self._constant = ConstantModel(drift_velocity)

    @property
    def drift_velocity(self) -> float:
        return self._constant.get_constant_value()

    def compute_drift_velocity(self, state: DriftVelocityState = None) -> float:
        return self.drift_velocity


class GasVolumeFractionDriftVelocityModel(DriftVelocityModel):
    """ Vd = alpha * (1 - gas volume fraction) ** power """
    def __init__(self, alpha: float, power: float):
        self._power = PowerModel(alpha, power)

    @property
    def alpha(self) -> float:
        return self._power.get_alpha()

    @property
    def power(self) -> float:
        return self._power.get_power()

    def compute_drift_velocity(self, state: DriftVelocityState) -> float:
        _require(type(self).__name__, state, 'volume_fraction')
        return self._power.evaluate(1.0 - state.volume_fraction, model=type(self).__name__)


class ShiGasLiquidDriftVelocityModel(DriftVelocityModel):
    """ Gas-liquid drift velocity of Shi et al. (2005)

        a1: Volume fraction below which the low void fraction slip coefficient applies
        a2: Volume fraction above which the critical Kutateladze number applies

        k blends linearly from 1.53 / C0 at a1 to Ku_crit at a2, then

                 (1 - vf C0) C0 k Vc
        Vd = -----------------------------------
             vf C0 sqrt(rho_d / rho_c) + 1 - vf C0

        A density ratio outside [0, 1] is rejected rather than evaluated.
    """
    def __init__(self, a1: float, a2: float):
        if a1 < 0:
            raise ConfigurationError("a1 must be non-negative", model=type(self).__name__, state={'a1': a1})
        check_ordered(type(self).__name__, 'a1', a1, 'a2', a2)
        self.a1 = float(a1)
        self.a2 = float(a2)

    def slip_coefficient(self, state: DriftVelocityState) -> float:
        name = type(self).__name__
        _require(name, state, 'volume_fraction', 'profile_parameter', 'critical_kutateladze')
        if state.profile_parameter <= 0:
            raise domain_error("Profile parameter must be positive", model=name, **state.as_dict())
        k_low = SHI_K_LOW / state.profile_parameter
        k_upp = state.critical_kutateladze
        vf = state.volume_fraction
        if vf <= self.a1:
            return k_low
        elif vf >= self.a2:
            return k_upp
        return k_upp - ((self.a2 - vf) / (self.a2 - self.a1)) * (k_upp - k_low)

    def compute_drift_velocity(self, state: DriftVelocityState) -> float:
        name = type(self).__name__
        _require(name, state, 'volume_fraction', 'characteristic_velocity', 'profile_parameter',
                 'dispersed_density', 'continuous_density', 'critical_kutateladze')
        if state.continuous_density <= 0:
            raise domain_error("Continuous phase density must be positive", model=name, **state.as_dict())
        density_ratio = state.dispersed_density / state.continuous_density
        if not 0.0 <= density_ratio <= 1.0:
            raise domain_error("Density ratio must lie in [0, 1]", model=name,
                               density_ratio=density_ratio, **state.as_dict())

        k = self.slip_coefficient(state)
        c0 = state.profile_parameter
        vf_c0 = state.volume_fraction * c0
        denom = vf_c0 * math.sqrt(density_ratio) + 1.0 - vf_c0
        if denom == 0:
            raise numerical_error("Drift velocity denominator is zero", model=name, slip_coefficient=k,
                                  **state.as_dict())
        vd = (1.0 - vf_c0) * c0 * k * state.characteristic_velocity / denom
        if not math.isfinite(vd):
            raise numerical_error("Drift velocity is not finite", model=name, result=vd, slip_coefficient=k,
                                  denominator=denom, **state.as_dict())
        return vd


class ShiOilWaterDriftVelocityModel(DriftVelocityModel):
    """ Oil-water drift velocity of Shi et al. (2005), Vd = 1.53 Vc (1 - vf) ** 2 """
    def compute_drift_velocity(self, state: DriftVelocityState) -> float:
        name = type(self).__name__
        _require(name, state, 'volume_fraction', 'characteristic_velocity')
        vd = SHI_K_LOW * state.characteristic_velocity * (1.0 - state.volume_fraction) ** 2
        return check_finite(vd, model=name, **state.as_dict())


# ============================================================================
#  Profile Parameter Models
# ============================================================================

class ProfileParameterModel(ABC):
    @abstractmethod
    def compute_profile_parameter(self, state: ProfileParameterState) -> float:
        ...


class ConstantProfileParameterModel(ProfileParameterModel):
    def __init__(self, profile_parameter: float):
        self._constant = ConstantModel(profile_parameter)

    @property
    def profile_parameter(self) -> float:
        return self._constant.get_constant_value()

    def compute_profile_parameter(self, state: ProfileParameterState = None) -> float:
        return self.profile_parameter


class ShiOilWaterProfileParameterModel(ProfileParameterModel):
    """ Oil-water profile parameter of Shi et al. (2005)

        A: C0 at low volume fraction (vf <= B1)
        B1, B2: Volume fraction breakpoints. C0 falls linearly from A at B1 to 1 at B2
    """
    def __init__(self, A: float, B1: float, B2: float):
        check_ordered(type(self).__name__, 'B1', B1, 'B2', B2)
        self.A = float(A)
        self.B1 = float(B1)
        self.B2 = float(B2)

    def compute_profile_parameter(self, state: ProfileParameterState) -> float:
        _require(type(self).__name__, state, 'volume_fraction')
        vf = state.volume_fraction
        if vf <= self.B1:
            return self.A
        elif vf >= self.B2:
            return 1.0
        return self.A - (self.A - 1.0) * (vf - self.B1) / (self.B2 - self.B1)


class ShiGasLiquidProfileParameterModel(ProfileParameterModel):
    """ Gas-liquid profile parameter of Shi et al. (2005)

        A: C0 at low void fraction and velocity (>= 1)
        B: Value of beta at which C0 starts to fall (< 1)
        Fv: Multiplier on the mixture / flooding velocity ratio

        beta  = max(vf, Fv vf |Vm| / Vflood)
        gamma = (beta - B) / (1 - B), clamped to [0, 1]
        C0    = A / (1 + (A - 1) gamma ** 2)
    """
    def __init__(self, A: float, B: float, Fv: float):
        name = type(self).__name__
        if A < 1:
            raise ConfigurationError("A must be at least 1", model=name, state={'A': A})
        if not B < 1:
            raise ConfigurationError("B must be less than 1", model=name, state={'B': B})
        if Fv < 0:
            raise ConfigurationError("Fv must be non-negative", model=name, state={'Fv': Fv})
        self.A = float(A)
        self.B = float(B)
        self.Fv = float(Fv)

    def gamma(self, state: ProfileParameterState) -> float:
        name = type(self).__name__
        _require(name, state, 'volume_fraction', 'mixture_velocity', 'flooding_velocity')
        if state.flooding_velocity <= 0:
            raise domain_error("Flooding velocity must be positive", model=name, **state.as_dict())
        vf = state.volume_fraction
        beta = max(vf, self.Fv * vf * abs(state.mixture_velocity) / state.flooding_velocity)
        return _clamp((beta - self.B) / (1.0 - self.B), 0.0, 1.0)

    def compute_profile_parameter(self, state: ProfileParameterState) -> float:
        gamma = self.gamma(state)
        c0 = self.A / (1.0 + (self.A - 1.0) * gamma ** 2)
        return check_finite(c0, model=type(self).__name__, **state.as_dict())
