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

from abc import ABC, abstractmethod

import numpy as np
import numpy.typing as npt

from pywellmodels.errors import domain_error
from pywellmodels.shared_fns import convert_to_numpy, process_input, check_finite, ConstantModel
from pywellmodels.validate import check_nonzero


class DensityModel(ABC):
    """ Phase density evaluator. Input is pressure (Pa), or formation volume factor for the
        models built on one (CompressibleDensityModel, OilDensityModel)
    """
    fvf_input = False  # True when compute_density takes formation volume factor instead of pressure

    @abstractmethod
    def compute_density(self, x: npt.ArrayLike):
        ...


class ConstantDensityModel(DensityModel):
    """ Constant density, independent of pressure
        density: Phase density (kg/m3)
    """
    def __init__(self, density: float):
        self._constant = ConstantModel(density)

    @property
    def density(self) -> float:
        return self._constant.get_constant_value()

    def compute_density(self, x: npt.ArrayLike = None):
        if x is None:
            return self.density
        return process_input(np.full(np.shape(x), self.density))


class WellCompressibleDensityModel(DensityModel):
    """ Linear compressible liquid, rho = rho_ref + (p - p_ref) / a^2

        standard_density: Reference density rho_ref (kg/m3)
        standard_pressure: Reference pressure p_ref (Pa)
        standard_sound_speed: Fluid sound speed a (m/s)

        For a gas use rho_ref = 0, p_ref = 0 and a^2 = R*T_ref
    """
    def __init__(self, standard_density: float, standard_pressure: float, standard_sound_speed: float):
        check_nonzero(type(self).__name__, 'standard_sound_speed', standard_sound_speed)
        self.standard_density = float(standard_density)
        self.standard_pressure = float(standard_pressure)
        self.standard_sound_speed = float(standard_sound_speed)

    def compute_density(self, p: npt.ArrayLike):
        p = convert_to_numpy(p)
        rho = self.standard_density + (p - self.standard_pressure) / self.standard_sound_speed ** 2
        return process_input(rho)


def _check_fvf(model, bo):
    if np.any(bo <= 0):
        raise domain_error("Formation volume factor must be positive", model=model,
                           formation_volume_factor=process_input(bo))


class CompressibleDensityModel(DensityModel):
    """ Density from formation volume factor, rho = rho_std / B
        standard_density: Density at standard conditions (kg/m3)
    """
    fvf_input = True

    def __init__(self, standard_density: float):
        self.standard_density = float(standard_density)

    def compute_density(self, bo: npt.ArrayLike):
        bo = convert_to_numpy(bo)
        _check_fvf(type(self).__name__, bo)
        return process_input(self.standard_density / bo)


class OilDensityModel(DensityModel):
    """ Live oil density including dissolved gas
        rho = (1 + rho_g_std / rho_o_std * Rs) * rho_o_std / Bo

        oil_standard_density: Stock tank oil density (kg/m3)
        gas_standard_density: Surface gas density (kg/m3)

        Solubility Rs (sm3/sm3) is set with set_solubility() before evaluation, or passed
        directly to compute_density() which then leaves the stored value alone
    """
    fvf_input = True

    def __init__(self, oil_standard_density: float, gas_standard_density: float):
        check_nonzero(type(self).__name__, 'oil_standard_density', oil_standard_density)
        self.oil_standard_density = float(oil_standard_density)
        self.gas_standard_density = float(gas_standard_density)
        self._gas_over_oil = self.gas_standard_density / self.oil_standard_density
        self._solubility = 0.0

    @property
    def solubility(self) -> float:
        return self._solubility

    def set_solubility(self, solubility: float):
        self._solubility = float(solubility)

    def compute_density(self, bo: npt.ArrayLike, solubility: npt.ArrayLike = None):
        bo = convert_to_numpy(bo)
        _check_fvf(type(self).__name__, bo)
        rs = self._solubility if solubility is None else convert_to_numpy(solubility)
        rho = (1 + self._gas_over_oil * rs) * (self.oil_standard_density / bo)
        return process_input(check_finite(rho, model=type(self).__name__))
