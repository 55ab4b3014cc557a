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
from pywellmodels.shared_fns import convert_to_numpy, process_input, PowerModel
from pywellmodels.validate import check_positive


class SolubilityModel(ABC):
    @abstractmethod
    def compute_solubility(self, p: npt.ArrayLike, oil_mass_fraction: npt.ArrayLike, gas_mass_fraction: npt.ArrayLike):
        ...


class PowerSolubilityModel(SolubilityModel):
    """ Power law gas solubility in oil, capped by the gas actually available

        power: Pressure exponent
        alpha: Multiplier
        oil_standard_density: Stock tank oil density (kg/m3)
        gas_standard_density: Surface gas density (kg/m3)

        Rs = min(alpha * p ** power, rho_o_std / rho_g_std * gas_mass_fraction / oil_mass_fraction)
    """
    def __init__(self, power: float, alpha: float, oil_standard_density: float, gas_standard_density: float):
        check_positive(type(self).__name__, 'gas_standard_density', gas_standard_density)
        self._power = PowerModel(alpha, power)
        self.oil_standard_density = float(oil_standard_density)
        self.gas_standard_density = float(gas_standard_density)
        self._oil_over_gas = self.oil_standard_density / self.gas_standard_density

    @property
    def alpha(self) -> float:
        return self._power.get_alpha()

    @property
    def power(self) -> float:
        return self._power.get_power()

    def max_solubility(self, oil_mass_fraction: npt.ArrayLike, gas_mass_fraction: npt.ArrayLike):
        """ Returns the mass balance ceiling on solubility for the given phase mass fractions """
        xo, xg = convert_to_numpy(oil_mass_fraction), convert_to_numpy(gas_mass_fraction)
        if np.any(xo == 0):
            raise domain_error("Oil mass fraction must be non-zero", model=type(self).__name__,
                               oil_mass_fraction=process_input(xo), gas_mass_fraction=process_input(xg))
        return process_input(self._oil_over_gas * xg / xo)

    def compute_solubility(self, p: npt.ArrayLike, oil_mass_fraction: npt.ArrayLike, gas_mass_fraction: npt.ArrayLike):
        max_rs = convert_to_numpy(self.max_solubility(oil_mass_fraction, gas_mass_fraction))
        model_rs = convert_to_numpy(self._power.evaluate(p, model=type(self).__name__))
        return process_input(np.minimum(model_rs, max_rs))
