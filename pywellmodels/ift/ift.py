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

from pywellmodels.constants import PSI_PER_PA, NM_PER_DYNECM, degk_to_degf, oil_api, GO_T_LO, GO_T_HI, GW_T_LO, GW_T_HI
from pywellmodels.errors import domain_error
from pywellmodels.shared_fns import convert_to_numpy, process_input, ConstantModel
from pywellmodels.validate import check_positive


class InterfacialTensionModel(ABC):
    @abstractmethod
    def compute_interfacial_tension(self, p: npt.ArrayLike):
        ...


class ConstantInterfacialTensionModel(InterfacialTensionModel):
    def __init__(self, value: float):
        self._constant = ConstantModel(value)

    @property
    def value(self) -> float:
        return self._constant.get_constant_value()

    def compute_interfacial_tension(self, p: npt.ArrayLike = None):
        if p is None:
            return self.value
        return process_input(np.full(np.shape(p), self.value))


def _psia(model, p):
    p = convert_to_numpy(p)
    if np.any(p < 0):
        raise domain_error("Pressure must be non-negative", model=model, pressure=process_input(p))
    return p * PSI_PER_PA


class BeggsGasOilInterfacialTensionModel(InterfacialTensionModel):
    """ Gas-oil interfacial tension from Beggs (1984), dead oil values at 68 and 100 deg F
        interpolated in temperature and corrected for pressure

        temperature: Temperature (K). Values outside 68 - 100 deg F are clamped to the nearest end
        relative_density_std: Stock tank oil specific gravity (relative to water)

        Returns N/m for pressure in Pa

        The pressure factor 1 - 0.024 p_psi ** 0.45 reaches zero near 3980 psia (27.4 MPa). Above that
        it is held at zero, so the tension is 0 rather than negative
    """
    def __init__(self, temperature: float, relative_density_std: float):
        check_positive(type(self).__name__, 'relative_density_std', relative_density_std)
        self.temperature = float(temperature)
        self.relative_density_std = float(relative_density_std)
        self._degf = degk_to_degf(self.temperature)
        self.api = oil_api(self.relative_density_std)

    @property
    def effective_temperature(self) -> float:
        """ Temperature (deg F) actually used by the correlation """
        return min(max(self._degf, GO_T_LO), GO_T_HI)

    def compute_interfacial_tension(self, p: npt.ArrayLike):
        psia = _psia(type(self).__name__, p)
        sigma_68 = 39.0 - 0.2571 * self.api
        sigma_100 = 37.5 - 0.2571 * self.api
        c = np.maximum(1.0 - 0.024 * psia ** 0.45, 0.0)
        degf = self.effective_temperature
        sigma = c * (sigma_68 - (degf - GO_T_LO) * (sigma_68 - sigma_100) / (GO_T_HI - GO_T_LO))
        # No lower limit applied here; the well solver imposes its own minimum
        return process_input(sigma * NM_PER_DYNECM)


class BeggsGasWaterInterfacialTensionModel(InterfacialTensionModel):
    """ Gas-water interfacial tension from Beggs (1984), interpolated between 74 and 280 deg F

        temperature: Temperature (K). Values outside 74 - 280 deg F are clamped to the nearest end

        Returns N/m for pressure in Pa
    """
    def __init__(self, temperature: float):
        self.temperature = float(temperature)
        self._degf = degk_to_degf(self.temperature)

    @property
    def effective_temperature(self) -> float:
        return min(max(self._degf, GW_T_LO), GW_T_HI)

    def compute_interfacial_tension(self, p: npt.ArrayLike):
        psia = _psia(type(self).__name__, p)
        sigma_74 = 75.0 - 1.108 * psia ** 0.349
        sigma_280 = 53.0 - 0.1048 * psia ** 0.637
        degf = self.effective_temperature
        sigma = sigma_74 - (degf - GW_T_LO) * (sigma_74 - sigma_280) / (GW_T_HI - GW_T_LO)
        return process_input(sigma * NM_PER_DYNECM)
