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


class ViscosityModel(ABC):
    @abstractmethod
    def compute_viscosity(self, p: npt.ArrayLike):
        ...


class PowerViscosityModel(ViscosityModel):
    """ Power law viscosity, mu = alpha * p ** exponent
        alpha: Multiplier (Pa.s / Pa^exponent)
        exponent: Pressure exponent
    """
    def __init__(self, alpha: float, exponent: float):
        self._power = PowerModel(alpha, exponent)

    @property
    def alpha(self) -> float:
        return self._power.get_alpha()

    @property
    def exponent(self) -> float:
        return self._power.get_power()

    def compute_viscosity(self, p: npt.ArrayLike):
        p = convert_to_numpy(p)
        if np.any(p < 0):
            raise domain_error("Pressure must be non-negative", model=type(self).__name__, pressure=process_input(p))
        return self._power.evaluate(p, model=type(self).__name__)
