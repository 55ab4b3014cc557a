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

from pywellmodels.shared_fns import convert_to_numpy, process_input
from pywellmodels.validate import check_ordered
from pywellmodels.errors import ConfigurationError


class RelativePermeabilityModel(ABC):
    @abstractmethod
    def compute_relative_permeability(self, s: npt.ArrayLike):
        ...


class PowerRelativePermeabilityModel(RelativePermeabilityModel):
    """ Corey type power law relative permeability, clamped outside its saturation range

        minimum_saturation: Saturation below which the phase is immobile (irreducible water, residual oil)
        maximum_saturation: Saturation above which kr stays at its end point
        maximum_relative_permeability: End point kr at maximum_saturation
        exponent: Corey exponent. Defaults to 1

        s < min         : kr = 0
        s > max         : kr = maximum_relative_permeability
        min <= s <= max : kr = ((s - min) / (max - min)) ** exponent * maximum_relative_permeability
    """
    def __init__(self, minimum_saturation: float, maximum_saturation: float,
                 maximum_relative_permeability: float, exponent: float = 1.0):
        if maximum_relative_permeability < 0:
            raise ConfigurationError("maximum_relative_permeability must be non-negative", model=type(self).__name__,
                                     state={'maximum_relative_permeability': maximum_relative_permeability})
        if not exponent > 0:
            raise ConfigurationError("exponent must be positive", model=type(self).__name__,
                                     state={'exponent': exponent})
        self.maximum_relative_permeability = float(maximum_relative_permeability)
        self.exponent = float(exponent)
        self.set_saturation_limits(minimum_saturation, maximum_saturation)

    @property
    def minimum_saturation(self) -> float:
        return self._smin

    @property
    def maximum_saturation(self) -> float:
        return self._smax

    @property
    def alpha(self) -> float:
        return self._alpha

    def set_saturation_limits(self, minimum_saturation: float, maximum_saturation: float):
        """ Resets the mobile saturation range and the cached 1 / (max - min) """
        check_ordered(type(self).__name__, 'minimum_saturation', minimum_saturation,
                      'maximum_saturation', maximum_saturation)
        self._smin = float(minimum_saturation)
        self._smax = float(maximum_saturation)
        self._alpha = 1.0 / (self._smax - self._smin)

    def compute_relative_permeability(self, s: npt.ArrayLike):
        s = convert_to_numpy(s)
        t = np.clip((s - self._smin) * self._alpha, 0.0, 1.0)
        kr = np.power(t, self.exponent) * self.maximum_relative_permeability
        kr = np.where(s < self._smin, 0.0, kr)
        kr = np.where(s > self._smax, self.maximum_relative_permeability, kr)
        return process_input(kr)
