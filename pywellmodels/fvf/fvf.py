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
from pywellmodels.shared_fns import convert_to_numpy, process_input


class FormationVolumeFactorModel(ABC):
    @abstractmethod
    def compute_formation_volume_factor(self, p: npt.ArrayLike):
        ...


class LiquidFormationVolumeFactorModel(FormationVolumeFactorModel):
    """ Slightly compressible liquid

        compressibility: Isothermal compressibility c (1/Pa)
        ref_pressure: Reference pressure p_ref (Pa)
        ref_formation_volume_factor: B at p_ref

                   B_ref
        B(p) = ----------------
               1 + c(p - p_ref)
    """
    def __init__(self, compressibility: float, ref_pressure: float, ref_formation_volume_factor: float):
        self.compressibility = float(compressibility)
        self.ref_pressure = float(ref_pressure)
        self.ref_formation_volume_factor = float(ref_formation_volume_factor)

    def compute_formation_volume_factor(self, p: npt.ArrayLike):
        p = convert_to_numpy(p)
        denom = 1 + self.compressibility * (p - self.ref_pressure)
        if np.any(denom <= 0):
            raise domain_error("1 + c(p - p_ref) must be positive", model=type(self).__name__,
                               pressure=process_input(p), compressibility=self.compressibility)
        return process_input(self.ref_formation_volume_factor / denom)


class GasFormationVolumeFactorModel(FormationVolumeFactorModel):
    """ Gas with isothermal compressibility equal to 1/p

        ref_pressure: Reference pressure p_ref (Pa)
        ref_formation_volume_factor: B at p_ref

        Substituting c = 1/p into the liquid expression gives

                 B_ref * p
        B(p) = -------------
                2p - p_ref
    """
    def __init__(self, ref_pressure: float, ref_formation_volume_factor: float):
        self.ref_pressure = float(ref_pressure)
        self.ref_formation_volume_factor = float(ref_formation_volume_factor)

    def compute_formation_volume_factor(self, p: npt.ArrayLike):
        p = convert_to_numpy(p)
        denom = 2 * p - self.ref_pressure
        if np.any(denom == 0):
            raise domain_error("Pressure equals half the reference pressure", model=type(self).__name__,
                               pressure=process_input(p), ref_pressure=self.ref_pressure)
        return process_input(self.ref_formation_volume_factor * p / denom)
