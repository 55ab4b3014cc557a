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

from scipy import constants as sc

# Unit conversions
PA_PER_PSI = sc.psi  # Pa per psi
PSI_PER_PA = 1.0 / sc.psi  # psi per Pa
NM_PER_DYNECM = sc.dyne / sc.centi  # dyne/cm -> N/m
degF2R = 459.67  # Offset to convert degrees F to degrees Rankine


def degk_to_degf(degk: float) -> float:
    """ Returns temperature in deg F given temperature in Kelvin """
    return float(sc.convert_temperature(degk, 'Kelvin', 'Fahrenheit'))


def oil_api(sg_value: float) -> float:
    """ Returns oil API given specific gravity value of oil
        sg_value: Specific gravity (relative to water)
    """
    return 141.5 / sg_value - 131.5


# Shi et al. (2005) drift-flux coefficients
SHI_K_LOW = 1.53  # Slip coefficient numerator at low void fraction
SHI_GL_A = 1.2  # Gas-liquid profile parameter at low void fraction
SHI_GL_B = 0.3  # Void fraction at which C0 starts to fall
SHI_GL_FV = 1.0  # Multiplier on mixture / flooding velocity ratio
SHI_GL_A1 = 0.2  # Drift velocity low breakpoint
SHI_GL_A2 = 0.4  # Drift velocity high breakpoint
SHI_OW_A = 1.0  # Oil-water profile parameter at low holdup
SHI_OW_B1 = 0.4
SHI_OW_B2 = 0.7

# Beggs (1984) interfacial tension reference temperatures (deg F)
GO_T_LO, GO_T_HI = 68.0, 100.0
GW_T_LO, GW_T_HI = 74.0, 280.0
