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

from enum import Enum

class density_method(Enum):  # Phase density model
    CONST = 0
    WELLCOMP = 1
    COMP = 2
    OIL = 3

class viscosity_method(Enum):  # Phase viscosity model
    POW = 0

class kr_method(Enum):  # Relative permeability model
    POW = 0

class rs_method(Enum):  # Gas solubility model
    POW = 0

class fvf_method(Enum):  # Formation volume factor model
    LIQ = 0
    GAS = 1

class ift_method(Enum):  # Interfacial tension model
    CONST = 0
    BEGGS_GO = 1
    BEGGS_GW = 2

class vd_method(Enum):  # Drift velocity model
    CONST = 0
    GVF = 1
    SHI_GL = 2
    SHI_OW = 3

class c0_method(Enum):  # Profile parameter model
    CONST = 0
    SHI_OW = 1
    SHI_GL = 2

class_dic = {
    "densitymethod": density_method,
    "viscositymethod": viscosity_method,
    "krmethod": kr_method,
    "rsmethod": rs_method,
    "fvfmethod": fvf_method,
    "iftmethod": ift_method,
    "vdmethod": vd_method,
    "c0method": c0_method,
}
