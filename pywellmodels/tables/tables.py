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

import logging

import numpy as np
import pandas as pd
from tabulate import tabulate

from pywellmodels.errors import ConfigurationError
from pywellmodels.shared_fns import convert_to_numpy
from pywellmodels.driftflux import DriftVelocityState, ProfileParameterState

logger = logging.getLogger(__name__)


def _check_rows(xmin, xmax, nrows):
    if nrows < 2:
        raise ConfigurationError("nrows must be at least 2", state={'nrows': nrows})
    if not xmin < xmax:
        raise ConfigurationError("Table minimum must be less than maximum", state={'min': xmin, 'max': xmax})


def _export(df, filename):
    with open(filename, 'w') as f:
        f.write(tabulate(df, headers='keys', tablefmt='simple', showindex=False, floatfmt='.6g'))
        f.write('\n')
    logger.info("Wrote %d rows to %s", len(df), filename)


def pvt_table(
    pmin: float,
    pmax: float,
    nrows: int = 20,
    density=None,
    viscosity=None,
    fvf=None,
    ift=None,
    export: bool = False,
    filename: str = 'PVT.txt',
) -> pd.DataFrame:
    """ Returns a Pandas table of phase properties evaluated at evenly spaced pressures
        pmin: Minimum pressure (Pa)
        pmax: Maximum pressure (Pa)
        nrows: Number of table rows. Default = 20
        density: Density model. Models built on formation volume factor (fvf_input) receive B from the
                 fvf model, which must then be supplied. All others receive pressure
        viscosity: Viscosity model
        fvf: Formation volume factor model
        ift: Interfacial tension model
        export: Boolean flag that controls whether the table is written to filename. Default is False
        filename: Output file for export. Default 'PVT.txt'
    """
    _check_rows(pmin, pmax, nrows)
    p = np.linspace(pmin, pmax, nrows)
    df = pd.DataFrame({'Pressure': p})
    if fvf is not None:
        df['FVF'] = convert_to_numpy(fvf.compute_formation_volume_factor(p))
    if density is not None:
        if getattr(density, 'fvf_input', False):
            if fvf is None:
                raise ConfigurationError(f"{type(density).__name__} needs an fvf model to build a table")
            x = df['FVF'].values
        else:
            x = p
        df['Density'] = convert_to_numpy(density.compute_density(x))
    if viscosity is not None:
        df['Viscosity'] = convert_to_numpy(viscosity.compute_viscosity(p))
    if ift is not None:
        df['IFT'] = convert_to_numpy(ift.compute_interfacial_tension(p))
    if export:
        _export(df, filename)
    return df


def relperm_table(model, nrows: int = 20, export: bool = False, filename: str = 'KR.txt') -> pd.DataFrame:
    """ Returns a Pandas table of relative permeability from 0 to 1 saturation
        model: Relative permeability model
        nrows: Number of table rows. Default = 20
    """
    _check_rows(0.0, 1.0, nrows)
    s = np.linspace(0.0, 1.0, nrows)
    df = pd.DataFrame({'S': s, 'Kr': convert_to_numpy(model.compute_relative_permeability(s))})
    if export:
        _export(df, filename)
    return df


def drift_flux_table(
    drift_model,
    profile_model,
    characteristic_velocity: float,
    mixture_velocity: float = 0.0,
    flooding_velocity: float = None,
    dispersed_density: float = None,
    continuous_density: float = None,
    critical_kutateladze: float = None,
    vfmin: float = 0.0,
    vfmax: float = 1.0,
    nrows: int = 20,
    export: bool = False,
    filename: str = 'DRIFT.txt',
) -> pd.DataFrame:
    """ Returns a Pandas table of profile parameter C0 and drift velocity Vd against volume fraction
        C0 is evaluated first at each row and passed to the drift velocity model

        drift_model: Drift velocity model
        profile_model: Profile parameter model
        characteristic_velocity: Characteristic velocity (m/s)
        mixture_velocity: Mixture velocity (m/s). Default = 0
        flooding_velocity: Flooding velocity (m/s). Required by the Shi gas-liquid profile parameter
        dispersed_density, continuous_density: Phase densities (kg/m3). Required by the Shi gas-liquid drift velocity
        critical_kutateladze: Critical Kutateladze number. Required by the Shi gas-liquid drift velocity
        vfmin, vfmax: Volume fraction range. Default 0 - 1
        nrows: Number of table rows. Default = 20
    """
    _check_rows(vfmin, vfmax, nrows)
    vfs = np.linspace(vfmin, vfmax, nrows)
    c0s, vds = [], []
    for vf in vfs:
        c0 = profile_model.compute_profile_parameter(ProfileParameterState(
            volume_fraction=float(vf), mixture_velocity=mixture_velocity, flooding_velocity=flooding_velocity))
        vd = drift_model.compute_drift_velocity(DriftVelocityState(
            volume_fraction=float(vf), characteristic_velocity=characteristic_velocity, profile_parameter=c0,
            dispersed_density=dispersed_density, continuous_density=continuous_density,
            critical_kutateladze=critical_kutateladze))
        c0s.append(c0)
        vds.append(vd)
    df = pd.DataFrame({'VolFrac': vfs, 'C0': c0s, 'Vd': vds})
    if export:
        _export(df, filename)
    return df
