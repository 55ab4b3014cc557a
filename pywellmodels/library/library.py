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

from pywellmodels.classes import density_method, viscosity_method, kr_method, rs_method, fvf_method, ift_method, vd_method, c0_method
from pywellmodels.validate import validate_methods
from pywellmodels.errors import ConfigurationError
from pywellmodels.density import ConstantDensityModel, WellCompressibleDensityModel, CompressibleDensityModel, OilDensityModel
from pywellmodels.viscosity import PowerViscosityModel
from pywellmodels.relperm import PowerRelativePermeabilityModel
from pywellmodels.solubility import PowerSolubilityModel
from pywellmodels.fvf import LiquidFormationVolumeFactorModel, GasFormationVolumeFactorModel
from pywellmodels.ift import ConstantInterfacialTensionModel, BeggsGasOilInterfacialTensionModel, BeggsGasWaterInterfacialTensionModel
from pywellmodels.driftflux import (ConstantDriftVelocityModel, GasVolumeFractionDriftVelocityModel,
                                    ShiGasLiquidDriftVelocityModel, ShiOilWaterDriftVelocityModel,
                                    ConstantProfileParameterModel, ShiOilWaterProfileParameterModel,
                                    ShiGasLiquidProfileParameterModel)
from pywellmodels import constants

logger = logging.getLogger(__name__)

_density_models = {
    density_method.CONST: ConstantDensityModel,
    density_method.WELLCOMP: WellCompressibleDensityModel,
    density_method.COMP: CompressibleDensityModel,
    density_method.OIL: OilDensityModel,
}
_viscosity_models = {viscosity_method.POW: PowerViscosityModel}
_kr_models = {kr_method.POW: PowerRelativePermeabilityModel}
_rs_models = {rs_method.POW: PowerSolubilityModel}
_fvf_models = {
    fvf_method.LIQ: LiquidFormationVolumeFactorModel,
    fvf_method.GAS: GasFormationVolumeFactorModel,
}
_ift_models = {
    ift_method.CONST: ConstantInterfacialTensionModel,
    ift_method.BEGGS_GO: BeggsGasOilInterfacialTensionModel,
    ift_method.BEGGS_GW: BeggsGasWaterInterfacialTensionModel,
}
_vd_models = {
    vd_method.CONST: ConstantDriftVelocityModel,
    vd_method.GVF: GasVolumeFractionDriftVelocityModel,
    vd_method.SHI_GL: ShiGasLiquidDriftVelocityModel,
    vd_method.SHI_OW: ShiOilWaterDriftVelocityModel,
}
_c0_models = {
    c0_method.CONST: ConstantProfileParameterModel,
    c0_method.SHI_OW: ShiOilWaterProfileParameterModel,
    c0_method.SHI_GL: ShiGasLiquidProfileParameterModel,
}

# Published Shi et al. (2005) coefficients, used when the caller leaves them out
_vd_defaults = {
    vd_method.SHI_GL: {'a1': constants.SHI_GL_A1, 'a2': constants.SHI_GL_A2},
}
_c0_defaults = {
    c0_method.SHI_GL: {'A': constants.SHI_GL_A, 'B': constants.SHI_GL_B, 'Fv': constants.SHI_GL_FV},
    c0_method.SHI_OW: {'A': constants.SHI_OW_A, 'B1': constants.SHI_OW_B1, 'B2': constants.SHI_OW_B2},
}


def _build(kind, table, method, coeffs, defaults=None):
    kwargs = dict((defaults or {}).get(method, {}))
    kwargs.update(coeffs)
    cls = table[method]
    try:
        model = cls(**kwargs)
    except TypeError as e:
        raise ConfigurationError(f"Bad coefficients for {kind} '{method.name}': {e}", model=cls.__name__,
                                 state=kwargs) from None
    logger.debug("Built %s model %r with %s", kind, cls.__name__, kwargs)
    return model


def density_model(densitymethod: density_method = density_method.CONST, **coeffs):
    """ Returns a density model
        densitymethod: 'CONST' density
                       'WELLCOMP' rho_ref + (p - p_ref) / a^2 (standard_density, standard_pressure, standard_sound_speed)
                       'COMP' rho_std / B (standard_density)
                       'OIL' live oil rho from Bo and Rs (oil_standard_density, gas_standard_density)
    """
    densitymethod = validate_methods(["densitymethod"], [densitymethod])
    return _build('density', _density_models, densitymethod, coeffs)


def viscosity_model(viscositymethod: viscosity_method = viscosity_method.POW, **coeffs):
    """ Returns a viscosity model
        viscositymethod: 'POW' alpha * p ** exponent (alpha, exponent)
    """
    viscositymethod = validate_methods(["viscositymethod"], [viscositymethod])
    return _build('viscosity', _viscosity_models, viscositymethod, coeffs)


def relperm_model(krmethod: kr_method = kr_method.POW, **coeffs):
    """ Returns a relative permeability model
        krmethod: 'POW' clamped power law (minimum_saturation, maximum_saturation, maximum_relative_permeability, exponent)
    """
    krmethod = validate_methods(["krmethod"], [krmethod])
    return _build('relative permeability', _kr_models, krmethod, coeffs)


def solubility_model(rsmethod: rs_method = rs_method.POW, **coeffs):
    """ Returns a solubility model
        rsmethod: 'POW' power law capped by mass balance (power, alpha, oil_standard_density, gas_standard_density)
    """
    rsmethod = validate_methods(["rsmethod"], [rsmethod])
    return _build('solubility', _rs_models, rsmethod, coeffs)


def fvf_model(fvfmethod: fvf_method = fvf_method.LIQ, **coeffs):
    """ Returns a formation volume factor model
        fvfmethod: 'LIQ' liquid (compressibility, ref_pressure, ref_formation_volume_factor)
                   'GAS' gas with c = 1/p (ref_pressure, ref_formation_volume_factor)
    """
    fvfmethod = validate_methods(["fvfmethod"], [fvfmethod])
    return _build('formation volume factor', _fvf_models, fvfmethod, coeffs)


def ift_model(iftmethod: ift_method = ift_method.CONST, **coeffs):
    """ Returns an interfacial tension model
        iftmethod: 'CONST' (value)
                   'BEGGS_GO' Beggs gas-oil (temperature, relative_density_std)
                   'BEGGS_GW' Beggs gas-water (temperature)
    """
    iftmethod = validate_methods(["iftmethod"], [iftmethod])
    return _build('interfacial tension', _ift_models, iftmethod, coeffs)


def drift_velocity_model(vdmethod: vd_method = vd_method.SHI_GL, **coeffs):
    """ Returns a drift velocity model
        vdmethod: 'CONST' (drift_velocity)
                  'GVF' alpha * (1 - vf) ** power (alpha, power)
                  'SHI_GL' Shi gas-liquid (a1, a2). Defaults to a1 = 0.2, a2 = 0.4
                  'SHI_OW' Shi oil-water
    """
    vdmethod = validate_methods(["vdmethod"], [vdmethod])
    return _build('drift velocity', _vd_models, vdmethod, coeffs, _vd_defaults)


def profile_parameter_model(c0method: c0_method = c0_method.SHI_GL, **coeffs):
    """ Returns a profile parameter model
        c0method: 'CONST' (profile_parameter)
                  'SHI_OW' Shi oil-water (A, B1, B2). Defaults to A = 1.0, B1 = 0.4, B2 = 0.7
                  'SHI_GL' Shi gas-liquid (A, B, Fv). Defaults to A = 1.2, B = 0.3, Fv = 1.0
    """
    c0method = validate_methods(["c0method"], [c0method])
    return _build('profile parameter', _c0_models, c0method, coeffs, _c0_defaults)


_factories = {
    'density': density_model,
    'viscosity': viscosity_model,
    'relperm': relperm_model,
    'solubility': solubility_model,
    'fvf': fvf_model,
    'ift': ift_model,
    'drift_velocity': drift_velocity_model,
    'profile_parameter': profile_parameter_model,
}


def make_models(config: dict) -> dict:
    """ Builds a dictionary of models from a nested configuration mapping

        config: {name: {'kind': one of density, viscosity, relperm, solubility, fvf, ift,
                                drift_velocity, profile_parameter (defaults to name),
                        'method': method name or Enum,
                        **coefficients}}

        e.g. make_models({'water_density': {'kind': 'density', 'method': 'WELLCOMP', 'standard_density': 1000,
                                            'standard_pressure': 1e5, 'standard_sound_speed': 1500}})
    """
    models = {}
    for name, entry in config.items():
        entry = dict(entry)
        kind = entry.pop('kind', name)
        if kind not in _factories:
            raise ConfigurationError(f"Unknown model kind '{kind}' for '{name}'. Choose from {', '.join(_factories)}")
        if 'method' not in entry:
            raise ConfigurationError(f"No method given for '{name}'")
        method = entry.pop('method')
        models[name] = _factories[kind](method, **entry)
    return models
