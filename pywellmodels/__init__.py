"""
pywellmodels
===================================

-----------------------------------------------------------
Fluid property and drift-flux closure models for well flow
-----------------------------------------------------------

Closed-form correlations evaluated pointwise by a wellbore / reservoir flow solver.
Each model is configured once with its coefficients and then evaluated at the local
state of every node on every nonlinear iteration.

Includes;

- Phase density (constant, linear compressible, from formation volume factor, live oil)
- Power law viscosity
- Clamped power law relative permeability
- Power law gas solubility capped by mass balance
- Liquid and gas formation volume factors
- Constant and Beggs gas-oil / gas-water interfacial tension
- Drift velocity and profile parameter closures (constant, power law, Shi et al.)
- Factories building models from method names, and Pandas property tables

Invalid inputs raise pywellmodels.errors.DomainError, non-finite results raise
NumericalError, and malformed coefficients raise ConfigurationError.
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

submodules = [
    'classes',
    'constants',
    'density',
    'driftflux',
    'errors',
    'fvf',
    'ift',
    'library',
    'relperm',
    'shared_fns',
    'solubility',
    'tables',
    'validate',
    'viscosity',
]

__all__ = submodules

import importlib

def __dir__():
    return __all__


def __getattr__(name):
    if name in submodules:
        return importlib.import_module(f'pywellmodels.{name}')
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(
                f"Module 'pywellmodels' has no attribute '{name}'"
            )
