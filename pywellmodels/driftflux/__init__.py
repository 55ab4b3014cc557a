"""
Drift-flux closure models: drift velocity Vd and profile parameter C0.

Every model is a pure function of an immutable state value, so a single configured
instance can be shared by threads evaluating different nodes.
"""

from .driftflux import (DriftVelocityState, ProfileParameterState,
                        DriftVelocityModel, ConstantDriftVelocityModel, GasVolumeFractionDriftVelocityModel,
                        ShiGasLiquidDriftVelocityModel, ShiOilWaterDriftVelocityModel,
                        ProfileParameterModel, ConstantProfileParameterModel,
                        ShiOilWaterProfileParameterModel, ShiGasLiquidProfileParameterModel)
