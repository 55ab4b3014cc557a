from .fvf import FormationVolumeFactorModel, LiquidFormationVolumeFactorModel, GasFormationVolumeFactorModel
