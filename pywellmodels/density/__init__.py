from .density import DensityModel, ConstantDensityModel, WellCompressibleDensityModel, CompressibleDensityModel, OilDensityModel
