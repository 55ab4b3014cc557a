from .solubility import SolubilityModel, PowerSolubilityModel
