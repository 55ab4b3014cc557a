from .ift import InterfacialTensionModel, ConstantInterfacialTensionModel, BeggsGasOilInterfacialTensionModel, BeggsGasWaterInterfacialTensionModel
