from .relperm import RelativePermeabilityModel, PowerRelativePermeabilityModel
