from .viscosity import ViscosityModel, PowerViscosityModel
