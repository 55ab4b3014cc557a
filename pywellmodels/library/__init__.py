from .library import (density_model, viscosity_model, relperm_model, solubility_model, fvf_model, ift_model,
                      drift_velocity_model, profile_parameter_model, make_models)
