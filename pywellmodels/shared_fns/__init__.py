from .shared_fns import convert_to_numpy, process_input, check_finite, ConstantModel, PowerModel
