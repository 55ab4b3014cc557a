from .validate import validate_methods, check_ordered, check_nonzero, check_positive
