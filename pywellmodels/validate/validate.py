from pywellmodels.classes import class_dic
from pywellmodels.errors import ConfigurationError

def validate_methods(names, variables):
    variables = list(variables)
    for m, method in enumerate(names):
        if type(variables[m]) == str:
            try:
                variables[m] = class_dic[method][variables[m].upper()]
            except KeyError:
                choices = ', '.join(e.name for e in class_dic[method])
                raise ConfigurationError(f"Unknown {method} '{variables[m]}'. Choose from {choices}") from None
        elif not isinstance(variables[m], class_dic[method]):
            raise ConfigurationError(f"{method} must be a string or {class_dic[method].__name__}, not {variables[m]!r}")
    if len(variables) == 1:
        return variables[0]
    else:
        return variables


def check_ordered(model, lo_name, lo, hi_name, hi):
    """ Raises ConfigurationError unless lo < hi """
    if not lo < hi:
        raise ConfigurationError(f"{lo_name} must be less than {hi_name}", model=model,
                                 state={lo_name: lo, hi_name: hi})


def check_nonzero(model, name, value):
    if value == 0:
        raise ConfigurationError(f"{name} must be non-zero", model=model, state={name: value})


def check_positive(model, name, value):
    if not value > 0:
        raise ConfigurationError(f"{name} must be positive", model=model, state={name: value})
