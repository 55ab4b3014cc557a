#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pyWellModels - Fluid property and drift-flux closure models for well flow
              Copyright (C) 2022, Mark Burgoyne

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.

          Contact author at mark.w.burgoyne@gmail.com
"""

import numpy as np
import numpy.typing as npt

from pywellmodels.errors import domain_error, numerical_error

def convert_to_numpy(input_data):
    # Convert input data to a numpy array ensuring it is always sizeable
    if isinstance(input_data, np.ndarray):
        return input_data.astype(float, copy=False)
    else:
        # Convert list, tuple, scalar, or other types to numpy array
        # Ensuring even scalars become arrays with one element
        return np.atleast_1d(np.asarray(input_data, dtype=float))

def process_input(input_data):
    # Check if input_data is a numpy array
    if isinstance(input_data, np.ndarray):
        if input_data.size == 1:
            # Return the single element if it's a single-element array
            return input_data.item()
        else:
            # Return the array itself if it's larger
            return input_data
    elif isinstance(input_data, list):
        if len(input_data) == 1:
            return input_data[0]
        else:
            return np.array(input_data)
    else:
        return input_data

def check_finite(value, model=None, **state):
    """ Raises NumericalError if value (scalar or array) holds NaN or Inf. Returns value unchanged """
    if not np.all(np.isfinite(value)):
        raise numerical_error("Result is not finite", model=model, result=process_input(value), **state)
    return value


class ConstantModel:
    """ Holds a single constant value, shared by the constant-valued models

        constant_value: The value returned on every evaluation
    """
    def __init__(self, constant_value: float):
        self._constant_value = float(constant_value)

    @property
    def constant_value(self) -> float:
        return self._constant_value

    def get_constant_value(self) -> float:
        return self._constant_value

    def __repr__(self):
        return f"ConstantModel({self._constant_value!r})"


class PowerModel:
    """ Power law primitive, value = alpha * ref_value ** power

        alpha: Multiplier
        power: Exponent

        set_alpha / set_power / set_ref_value update the cached computed_value and
        must not be called while another thread evaluates the same instance.
        evaluate() is a pure function of its argument and leaves the cache untouched.
    """
    def __init__(self, alpha: float, power: float):
        self._alpha = float(alpha)
        self._power = float(power)
        self._ref_value = 0.0
        self._computed_value = 0.0
        self._compute_value()

    def set_alpha(self, alpha: float):
        self._alpha = float(alpha)
        self._compute_value()

    def set_power(self, power: float):
        self._power = float(power)
        self._compute_value()

    def set_ref_value(self, ref_value: float):
        self._ref_value = float(ref_value)
        self._compute_value()

    def get_alpha(self) -> float:
        return self._alpha

    def get_power(self) -> float:
        return self._power

    def get_ref_value(self) -> float:
        return self._ref_value

    def get_computed_value(self) -> float:
        return self._computed_value

    alpha = property(get_alpha)
    power = property(get_power)
    ref_value = property(get_ref_value)
    computed_value = property(get_computed_value)

    def evaluate(self, ref_value: npt.ArrayLike, model=None):
        """ Returns alpha * ref_value ** power for a float or array, without touching the cached value """
        ref = convert_to_numpy(ref_value)
        if not float(self._power).is_integer() and np.any(ref < 0):
            raise domain_error("Negative base with non-integer power", model=model or type(self).__name__,
                               ref_value=process_input(ref), power=self._power)
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            out = self._alpha * np.power(ref, self._power)
        check_finite(out, model=model or type(self).__name__, ref_value=process_input(ref))
        return process_input(out)

    def _compute_value(self):
        # 0 ** negative power caches inf rather than raising
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            self._computed_value = float(self._alpha * np.power(self._ref_value, self._power))

    def __repr__(self):
        return f"PowerModel(alpha={self._alpha!r}, power={self._power!r})"
