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

import logging

logger = logging.getLogger(__name__)


class ModelError(Exception):
    """ Base class for errors raised by the property and closure models.

        model: Name of the model class that detected the problem
        state: Dictionary of the inputs (or coefficients) that triggered it
    """
    def __init__(self, message, model=None, state=None):
        super().__init__(message)
        self.model = model
        self.state = dict(state) if state is not None else {}

    def __str__(self):
        msg = super().__str__()
        if self.model is not None:
            msg = f"{self.model}: {msg}"
        if self.state:
            details = ", ".join(f"{k}={v!r}" for k, v in self.state.items())
            msg = f"{msg} ({details})"
        return msg


class DomainError(ModelError, ValueError):
    """Raised when an input lies outside the valid range of a correlation."""


class NumericalError(ModelError, ArithmeticError):
    """Raised when a correlation returns NaN or Inf from valid-looking inputs."""


class ConfigurationError(ModelError, ValueError):
    """Raised when a model is constructed with malformed coefficients."""


def domain_error(message, model=None, **state):
    """ Logs the offending state and returns a DomainError ready to be raised """
    logger.debug("Domain violation in %s: %s %s", model, message, state)
    return DomainError(message, model=model, state=state)


def numerical_error(message, model=None, **state):
    """ Logs the offending state and returns a NumericalError ready to be raised """
    logger.debug("Numerical failure in %s: %s %s", model, message, state)
    return NumericalError(message, model=model, state=state)
