"""
Error types shared by all property and drift-flux closure models.

    DomainError: input outside a correlation's valid range
    NumericalError: NaN or Inf computed from valid-looking inputs
    ConfigurationError: malformed coefficients at construction
"""

from .errors import ModelError, DomainError, NumericalError, ConfigurationError, domain_error, numerical_error
