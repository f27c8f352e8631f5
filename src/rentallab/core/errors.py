"""
Error and warning classes for RentalLab.

The projection engine itself never raises for finite numeric input. These
classes are used at the configuration boundary, where assumptions are loaded
from dicts, JSON files or the command line.
"""

from __future__ import annotations

import warnings


class ConfigError(Exception):
    """
    Configuration error while building an assumptions record.

    **Common Causes:**
    - Unknown keys in an assumptions dict or JSON file
    - Values that cannot be converted to a number
    - A non-integer amortization term (e.g. ``term_years=27.5``)

    **Example Usage:**
        ```python
        from rentallab.core.errors import ConfigError
        from rentallab.core.specs import Assumptions

        try:
            Assumptions.from_dict({"purchase_price": "a lot"})
        except ConfigError as e:
            print(f"Configuration error: {e}")
        ```
    """

    pass


class RentalLabWarning(UserWarning):
    """Warning for RentalLab configuration issues."""


# Keys already warned about, so repeated loads stay quiet
_warned: set[str] = set()


def warn_once(code: str, msg: str, *, category=RentalLabWarning) -> None:
    """Warn once per code to avoid spam."""
    if code not in _warned:
        _warned.add(code)
        warnings.warn(msg, category, stacklevel=3)
