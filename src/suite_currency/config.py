"""Package-wide tuning constants.

The values are read at call time by the modules that use them, so tests may
monkeypatch them.
"""

from suite_currency.domain.numeric.rounding_mode import RoundingMode

# CLDR release the embedded currency table is derived from. Symbols, number formats
# and parent locales come from the CLDR release bundled with babel
CLDR_VERSION = "36"

# Significant digits kept when a quotient does not terminate in base 10
DIVISION_PRECISION = 34

# Rounding used by `Amount.round`, `Amount.to_minor_units` and new formatters
DEFAULT_ROUNDING_MODE = RoundingMode.HALF_UP

# Upper bound on fraction digits shown by a new `Formatter`
DEFAULT_MAX_DIGITS = 6
