"""Ephemeris adapters/providers (optional).

This package provides thin wrappers around external ephemeris libraries,
used only to validate the analytic model.
Install with:
  pip install "solarcalc[ephemeris]"
"""

def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import jplephem  # noqa: F401
        import skyfield  # noqa: F401
    except ImportError as e:
        raise RuntimeError('Ephemeris support requires: pip install "solarcalc[ephemeris]"') from e
