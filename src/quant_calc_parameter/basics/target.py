class CalculationTarget:
    """Base for anything a measure can be calculated for (trades, positions, ...)."""
