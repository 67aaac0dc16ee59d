def safe_ratio(numerator: int | float, denominator: int | float, digits: int = 2) -> float:
    """Divide and round; 0.0 when the denominator is zero."""
    if not denominator:
        return 0.0
    return round(numerator / denominator, digits)


def percentage(part: int, whole: int, digits: int = 1) -> float:
    """Share of ``whole`` as a percentage; 0.0 when ``whole`` is zero."""
    return safe_ratio(part * 100, whole, digits)
