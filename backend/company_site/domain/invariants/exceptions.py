class InvariantViolation(ValueError):
    """Raised when a company or section payload breaks a write-side rule."""
