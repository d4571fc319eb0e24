# boxutils / errors.py

# -----

# Exceptions Raised by Box Utilities.

# -----


# Box Shape Error.
class BoxShapeError(ValueError):
    """Raised When a Box Array, Window or Delta Vector Has the Wrong Shape."""
