"""PVZ Service

Pickup-point (PVZ) operations: registering pickup points, opening and closing
intake batches ("receptions") and recording the products accepted into the
currently open batch. Every state change runs inside a single atomic unit of
work against the configured database.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
