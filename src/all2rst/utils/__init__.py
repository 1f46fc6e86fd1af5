#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Helper modules for escaping, layout, identifiers, dimensions and I/O."""
