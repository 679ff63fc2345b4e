# SPDX-License-Identifier: Apache-2.0
"""EnrollSync package initialization."""

__version__ = "0.1.0"

__all__ = [
    "bootstrap",
    "cli",
    "metrics",
    "__version__",
]
