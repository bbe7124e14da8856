"""
Version information for the package.
"""

__version__ = "0.1.0"
__license__ = "MIT"
__description__ = "Animated ASCII spiral galaxy for the terminal"

__all__ = [
    "__version__",
    "__license__",
    "__description__",
]
