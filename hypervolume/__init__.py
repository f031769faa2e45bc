"""Monte Carlo estimation of volumes of k-dimensional shapes."""

__version__ = "0.1.0"
__all__ = ["__version__"]