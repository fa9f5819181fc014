"""Dense matrices with arithmetic, determinants, cofactors and inverses."""

__version__ = "0.1.0"
__all__ = ["matrix"]