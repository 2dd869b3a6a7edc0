"""Fixed-string line search over files and directories, with highlighted matches."""

__version__ = "0.1.0"
__all__ = ["__version__"]