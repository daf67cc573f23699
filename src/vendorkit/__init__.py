"""
vendorkit - vendor dependencies into source projects

Tracks the dependencies of a project under its ``vendor/`` directory,
attaching each one as a pinned git submodule when version control allows
it, or as a plain copy otherwise.
"""

__version__ = "0.3.0"
__all__ = ["__version__"]
