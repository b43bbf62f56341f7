"""Value objects shared by the feature packages and the CLI layer."""

from .configuration import OptionValue, RawConfiguration

__all__ = ["OptionValue", "RawConfiguration"]
