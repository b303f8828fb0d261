"""RGF car-insurance policy advisor: page extraction and policy recommendation."""

__version__ = "1.0.0"
