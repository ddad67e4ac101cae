"""Example user-management and product-catalog services with an in-memory batch job tracker."""

__version__ = "1.0.0"
