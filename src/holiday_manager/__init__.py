"""Holiday Manager package.

This package is organized by feature modules (employees, rules, holidays, ...)
with a thin click shell on top and service/repository layers underneath.
"""

__version__ = "0.1.0"
