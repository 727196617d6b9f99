"""
rate-service/src/rates

Rate service for the lending demo: serves the interest rate for a loan type.
"""

from .app import create_app  # noqa: F401
