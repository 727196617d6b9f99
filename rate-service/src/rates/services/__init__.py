from .rate_service import RateService  # noqa: F401
