from starlette.requests import Request

from ..services.rate_service import RateService


def get_rate_service(request: Request) -> RateService:
    """
    RateService dependency for FastAPI routes (built once in the app lifespan).
    """
    return request.app.state.rate_service
