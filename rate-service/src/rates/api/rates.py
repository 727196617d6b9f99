from fastapi import APIRouter, Depends

from ..logging_config import get_logger
from ..services.rate_service import RateService
from .deps import get_rate_service
from .schemas import ErrorOut, RateOut
from .serializers import serialize_rate

logger = get_logger("rate_service.api.rates")

router = APIRouter(tags=["rates"])


@router.get(
    "/rates/{type}",
    response_model=RateOut,
    responses={404: {"model": ErrorOut}},
)
async def get_rate_by_type(type: str, service: RateService = Depends(get_rate_service)):
    """
    Fetch the rate for a loan type (exact, case-sensitive match).
    """
    logger.info("Lookup rate type=%s", type)
    rate = await service.get_rate_by_type(type)
    return serialize_rate(rate)
