from pydantic import BaseModel, ConfigDict, Field


class RateOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    type: str = Field(..., examples=["PERSONAL"])
    rate_value: float = Field(..., alias="rateValue", ge=0, examples=[10.0])


class ErrorOut(BaseModel):
    error: str = Field(..., examples=["Rate Not Found: AUTO"])
