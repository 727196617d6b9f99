from typing import Any, Dict

from ..db.models import Rate


def serialize_rate(r: Rate) -> Dict[str, Any]:
    return {
        "id": r.id,
        "type": r.type,
        "rateValue": float(r.rate_value),
    }
