class RateNotFound(Exception):
    """No rate row exists for the requested loan type."""

    def __init__(self, type_: str):
        self.type = type_
        super().__init__(f"Rate Not Found: {type_}")
