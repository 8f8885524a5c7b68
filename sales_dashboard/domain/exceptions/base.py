"""Base exception for record and fetch errors."""


class DomainException(Exception):
    """
    Root of the sales dashboard's error hierarchy.

    Carries a stable ``code`` that ends up as the ``error`` field of API
    error bodies, next to a human-readable ``message``.
    """

    def __init__(self, message: str, code: str = "SALES_DASHBOARD_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)
