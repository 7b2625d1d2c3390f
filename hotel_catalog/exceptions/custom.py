class SupplierError(Exception):
    def __init__(self, supplier: str, message: str, status_code: int | None = None):
        self.supplier = supplier
        self.message = message
        self.status_code = status_code
        super().__init__(f"{supplier}: {message}")


class RateLimitError(Exception):
    def __init__(self, service: str):
        self.service = service
        super().__init__(f"Rate limit exceeded for {service}")
