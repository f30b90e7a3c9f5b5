class GoogleMapsError(Exception):
    def __init__(self, message: str, status_code: int | None = None, api: str = "Google Maps"):
        self.message = message
        self.status_code = status_code
        self.api = api
        super().__init__(message)


class RateLimitError(Exception):
    def __init__(self, service: str):
        self.service = service
        super().__init__(f"Rate limit exceeded for {service}")


class ApiKeyNotConfiguredError(Exception):
    def __init__(self, service: str = "Google Maps"):
        self.service = service
        super().__init__(f"{service} API key not configured")
