from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    provider_configured: bool
