from decimal import Decimal
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    SETTLEMENT_TOLERANCE: Decimal = Decimal("0.01")
    SETTLED_TOLERANCE: Decimal = Decimal("0.05")
    PERCENTAGE_TOLERANCE: Decimal = Decimal("0.01")
    SETTLEMENT_DESCRIPTION: str = "Settlement"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
