import json
from pathlib import Path
from typing import Annotated, List, Self

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Ticket Purchase Service'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # Set to True for local debugging (IO logs + file sink)

    # CORS
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, str):
            return json.loads(v)
        elif isinstance(v, list):
            return v
        return []

    # Ticket prices (integer currency units)
    ADULT_TICKET_PRICE: int = 20
    CHILD_TICKET_PRICE: int = 10
    INFANT_TICKET_PRICE: int = 0  # Infants sit on an adult's lap

    # Purchase limits
    MIN_TICKETS_PER_PURCHASE: int = 1
    MAX_TICKETS_PER_PURCHASE: int = 20

    @field_validator('ADULT_TICKET_PRICE', 'CHILD_TICKET_PRICE', 'INFANT_TICKET_PRICE')
    @classmethod
    def validate_ticket_price(cls, v: int) -> int:
        if v < 0:
            raise ValueError('ticket price cannot be negative')
        return v

    @model_validator(mode='after')
    def validate_purchase_limits(self) -> Self:
        if self.MIN_TICKETS_PER_PURCHASE < 1:
            raise ValueError('MIN_TICKETS_PER_PURCHASE must be at least 1')
        if self.MAX_TICKETS_PER_PURCHASE < self.MIN_TICKETS_PER_PURCHASE:
            raise ValueError('MAX_TICKETS_PER_PURCHASE must not be below MIN_TICKETS_PER_PURCHASE')
        return self


settings = Settings()  # type: ignore
