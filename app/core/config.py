from pydantic_settings import BaseSettings

"""
API CONFIGURATION
"""


#Class to load and read backend .env
class Settings(BaseSettings):

    CORS_ORIGINS: str = "http://localhost:3000,http://127.0.0.1:3000"

    #Hosted backend (persistence + auth)
    SUPABASE_URL: str | None = None
    SUPABASE_ANON_KEY: str | None = None
    SUPABASE_JWT_SECRET: str | None = None
    DATASTORE_TIMEOUT: float = 10.0

    #Transactional email
    BREVO_API_KEY: str | None = None
    EMAIL_FROM: str | None = None
    EMAIL_TIMEOUT: float = 10.0

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()


DEFAULT_EMAIL_FROM = "noreply@salonbooker.nl"
DEFAULT_SALON_NAME = "SalonBooker"


#Login and signup limits (max requests, window seconds)
RATE_LIMITS = {
    "login": (5, 60),
    "signup": (5, 60),
}

MIN_PASSWORD_LENGTH = 6


#Calendar opening hours, half-hour slots from 09:00 up to and including 20:30
CALENDAR_FIRST_HOUR = 9
CALENDAR_LAST_HOUR = 20
CALENDAR_SLOT_COUNT = 24

RECENT_BOOKINGS_LIMIT = 10
