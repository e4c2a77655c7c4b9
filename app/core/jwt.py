from jose import jwt, JWTError

from app.core.config import settings

# Supabase signs user access tokens with the project JWT secret
ALGORITHM = "HS256"
AUDIENCE = "authenticated"


class InvalidTokenError(Exception):
    pass


def decode_access_token(token: str, secret: str | None = None) -> dict:
    secret = secret or settings.SUPABASE_JWT_SECRET
    if not secret:
        raise InvalidTokenError("JWT secret not configured")

    try:
        return jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            audience=AUDIENCE,
        )
    except JWTError as e:
        raise InvalidTokenError(str(e)) from e
