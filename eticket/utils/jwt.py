import jwt
import datetime
from eticket.config.settings import settings
from eticket.exceptions import InvalidTokenError, TokenExpiredError

ALGORITHM = "HS256"


def create_access_token(subject: dict, expires_delta: datetime.timedelta = None) -> str:
    to_encode = subject.copy()
    expire = datetime.datetime.now(datetime.timezone.utc) + (
        expires_delta or datetime.timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire, "type": "access"})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise TokenExpiredError
    except jwt.PyJWTError:
        raise InvalidTokenError
