from datetime import datetime

from pydantic import BaseModel, EmailStr, constr, Field, model_validator


class RegisterRequest(BaseModel):
    full_name: str = Field(..., min_length=1, max_length=100, example="Jane Doe",
                           description="The user's full name.")
    email: EmailStr = Field(..., example="user@example.com", description="The user's unique email address.")
    password: constr(min_length=8) = Field(..., example="SecurePa$$w0rd",
                                           description="A password of at least 8 characters.")
    confirm_password: str = Field(..., description="Must repeat the password.")

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class LoginRequest(BaseModel):
    email: EmailStr = Field(..., example="user@example.com", description="The user's email address.")
    password: str = Field(..., example="SecurePa$$w0rd", description="The user's password.")


class TokenResponse(BaseModel):
    access_token: str = Field(..., description="The short-lived JWT used to access protected endpoints.")
    refresh_token: str = Field(..., description="A long-lived token used to obtain a new access token.")
    token_type: str = Field("bearer", description="The type of the token, typically 'bearer'.")
    redirect_to: str = Field("/movies/", description="Where the client should go after signing in.")


class RefreshRequest(BaseModel):
    refresh_token: str = Field(..., description="The refresh token provided at login.")


class LogoutResponse(BaseModel):
    detail: str
    redirect_to: str = "/movies/"


class UserOut(BaseModel):
    id: int = Field(..., description="The unique ID of the user.")
    full_name: str = Field(..., description="The user's full name.")
    email: EmailStr = Field(..., description="The user's email address.")
    username: str = Field(..., description="The user's login name.")
    role: str = Field(..., description="The user's role ('Admin' or 'User').")
    created_at: datetime | None = Field(None, description="When the account was created.")

    class Config:
        from_attributes = True
