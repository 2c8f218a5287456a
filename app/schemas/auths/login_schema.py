"""
Modelo que representa la estructura de datos recibida y enviada en las apis de login
"""

from pydantic import BaseModel, EmailStr, Field

from app.schemas.auths.register_schema import UserPublicData

class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

class LoginData(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserPublicData

class LoginResponse(BaseModel):
    success: bool
    message: str
    data: LoginData

class CurrentUserResponse(BaseModel):
    success: bool
    message: str
    data: UserPublicData
