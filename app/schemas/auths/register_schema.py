from typing import Optional

from pydantic import BaseModel, EmailStr, ConfigDict, Field, field_validator
from app.cores.input_validator import sanitize_string_field

"""
Modelo que representa la estructura de datos recibida y enviada en las apis de registro
"""
class RegisterUserRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    password: str

    # Validador para sanitizar el nombre y prevenir XSS
    _sanitize_name = field_validator('name')(sanitize_string_field)

    model_config = ConfigDict(from_attributes=True)


class UserPublicData(BaseModel):
    id: str
    name: Optional[str] = None
    email: EmailStr
    image: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class RegisterUserResponse(BaseModel):
    success: bool
    message: str
    data: UserPublicData
