from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.apis.deps import AuthContext, auth_required, get_db, public_access
from app.configs.settings import settings
from app.cores.rate_limiter import limiter
from app.schemas.auths.login_schema import CurrentUserResponse, LoginRequest, LoginResponse
from app.schemas.auths.register_schema import RegisterUserRequest, RegisterUserResponse, UserPublicData
from app.services.auths.login_service import get_user_profile, login_user
from app.services.auths.register_service import register_user


router = APIRouter()


"""
Ruta para registrar un nuevo usuario.
    - Valida la contraseña y que el correo no esté registrado.
    - Retorna el perfil público del usuario registrado.
"""
@router.post("/register/", response_model=RegisterUserResponse, dependencies=[Depends(public_access)])
@limiter.limit(settings.AUTH_RATE_LIMIT)
async def register_route(request: Request, body: RegisterUserRequest, db: AsyncSession = Depends(get_db)):
    new_user = await register_user(body, db)
    return {
        "success": True,
        "message": "Successfully registered user.",
        "data": UserPublicData.model_validate(new_user),
    }


"""
Ruta para iniciar sesión.
    - Verifica las credenciales y genera un token de acceso.
    - Devuelve el token, su tipo y el perfil público del usuario.
"""
@router.post("/login/", response_model=LoginResponse, dependencies=[Depends(public_access)])
@limiter.limit(settings.AUTH_RATE_LIMIT)
async def login(request: Request, body: LoginRequest, db: AsyncSession = Depends(get_db)):
    access_token, user = await login_user(db, body.email, body.password)
    return {
        "success": True,
        "message": "Login successful",
        "data": {
            "access_token": access_token,
            "token_type": "bearer",
            "user": UserPublicData.model_validate(user),
        }
    }


@router.get("/me", response_model=CurrentUserResponse)
async def get_me(
    db: AsyncSession = Depends(get_db),
    current_user: AuthContext = Depends(auth_required)
):
    """Perfil público del usuario autenticado."""
    user = await get_user_profile(db, current_user.user_id)
    return {
        "success": True,
        "message": "User obtained successfully",
        "data": UserPublicData.model_validate(user),
    }
