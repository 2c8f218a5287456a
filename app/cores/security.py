from passlib.context import CryptContext


"""
Configura el contexto de hashing usando el algoritmo BCrypt.
Este contexto se usa internamente para hashear y verificar contraseñas.
"""
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__default_rounds=12
)


"""
Genera un hash seguro de la contraseña usando BCrypt.
Se utiliza al registrar usuarios antes de guardar la contraseña en la base de datos.
"""
def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


"""
Verifica si una contraseña en texto plano coincide con un hash previamente generado.
Las cuentas creadas por OAuth no tienen hash y nunca validan.
"""
def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)
