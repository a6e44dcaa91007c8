"""User-facing messages returned by the registration and login API"""


class AuthMessages:
    """Message constants (Spanish, as consumed by the web client)"""
    SERVICE_DESCRIPTION = "API de Registro y Login"
    
    # Success
    REGISTERED = "Usuario registrado exitosamente"
    LOGGED_IN = "Login exitoso"
    
    # Rejections
    INVALID_REGISTRATION = "Datos de registro invalidos"
    LOGIN_FIELDS_REQUIRED = "Email y contraseña son requeridos"
    DUPLICATE_EMAIL = "El email ya está registrado"
    DUPLICATE_NATIONAL_ID = "El DPI ya esta registrado"
    INVALID_CREDENTIALS = "Credenciales incorrectas"
    INVALID_BODY = "Cuerpo de la solicitud invalido"
    INTERNAL_ERROR = "Error interno del servidor"
    
    # Per-field validation
    FIELD_REQUIRED = "El campo {field} es requerido"
    FIELD_NOT_TEXT = "El campo {field} debe ser texto"
    FIELD_NOT_UTF8 = "El campo {field} contiene caracteres invalidos"
    INVALID_NATIONAL_ID = "El DPI debe tener exactamente 13 digitos"
    INVALID_EMAIL = "El formato del email no es valido"
    PASSWORD_TOO_SHORT = "La contraseña debe tener al menos {min_length} caracteres"
