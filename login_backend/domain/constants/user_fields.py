"""Constants for User field names as they appear on the wire"""


class UserFields:
    """Field name constants for User records"""
    ID = "id"
    FULL_NAME = "nombre"
    NATIONAL_ID = "dpi"
    EMAIL = "email"
    PASSWORD = "password"
    REGISTERED_AT = "fechaRegistro"
    
    # Listing envelope
    TOTAL = "total"
    USERS = "usuarios"
    
    REGISTRATION_FIELDS = (FULL_NAME, NATIONAL_ID, EMAIL, PASSWORD)
    LOGIN_FIELDS = (EMAIL, PASSWORD)
