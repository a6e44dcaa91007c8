from .root_controller import router as root_router
from .auth_controller import router as auth_router
from .users_controller import router as users_router
from .error_handlers import register_error_handlers


__all__ = ["root_router", "auth_router", "users_router", "register_error_handlers"]
