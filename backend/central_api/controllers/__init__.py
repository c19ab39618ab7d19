"""HTTP controllers, one router per record type."""

from .entities import router as entities_router
from .modules import router as modules_router
from .resellers import router as resellers_router
from .software import router as software_router

routers = [software_router, modules_router, entities_router, resellers_router]
