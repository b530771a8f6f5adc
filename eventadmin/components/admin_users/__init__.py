"""Admin user component: existence check plus atomic admin creation."""

from .component import run_create_admin
from .models import DUPLICATE_EMAIL_MESSAGE, CreateAdminOutput
from .ports import ConnectedUserStorePort, PasswordHasherPort, UserStorePort

__all__ = [
    # Entry points
    "run_create_admin",
    # Models
    "CreateAdminOutput",
    "DUPLICATE_EMAIL_MESSAGE",
    # Ports
    "ConnectedUserStorePort",
    "PasswordHasherPort",
    "UserStorePort",
]
