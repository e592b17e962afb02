from typing import Annotated

from fastapi import Depends

from cipher_service.core.config import Settings, get_settings
from cipher_service.services.engines.registry import EngineRegistry


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


# Engine registry dependency
def get_registry() -> EngineRegistry:
    """Get engine registry."""
    return EngineRegistry()

RegistryDep = Annotated[EngineRegistry, Depends(get_registry)]
