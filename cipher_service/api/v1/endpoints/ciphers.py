from fastapi import APIRouter

from cipher_service.dependencies import RegistryDep
from cipher_service.models.schemas import CipherInfo, CipherListResponse

router = APIRouter()


@router.get(
    "",
    response_model=CipherListResponse,
    summary="List ciphers",
    description="List the cipher types this service can encrypt and decrypt.",
)
async def list_ciphers(registry: RegistryDep) -> CipherListResponse:
    """List registered cipher engines with their metadata."""
    items = [
        CipherInfo(
            cipher_type=engine_class.cipher_type,
            cipher_family=engine_class.cipher_family,
            name=engine_class.name,
            description=engine_class.description,
        )
        for engine_class in registry.get_all_engine_classes()
    ]
    return CipherListResponse(items=items, total=len(items))
