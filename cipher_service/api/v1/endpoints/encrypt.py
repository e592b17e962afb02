import logging

from fastapi import APIRouter

from cipher_service.api.v1.errors import check_text_length, cipher_error_to_http
from cipher_service.core.exceptions import CipherError
from cipher_service.dependencies import RegistryDep, SettingsDep
from cipher_service.models.schemas import CipherResponse, EncryptRequest, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=CipherResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid key or text"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext using a specified cipher type and key.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> CipherResponse:
    """
    Encrypt plaintext with a specified cipher type.

    The key is validated by the engine before any text is processed.
    """
    check_text_length(request.text, settings.max_text_length)

    try:
        engine = registry.build(request.cipher_type, request.key)
        ciphertext = engine.encrypt(request.text)
    except CipherError as e:
        logger.info(
            "Rejected %s encryption of %d chars: %s",
            request.cipher_type.value,
            len(request.text),
            e.kind.value,
        )
        raise cipher_error_to_http(e)

    return CipherResponse(
        result=ciphertext,
        cipher_type=request.cipher_type,
        key_used=engine.key_value,
        explanation=engine.explain(),
    )
