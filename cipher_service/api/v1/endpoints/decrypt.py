import logging

from fastapi import APIRouter

from cipher_service.api.v1.errors import check_text_length, cipher_error_to_http
from cipher_service.core.exceptions import CipherError
from cipher_service.dependencies import RegistryDep, SettingsDep
from cipher_service.models.schemas import CipherResponse, DecryptRequest, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=CipherResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid key or ciphertext"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext using a specified cipher type and key.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> CipherResponse:
    """
    Decrypt ciphertext with a specified cipher type.

    The ciphertext is passed to the engine as received: the table route
    cipher normalizes it, the modular alphabet cipher requires canonical
    uppercase ciphertext.
    """
    check_text_length(request.text, settings.max_text_length)

    try:
        engine = registry.build(request.cipher_type, request.key)
        plaintext = engine.decrypt(request.text)
    except CipherError as e:
        logger.info(
            "Rejected %s decryption of %d chars: %s",
            request.cipher_type.value,
            len(request.text),
            e.kind.value,
        )
        raise cipher_error_to_http(e)

    return CipherResponse(
        result=plaintext,
        cipher_type=request.cipher_type,
        key_used=engine.key_value,
        explanation=engine.explain(),
    )
