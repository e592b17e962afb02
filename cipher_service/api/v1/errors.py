from fastapi import HTTPException, status

from cipher_service.core.exceptions import CipherError, ErrorKind


def cipher_error_to_http(error: CipherError) -> HTTPException:
    """Convert a cipher error into a 400 response carrying its kind."""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={
            "error": error.kind.value,
            "message": error.message,
            "details": error.details,
        },
    )


def check_text_length(text: str, max_length: int) -> None:
    """Reject text longer than the configured maximum."""
    if len(text) > max_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": ErrorKind.TEXT_TOO_LONG.value,
                "message": f"Text exceeds maximum length of {max_length}",
                "details": {"length": len(text), "max_length": max_length},
            },
        )
