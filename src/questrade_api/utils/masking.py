def mask_token(value: str | None, visible_chars: int = 4) -> str:
    """Mask a credential for logging, keeping only its last few characters."""
    if not value or len(value) <= visible_chars:
        return "****"

    return "*" * (len(value) - visible_chars) + value[-visible_chars:]
