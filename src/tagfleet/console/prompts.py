"""Interactive prompts used by the console engine."""

from __future__ import annotations

DELETE_TAG_MESSAGE = "Are you sure you want to delete this tag?"


def confirm_prompt(message: str) -> bool:
    """Ask a yes/no question on the terminal using InquirerPy.

    Parameters
    ----------
    message
        Question shown to the user.

    Returns
    -------
    bool
        ``True`` only when the user explicitly answers yes.
    """
    try:
        from InquirerPy.resolver import prompt
    except ImportError as exc:  # pragma: no cover - optional dependency
        raise RuntimeError("InquirerPy is required for confirm_prompt.") from exc

    result = prompt(
        [
            {
                "type": "confirm",
                "name": "confirmed",
                "message": message,
                "default": False,
            }
        ],
    )
    if isinstance(result, dict):
        return result.get("confirmed") is True
    return False


__all__ = ["DELETE_TAG_MESSAGE", "confirm_prompt"]
