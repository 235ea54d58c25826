"""Errors raised while turning raw user input into palettes."""

ACCEPTED_FORMAT = 'Use 3- or 6-digit hex, optionally prefixed with "#".'


class PaletteRequestError(ValueError):
    """Base class for bad palette input. Never a system fault."""


class EmptyInputError(PaletteRequestError):
    def __init__(self, message: str = "Please enter at least one hex color.") -> None:
        super().__init__(message)


class InvalidHexTokenError(PaletteRequestError):
    """A token failed ``#rrggbb`` validation after normalization."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f'Invalid hex color: "{token}". {ACCEPTED_FORMAT}')


class InvalidStepCountError(PaletteRequestError):
    def __init__(self, step_count: int, minimum: int, maximum: int) -> None:
        self.step_count = step_count
        super().__init__(
            f"step_count must be between {minimum} and {maximum}, got {step_count}"
        )
