"""Error types for the audio layer."""


class BackendError(Exception):
    """The OS audio subsystem is unavailable or rejected an operation."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail or "Audio backend error")
