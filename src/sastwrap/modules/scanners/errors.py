"""Error kinds raised by the scan pipeline."""


class SastWrapError(Exception):
    """Base class for fatal pipeline errors."""


class UnknownScanner(SastWrapError):
    """Requested scanner name is not in the registry."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = list(available)
        super().__init__(
            f"Language support for {name} is not implemented yet. "
            f"Available: {', '.join(self.available)}"
        )


class InvalidRequest(SastWrapError):
    """Scan parameters cannot produce a command line."""


class PullError(SastWrapError):
    """Container image could not be pulled."""

    def __init__(self, image_ref: str, detail: str):
        self.image_ref = image_ref
        self.detail = detail
        super().__init__(f"Failed to pull image {image_ref}: {detail}")


class ExecutionFailure(SastWrapError):
    """Scanner process could not run, or exited non-zero without output."""

    def __init__(self, command: str, detail: str, exit_code: int | None = None):
        self.command = command
        self.detail = detail
        self.exit_code = exit_code
        status = f" (exit code {exit_code})" if exit_code is not None else ""
        super().__init__(f"Error executing command {command}{status}: {detail}")
