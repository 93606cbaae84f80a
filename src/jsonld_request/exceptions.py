"""Application-specific exception helpers."""

from __future__ import annotations

from collections.abc import Sequence

from jsonld_request.schemas import (
    ErrorCodes,
    FailureDetails,
    OriginKind,
    RequestFailure,
)


class JsonLdRequestError(RuntimeError):
    """Raised when a location cannot be read or its content cannot be parsed."""

    def __init__(
        self,
        *,
        component: str,
        error_code: ErrorCodes,
        message: str,
        url: str | None = None,
        content_type: str | None = None,
        status_code: int | None = None,
        code: str | None = None,
        origin: OriginKind | None = None,
        causes: Sequence[BaseException] = (),
    ) -> None:
        super().__init__(message)
        self.causes: tuple[BaseException, ...] = tuple(causes)
        self.failure = RequestFailure(
            component=component,
            error_code=error_code,
            message=message,
            details=FailureDetails(
                url=url,
                content_type=content_type,
                status_code=status_code,
                code=code,
                origin=origin,
            ),
            causes=[f"{type(exc).__name__}: {exc}" for exc in self.causes],
        )

    @property
    def error_code(self) -> ErrorCodes:
        return self.failure.error_code

    @property
    def details(self) -> FailureDetails:
        return self.failure.details

    def __str__(self) -> str:
        """Return a human-readable form for logging."""

        failure = self.failure
        text = f"{failure.component}::{failure.error_code} - {failure.message}"
        if failure.details.url is not None:
            text = f"{text} ({failure.details.url})"
        return text


__all__ = ["JsonLdRequestError"]
