"""Application-layer errors – misuse and misconfiguration of the library."""

from __future__ import annotations

from typing import Any, ClassVar

from mp_mailer.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """The library was used or wired incorrectly."""

    default_code = "application_error"


class DebuggableError(ApplicationError):
    """Self-describing error carrying an actionable diagnostic.

    Subclasses declare the four diagnostic fields as class attributes so
    they stay identical across every raise; callers may override them per
    instance through keyword arguments.

    Attributes:
        identifier: Stable machine-readable slug, also used as :attr:`code`.
        reason: One-line human-readable explanation.
        possible_causes: Likely reasons the error happened.
        suggested_fixes: Concrete remediations.
    """

    identifier: ClassVar[str] = "debuggable"
    reason: ClassVar[str] = "an error occurred"
    possible_causes: ClassVar[tuple[str, ...]] = ()
    suggested_fixes: ClassVar[tuple[str, ...]] = ()

    def __init__(
        self,
        message: str | None = None,
        *,
        identifier: str | None = None,
        reason: str | None = None,
        possible_causes: tuple[str, ...] | list[str] | None = None,
        suggested_fixes: tuple[str, ...] | list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        # Instance attributes shadow the class-level defaults.
        if identifier is not None:
            self.identifier = identifier  # type: ignore[misc]
        if reason is not None:
            self.reason = reason  # type: ignore[misc]
        if possible_causes is not None:
            self.possible_causes = tuple(possible_causes)  # type: ignore[misc]
        if suggested_fixes is not None:
            self.suggested_fixes = tuple(suggested_fixes)  # type: ignore[misc]
        kwargs.setdefault("code", self.identifier)
        super().__init__(message or self.reason, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["identifier"] = self.identifier
        base["reason"] = self.reason
        base["possible_causes"] = list(self.possible_causes)
        base["suggested_fixes"] = list(self.suggested_fixes)
        return base


__all__ = ["ApplicationError", "DebuggableError"]
