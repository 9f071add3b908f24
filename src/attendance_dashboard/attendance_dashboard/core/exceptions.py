class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidPeriod(ValidationError):
    """Raised when a period selection cannot be resolved into a date interval."""


class UpstreamUnavailable(DomainError):
    """Raised when the remote summary source fails or returns unusable data."""


class ExportError(DomainError):
    """Base class for failures while producing an export artifact."""

    user_message = "เกิดข้อผิดพลาดในการ Export กรุณาลองใหม่อีกครั้ง"


class ExportRenderFailure(ExportError):
    """Raised when the rendered surface cannot be turned into a document."""

    user_message = "เกิดข้อผิดพลาดในการ Export PDF กรุณาลองใหม่อีกครั้ง"


class ExportTargetNotFound(ExportError):
    """Raised when there is no renderable surface at export time."""

    user_message = "ไม่พบข้อมูลที่จะ Export กรุณาลองใหม่อีกครั้ง"
