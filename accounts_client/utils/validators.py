"""Client-side validation rules checked before a request is sent."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import UUID

NIL_UUID = UUID(int=0)


@dataclass
class ValidationError:
    """Validation error details."""
    field: str
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None


@dataclass
class ValidationResult:
    """Result of validation operation."""
    is_valid: bool
    errors: List[ValidationError]


def as_utc(value: datetime) -> datetime:
    """Return an aware UTC datetime; naive values are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class IdentifierRules:
    """Rules for UUID identifiers passed to the service."""

    @staticmethod
    def validate_required(field: str, value: Optional[UUID]) -> List[ValidationError]:
        if value is None or value == NIL_UUID:
            return [ValidationError(
                field=field,
                code="ID_REQUIRED",
                message=f"{field} must be a non-nil UUID"
            )]
        return []


class TokenRules:
    """Rules for issuing authentication tokens."""

    @staticmethod
    def validate_token_creation(
        user_id: Optional[UUID],
        scope: Optional[str],
        expiry: Optional[datetime],
        now: Optional[datetime] = None
    ) -> ValidationResult:
        """Validate a token issuance request."""
        errors = IdentifierRules.validate_required("user_id", user_id)

        if not scope or not scope.strip():
            errors.append(ValidationError(
                field="scope",
                code="SCOPE_REQUIRED",
                message="Scope is required"
            ))

        current = as_utc(now) if now else utc_now()
        if expiry is None:
            errors.append(ValidationError(
                field="expiry",
                code="EXPIRY_REQUIRED",
                message="Expiry is required"
            ))
        elif as_utc(expiry) <= current:
            errors.append(ValidationError(
                field="expiry",
                code="EXPIRY_NOT_IN_FUTURE",
                message="Expiry must be a future time",
                details={"provided": expiry.isoformat(), "now": current.isoformat()}
            ))

        return ValidationResult(is_valid=len(errors) == 0, errors=errors)

    @staticmethod
    def validate_token_deletion(user_id: Optional[UUID], token_id: Optional[UUID]) -> ValidationResult:
        errors = IdentifierRules.validate_required("user_id", user_id)
        errors.extend(IdentifierRules.validate_required("token_id", token_id))
        return ValidationResult(is_valid=len(errors) == 0, errors=errors)


class ServiceAccountRules:
    """Rules for service account payloads."""

    @staticmethod
    def validate_service_account_creation(
        service_name: Optional[str],
        roles: Optional[List[str]],
        expires_at: Optional[datetime],
        now: Optional[datetime] = None
    ) -> ValidationResult:
        """Validate a service account creation request."""
        errors = ServiceAccountRules._validate_name_and_roles(service_name, roles)

        if expires_at is not None:
            current = as_utc(now) if now else utc_now()
            if as_utc(expires_at) <= current:
                errors.append(ValidationError(
                    field="expires_at",
                    code="EXPIRY_NOT_IN_FUTURE",
                    message="Service account expiry must be in the future"
                ))

        return ValidationResult(is_valid=len(errors) == 0, errors=errors)

    @staticmethod
    def validate_service_account_update(
        service_account_id: Optional[UUID],
        service_name: Optional[str],
        roles: Optional[List[str]]
    ) -> ValidationResult:
        errors = IdentifierRules.validate_required("id", service_account_id)
        errors.extend(ServiceAccountRules._validate_name_and_roles(service_name, roles))
        return ValidationResult(is_valid=len(errors) == 0, errors=errors)

    @staticmethod
    def _validate_name_and_roles(service_name: Optional[str], roles: Optional[List[str]]) -> List[ValidationError]:
        errors = []
        if not service_name or not service_name.strip():
            errors.append(ValidationError(
                field="service_name",
                code="SERVICE_NAME_REQUIRED",
                message="Service name is required"
            ))
        if not roles:
            errors.append(ValidationError(
                field="roles",
                code="ROLE_REQUIRED",
                message="At least one role is required"
            ))
        return errors


class PermissionRules:
    """Rules for permission payloads."""

    @staticmethod
    def validate_permission_creation(name: Optional[str]) -> ValidationResult:
        errors = PermissionRules._validate_name(name)
        return ValidationResult(is_valid=len(errors) == 0, errors=errors)

    @staticmethod
    def validate_permission(permission_id: Optional[UUID], name: Optional[str]) -> ValidationResult:
        """A stored permission needs both its identity and its name."""
        errors = IdentifierRules.validate_required("id", permission_id)
        errors.extend(PermissionRules._validate_name(name))
        return ValidationResult(is_valid=len(errors) == 0, errors=errors)

    @staticmethod
    def _validate_name(name: Optional[str]) -> List[ValidationError]:
        if not name or not name.strip():
            return [ValidationError(
                field="name",
                code="NAME_REQUIRED",
                message="Permission name cannot be empty"
            )]
        return []
