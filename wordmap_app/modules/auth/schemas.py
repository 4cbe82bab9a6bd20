from dataclasses import dataclass
from typing import Optional


@dataclass
class UserDTO:
    id: int
    name: str
    email: str

    @classmethod
    def from_model(cls, user) -> 'UserDTO':
        return cls(id=user.user_id, name=user.name, email=user.email)


@dataclass
class ResetResult:
    """Outcome of a password reset step."""
    success: bool
    message: str
    status: str = 'ok'

    STATUS_OK = 'ok'
    STATUS_USER_NOT_FOUND = 'user_not_found'
    STATUS_INVALID_CODE = 'invalid_code'
    STATUS_EXPIRED = 'expired'
    STATUS_INVALID_PASSWORD = 'invalid_password'

    def to_dict(self):
        return {'success': self.success, 'message': self.message, 'status': self.status}
