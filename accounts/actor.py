from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ActorContext:
    """Identity and privilege of whoever performs a mutation.

    Passed explicitly into every service call; services never read the
    current request or user from ambient state.
    """

    id: Optional[int]
    name: str = ''
    role: str = ''

    @property
    def is_admin(self) -> bool:
        from .models import User

        return self.role == User.ROLE_ADMIN

    @classmethod
    def from_user(cls, user) -> 'ActorContext':
        return cls(
            id=user.pk,
            name=getattr(user, 'name', '') or user.get_username(),
            role=getattr(user, 'role', ''),
        )

    @classmethod
    def from_request(cls, request) -> 'ActorContext':
        return cls.from_user(request.user)
