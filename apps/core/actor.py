from dataclasses import dataclass
from typing import Optional


MANAGER = 'manager'
CUSTOMER = 'customer'


@dataclass(frozen=True)
class ActorContext:
    """
    Verified identity of the caller.

    Built by the authentication classes from a stored user and passed
    explicitly to every service call. Also serves as ``request.user``, so it
    carries the attributes DRF permission classes look at.
    """

    user_id: int
    username: str
    role: str
    manager_id: Optional[int] = None

    is_authenticated = True
    is_anonymous = False

    @classmethod
    def from_user(cls, user) -> 'ActorContext':
        return cls(
            user_id=user.id,
            username=user.username,
            role=user.role,
            manager_id=user.manager_id,
        )

    @property
    def pk(self):
        return self.user_id

    @property
    def is_manager(self) -> bool:
        return self.role == MANAGER

    @property
    def is_customer(self) -> bool:
        return self.role == CUSTOMER

    def __str__(self):
        return f"{self.username} ({self.role} #{self.user_id})"
