from src.domain.entities import User
from src.rules.models import Rules


class PolicyEngine:
    """Role based capability checks driven by the rbac section of rules.yaml."""

    def __init__(self, rules: Rules):
        self.rules = rules

    def capabilities(self, user: User | None) -> set[str]:
        if user is None or user.status != "active":
            return set()
        return self.rules.rbac.capabilities_for(list(user.roles))

    def can(self, user: User | None, capability: str, document_id: int | None = None) -> bool:
        """
        True if any of the user's roles grants capability.

        document_id is accepted for per-document checks; roles currently
        apply to every document alike.
        """
        return capability in self.capabilities(user)
