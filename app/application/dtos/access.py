"""DTOs for playlist authorization results."""

from dataclasses import dataclass

from app.domain.enums import AccessDecision, AccessPath


@dataclass(frozen=True)
class AccessResult:
    """Tagged outcome of a playlist access check.

    via names the relation that granted access; it is None when denied.
    """

    decision: AccessDecision
    via: AccessPath | None = None

    @property
    def granted(self) -> bool:
        return self.decision is AccessDecision.GRANTED
