"""Organizational roles."""

from enum import StrEnum


class Role(StrEnum):
    """The five roles of the factory organization, lowest authority first."""

    OPERATOR = "operator"
    TEAM_LEADER = "team_leader"
    SUPERVISOR = "supervisor"
    MANAGER = "manager"
    ADMIN = "admin"

    @property
    def level(self) -> int:
        """Authority level, 1 (operator) to 5 (admin). Used for pilot assignment only."""
        return _ROLE_LEVELS[self]

    @property
    def label(self) -> str:
        """Display label."""
        return _ROLE_LABELS[self]

    @classmethod
    def parse(cls, value: "str | Role | None") -> "Role | None":
        """Parse a stored role value; unknown or missing values give None."""
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


_ROLE_LEVELS: dict[Role, int] = {
    Role.OPERATOR: 1,
    Role.TEAM_LEADER: 2,
    Role.SUPERVISOR: 3,
    Role.MANAGER: 4,
    Role.ADMIN: 5,
}

_ROLE_LABELS: dict[Role, str] = {
    Role.OPERATOR: "Opérateur",
    Role.TEAM_LEADER: "Chef d'équipe",
    Role.SUPERVISOR: "Superviseur",
    Role.MANAGER: "Manager",
    Role.ADMIN: "Administrateur",
}
