"""Resolved callee identity."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CalleeIdentity:
    """Resolved identity of the method a call site invokes.

    Attributes:
        owner: FQN of the declaring class (e.g. "timber.log.Timber")
        name: Method name (e.g. "d")
        hierarchy: Owner plus every resolved supertype. Empty means
            only the owner itself is known.
    """

    owner: str
    name: str
    hierarchy: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.owner:
            raise ValueError("owner must not be empty")
        if not self.name:
            raise ValueError("name must not be empty")

    @property
    def fqn(self) -> str:
        """Fully qualified name: owner.name."""
        return f"{self.owner}.{self.name}"

    def is_member_of(self, cls: str) -> bool:
        """Check if the method is declared in cls or one of its subclasses."""
        return cls == self.owner or cls in self.hierarchy

    def is_member_of_any(self, classes: frozenset[str] | tuple[str, ...]) -> bool:
        """Check is_member_of against several classes."""
        return any(self.is_member_of(cls) for cls in classes)

    def __str__(self) -> str:
        return self.fqn
