from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .circuit import FunctionDef
from .error import UnboundSignal, DuplicateDefinition


class Environment:
    """Scoped mapping from signal names to values and from names to functions.

    Environments form a chain through their ``parent``. The root scope is
    created once per simulation and mutated in place cycle over cycle; it
    alone holds the function definitions. Every function application
    creates one child scope of the root which is discarded once the body
    has been evaluated.

    Parameters
    ----------
    parent : Environment, optional
        The enclosing scope. ``None`` creates a root scope.

    Examples
    --------
    >>> env = Environment()
    >>> env.set_variable("A", True)
    >>> call = env.child_scope()
    >>> call.bind("A", False)
    >>> call.get_variable("A"), env.get_variable("A")
    (False, True)
    """

    def __init__(self, parent: "Environment | None" = None):
        self._parent = parent
        self._variables: Dict[str, bool] = {}
        self._definitions: Dict[str, FunctionDef] = {} if parent is None else None

    @property
    def parent(self) -> "Environment | None":
        return self._parent

    @property
    def root(self) -> "Environment":
        """Environment: the outermost scope of the chain."""
        env = self
        while env._parent is not None:
            env = env._parent
        return env

    def _find_scope(self, name: str) -> "Environment | None":
        env = self
        while env is not None:
            if name in env._variables:
                return env
            env = env._parent
        return None

    def get_variable(self, name: str) -> bool:
        """Look up a signal, searching from this scope outward.

        Raises
        ------
        UnboundSignal
            If no scope of the chain binds ``name``.
        """
        scope = self._find_scope(name)
        if scope is None:
            raise UnboundSignal(name)
        return scope._variables[name]

    def set_variable(self, name: str, value: bool) -> None:
        """Write a signal.

        The value goes into the innermost scope that already binds ``name``;
        if none does, the binding is created in this scope.
        """
        scope = self._find_scope(name)
        if scope is None:
            scope = self
        scope._variables[name] = bool(value)

    def bind(self, name: str, value: bool) -> None:
        """Create or overwrite a binding in this scope only.

        Used for parameters, which must shadow a global of the same name
        rather than write through to it.
        """
        self._variables[name] = bool(value)

    def get_def(self, name: str) -> Optional[FunctionDef]:
        """Return the definition registered at the root scope, or None."""
        return self.root._definitions.get(name)

    def define_function(self, definition: FunctionDef) -> None:
        """Register a function definition at the root scope.

        Raises
        ------
        DuplicateDefinition
            If a function of the same name is already registered.
        """
        definitions = self.root._definitions
        if definition.name in definitions:
            raise DuplicateDefinition(definition.name)
        definitions[definition.name] = definition

    def child_scope(self) -> "Environment":
        """Return a new, empty scope whose parent is this one."""
        return Environment(self)

    def snapshot(self) -> Mapping[str, bool]:
        """Return a read-only copy of the variables of this scope."""
        return MappingProxyType(dict(self._variables))

    def __contains__(self, name: str) -> bool:
        return self._find_scope(name) is not None

    def __str__(self) -> str:
        return "\n".join(
            f"{name} = {int(value)}" for name, value in self._variables.items()
        )

    def __repr__(self) -> str:
        kind = "root" if self._parent is None else "call"
        return f"Environment({kind}, {self._variables})"
