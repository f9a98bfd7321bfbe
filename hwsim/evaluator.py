from .circuit import Update
from .environment import Environment
from .error import UndefinedFunction, ArityMismatch, CallDepthExceeded
from .expr import Expr, SignalRef, And, Or, Not, Apply


class Evaluator:
    """Evaluate expressions and apply updates against an `Environment`.

    Evaluation is deterministic: both operands of ``*`` and ``+`` are always
    evaluated, left before right, and no expression is ever mutated.

    Function application follows a fixed protocol:

    1. Look up the definition at the root scope.
    2. Check the argument count against the parameter count.
    3. Evaluate every argument in the caller's environment, left to right.
    4. Create a call scope layered directly on the global (root) scope, so
       the body never sees call-local bindings of its caller.
    5. Bind each parameter to its argument value in the call scope.
    6. Evaluate the body in the call scope.

    Parameters
    ----------
    max_call_depth : int, optional
        The maximum nesting of function applications. Defaults to 64.

    Raises
    ------
    CallDepthExceeded
        If applications nest deeper than `max_call_depth`.
    """

    def __init__(self, max_call_depth: int = 64):
        self.max_call_depth = max_call_depth

    def eval(self, expr: Expr, env: Environment) -> bool:
        """Evaluate ``expr`` in ``env`` and return its boolean value."""
        return self._eval(expr, env, 0)

    def apply(self, update: Update, env: Environment) -> None:
        """Evaluate the right-hand side of ``update`` and write the target."""
        value = self.eval(update.value, env)
        env.set_variable(update.target, value)

    def _eval(self, expr: Expr, env: Environment, depth: int) -> bool:
        if isinstance(expr, SignalRef):
            return env.get_variable(expr.name)
        if isinstance(expr, And):
            left = self._eval(expr.left, env, depth)
            right = self._eval(expr.right, env, depth)
            return left and right
        if isinstance(expr, Or):
            left = self._eval(expr.left, env, depth)
            right = self._eval(expr.right, env, depth)
            return left or right
        if isinstance(expr, Not):
            return not self._eval(expr.operand, env, depth)
        if isinstance(expr, Apply):
            return self._apply_function(expr, env, depth)
        raise TypeError(f"Unknown expression node: {expr!r}")

    def _apply_function(self, expr: Apply, env: Environment, depth: int) -> bool:
        definition = env.get_def(expr.function)
        if definition is None:
            raise UndefinedFunction(expr.function)
        if len(expr.args) != definition.arity:
            raise ArityMismatch(expr.function, definition.arity, len(expr.args))
        if depth >= self.max_call_depth:
            raise CallDepthExceeded(expr.function, self.max_call_depth)

        # Arguments see the caller's scope, never the callee's.
        values = [self._eval(arg, env, depth) for arg in expr.args]

        call_env = env.root.child_scope()
        for param, value in zip(definition.parameters, values):
            call_env.bind(param, value)
        return self._eval(definition.body, call_env, depth + 1)


_default_evaluator = Evaluator()


def evaluate(expr: Expr, env: Environment) -> bool:
    """Evaluate ``expr`` in ``env`` with the default `Evaluator`."""
    return _default_evaluator.eval(expr, env)


def apply_update(update: Update, env: Environment) -> None:
    """Apply ``update`` to ``env`` with the default `Evaluator`."""
    _default_evaluator.apply(update, env)
