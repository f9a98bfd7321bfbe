import pytest

from hwsim.environment import Environment
from hwsim.circuit import FunctionDef
from hwsim.expr import SignalRef
from hwsim.error import UnboundSignal, DuplicateDefinition


@pytest.fixture
def env():
    e = Environment()
    e.set_variable("A", True)
    e.set_variable("B", False)
    return e


# =================================================================
# Variables
# =================================================================
def test_get_variable_returns_bound_value(env):
    assert env.get_variable("A") is True
    assert env.get_variable("B") is False


def test_get_variable_unbound_raises(env):
    with pytest.raises(UnboundSignal) as excinfo:
        env.get_variable("C")
    assert excinfo.value.name == "C"


def test_set_variable_overwrites_existing_binding(env):
    env.set_variable("A", False)
    assert env.get_variable("A") is False


def test_child_scope_falls_back_to_parent(env):
    child = env.child_scope()
    assert child.parent is env
    assert child.root is env
    assert child.get_variable("A") is True


def test_set_variable_in_child_creates_local_binding_for_new_name(env):
    child = env.child_scope()
    child.set_variable("X", True)
    assert child.get_variable("X") is True
    assert "X" not in env


def test_set_variable_in_child_writes_through_to_enclosing_binding(env):
    child = env.child_scope()
    child.set_variable("A", False)
    assert env.get_variable("A") is False


def test_bind_shadows_enclosing_binding(env):
    child = env.child_scope()
    child.bind("A", False)
    assert child.get_variable("A") is False
    assert env.get_variable("A") is True


def test_values_are_stored_as_bool():
    env = Environment()
    env.set_variable("A", 1)
    assert env.get_variable("A") is True


# =================================================================
# Definitions
# =================================================================
def test_define_and_get_def_from_child_scope(env):
    ident = FunctionDef("id", ["X"], SignalRef("X"))
    env.define_function(ident)
    assert env.get_def("id") is ident
    assert env.child_scope().get_def("id") is ident


def test_get_def_missing_returns_none(env):
    assert env.get_def("nothing") is None


def test_define_function_from_child_registers_at_root(env):
    ident = FunctionDef("id", ["X"], SignalRef("X"))
    env.child_scope().define_function(ident)
    assert env.get_def("id") is ident


def test_duplicate_definition_raises(env):
    env.define_function(FunctionDef("f", ["X"], SignalRef("X")))
    with pytest.raises(DuplicateDefinition) as excinfo:
        env.define_function(FunctionDef("f", ["Y"], SignalRef("Y")))
    assert excinfo.value.name == "f"


# =================================================================
# Snapshots
# =================================================================
def test_snapshot_is_read_only_copy(env):
    snap = env.snapshot()
    assert dict(snap) == {"A": True, "B": False}
    with pytest.raises(TypeError):
        snap["A"] = False
    env.set_variable("A", False)
    assert snap["A"] is True


def test_str_lists_bindings(env):
    assert str(env) == "A = 1\nB = 0"
