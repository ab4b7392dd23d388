from adapters.variable_store.dict_variable_store import DictVariableStore
from contracts import number, variable
from ports.variable_store import VariableStore


def test_dict_variable_store_implements_port():
    assert isinstance(DictVariableStore(), VariableStore)


def test_dict_variable_store_set_get_remove():
    store = DictVariableStore({"b": variable("a")})
    store.set("a", number(1))

    assert store.contains("a")
    assert store.get("a") == number(1)
    assert store.names() == ["a", "b"]

    store.remove("a")
    store.remove("missing")

    assert store.get("a") is None
    assert store.names() == ["b"]

    store.clear()
    assert len(store) == 0
