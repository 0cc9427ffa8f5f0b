import pytest

from declargs.parser import ArgRegistry, FlagArg, ValueArg, get_registry, heading
from declargs.parser import registry as registry_module
from declargs.parser.registry import to_alias


@pytest.fixture
def fresh_global_registry(monkeypatch):
    monkeypatch.setattr(registry_module, "_registry", None)
    return get_registry


@pytest.mark.parametrize(
    "name, alias", [("h", "-h"), ("help", "--help"), ("x1", "--x1"), ("-", None)]
)
def test_to_alias(name, alias):
    if alias is None:
        with pytest.raises(SystemExit):
            to_alias(name)
    else:
        assert to_alias(name) == alias


@pytest.mark.parametrize("name", ["", "-", "--"])
def test_reserved_names_are_fatal(name):
    registry = ArgRegistry()
    with pytest.raises(SystemExit) as excinfo:
        FlagArg(name, registry=registry)
    assert excinfo.value.code == 1
    assert len(registry) == 0


def test_duplicate_alias_is_fatal():
    registry = ArgRegistry()
    FlagArg("v", registry=registry)
    with pytest.raises(SystemExit) as excinfo:
        FlagArg("v", registry=registry)
    assert excinfo.value.code == 1
    assert len(registry) == 1


def test_duplicate_alternate_is_fatal():
    registry = ArgRegistry()
    FlagArg("v", "verbose", registry=registry)
    with pytest.raises(SystemExit):
        ValueArg("level", "verbose", registry=registry)


def test_same_name_in_separate_registries():
    first = FlagArg("v", registry=ArgRegistry())
    second = FlagArg("v", registry=ArgRegistry())
    assert first.registry is not second.registry


def test_registration_order_and_lookup():
    registry = ArgRegistry()
    verbose = FlagArg("v", "verbose", registry=registry)
    level = ValueArg("l", registry=registry)
    assert list(registry) == [verbose, level]
    assert len(registry) == 2
    assert "--verbose" in registry
    assert level in registry
    assert registry.get("-l") is level
    assert registry.get("-q") is None
    assert registry.exists("-v")


def test_headings_group_arguments():
    registry = ArgRegistry()
    loose = FlagArg("a", registry=registry)
    registry.heading("Input")
    first = FlagArg("b", registry=registry)
    heading("Output", registry=registry)
    second = FlagArg("c", registry=registry)
    assert registry.groups() == [(None, [loose]), ("Input", [first]), ("Output", [second])]
    assert [group.title for group in registry.headings] == ["Input", "Output"]


def test_global_registry_created_once(fresh_global_registry):
    assert fresh_global_registry() is fresh_global_registry()


def test_arguments_default_to_global_registry(fresh_global_registry):
    verbose = FlagArg("v")
    assert verbose.registry is fresh_global_registry()
    assert verbose in fresh_global_registry()
