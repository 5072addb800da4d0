import threading
from dataclasses import dataclass

from edgeboot.di import Container, type_instance_to_name

SERVICE_NAME = "serviceName"


class Foo:
    pass


def test_get_unknown_service_returns_none():
    sut = Container({})
    assert sut.get("unknownService") is None


def test_get_known_service_returns_constructor_result():
    service = object()
    sut = Container({SERVICE_NAME: lambda get: service})
    assert sut.get(SERVICE_NAME) is service


def test_get_known_service_implements_singleton():
    count = {"n": 0}

    def constructor(get):
        count["n"] += 1
        return {"value": count["n"]}

    sut = Container({SERVICE_NAME: constructor})
    first = sut.get(SERVICE_NAME)
    second = sut.get(SERVICE_NAME)
    assert first["value"] == second["value"] == 1
    assert count["n"] == 1


def test_update_of_non_existent_service_adds():
    service = object()
    sut = Container({})
    sut.update({SERVICE_NAME: lambda get: service})
    assert sut.get(SERVICE_NAME) is service


def test_update_of_existing_service_replaces():
    sut = Container({SERVICE_NAME: lambda get: "original"})
    assert sut.get(SERVICE_NAME) == "original"
    sut.update({SERVICE_NAME: lambda get: "replacement"})
    assert sut.get(SERVICE_NAME) == "replacement"


def test_get_inside_get_returns_as_expected():
    @dataclass
    class FooService:
        foo_message: str

    @dataclass
    class Bar:
        bar_message: str
        foo: FooService

    sut = Container(
        {
            "foo": lambda get: FooService(foo_message="foo"),
            "bar": lambda get: Bar(bar_message="bar", foo=get("foo")),
        }
    )
    result = sut.get("bar")
    assert result.bar_message == "bar"
    assert result.foo == FooService(foo_message="foo")
    assert result.foo is sut.get("foo")


def test_none_constructors_gives_empty_container():
    sut = Container(None)
    assert sut.get(SERVICE_NAME) is None


def test_concurrent_gets_construct_once():
    count = {"n": 0}
    marker = object()

    def constructor(get):
        count["n"] += 1
        return marker

    sut = Container({SERVICE_NAME: constructor})
    results = []

    def worker():
        results.append(sut.get(SERVICE_NAME))

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert count["n"] == 1
    assert len(results) == 16
    assert all(result is marker for result in results)
    assert sut.get(SERVICE_NAME) is marker


def test_type_instance_to_name_returns_module_plus_type_name():
    assert type_instance_to_name(Foo()) == f"{__name__}.Foo"


def test_type_instance_to_name_accepts_class():
    assert type_instance_to_name(Foo) == type_instance_to_name(Foo())


def test_type_instance_to_name_builtin():
    assert type_instance_to_name(3) == "builtins.int"