from rustlings.lessons.wrapper import Wrapper


def test_store_u32_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"


def test_wrappers_compare_by_value():
    assert Wrapper("Foo") == Wrapper("Foo")
    assert not Wrapper(1) == Wrapper(2)