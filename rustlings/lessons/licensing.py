"""Comparing licences and combining two capabilities."""

from __future__ import annotations


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        return "some information"


class SomeSoftware(Licensed):
    pass


class OtherSoftware(Licensed):
    pass


class SomeTrait:
    def some_function(self) -> bool:
        return True


class OtherTrait:
    def other_function(self) -> bool:
        return True


class SomeStruct(SomeTrait, OtherTrait):
    pass


class OtherStruct(SomeTrait, OtherTrait):
    pass


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether two licensed items carry the same licensing information."""
    for item in (software, software_two):
        if not isinstance(item, Licensed):
            raise TypeError(f"{type(item).__name__} is not licensed")
    return software.licensing_info() == software_two.licensing_info()


def some_func(item: SomeTrait) -> bool:
    """Call both capabilities of an item that has them both."""
    if not (isinstance(item, SomeTrait) and isinstance(item, OtherTrait)):
        raise TypeError(f"{type(item).__name__} lacks SomeTrait or OtherTrait")
    return item.some_function() and item.other_function()