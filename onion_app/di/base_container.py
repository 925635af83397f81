# Standard library imports
from typing import Any, Callable, Dict, Type, TypeVar, Union

TypeVarType = TypeVar('TypeVarType')

Key = Union[Type[Any], str]


class BaseContainer:
    """
    Base dependency registry.

    Two kinds of registrations:
    - singleton: one instance for the process lifetime (storage connections)
    - factory: a new instance on every resolution (repositories, services),
      which gives each request its own scoped objects
    """

    def __init__(self) -> None:
        self.instances: Dict[Key, Any] = {}
        self.factories: Dict[Key, Callable[[], Any]] = {}

    def register_singleton(self, interface: Union[Type[TypeVarType], str], instance: TypeVarType) -> None:
        """Register a singleton instance (supports both types and string keys)"""
        self.instances[interface] = instance

    def register_factory(self, interface: Union[Type[TypeVarType], str], factory: Callable[[], TypeVarType]) -> None:
        """Register a factory function"""
        self.factories[interface] = factory

    def has(self, interface: Key) -> bool:
        """Check whether a singleton or factory is registered for the key"""
        return interface in self.instances or interface in self.factories

    def get(self, interface: Union[Type[TypeVarType], str]) -> TypeVarType:
        """Get an instance of the requested type or string key"""
        if interface in self.instances:
            return self.instances[interface]

        if interface in self.factories:
            return self.factories[interface]()

        raise LookupError(f"No registration found for {interface}")
