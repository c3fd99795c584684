import inspect
from typing import Any, TypeVar, get_type_hints

T = TypeVar("T")


class Container:
    """Constructor-based DI container used to build metrics backends.

    Registered instances are injected into constructor parameters whose type
    hint matches a registration. Parameters with a default value are left to
    their default when nothing is registered for them.
    """

    def __init__(self) -> None:
        self._registry: dict[type, Any] = {}

    def register_instance(self, type_key: type, instance: Any) -> None:
        """Register a pre-built instance keyed by its type."""
        self._registry[type_key] = instance

    def resolve(self, cls: type[T]) -> T:
        """Instantiate *cls* by injecting registered dependencies into its constructor."""
        try:
            hints = get_type_hints(cls.__init__)
        except Exception as exc:
            raise TypeError(f"Cannot read type hints for {cls.__name__}.__init__: {exc}") from exc

        hints.pop("return", None)

        sig = inspect.signature(cls.__init__)
        kwargs: dict[str, Any] = {}
        for name, param in sig.parameters.items():
            if name == "self" or param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
                continue
            hint = hints.get(name)
            if hint is not None and hint in self._registry:
                kwargs[name] = self._registry[hint]
                continue
            if param.default is not param.empty:
                continue
            if hint is None:
                raise TypeError(
                    f"Parameter '{name}' of {cls.__name__}.__init__ has no type hint"
                )
            hint_name = getattr(hint, "__name__", repr(hint))
            raise TypeError(
                f"No registration found for type {hint_name!r} "
                f"(parameter '{name}' of {cls.__name__}.__init__)"
            )

        return cls(**kwargs)
