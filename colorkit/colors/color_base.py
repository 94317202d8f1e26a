from __future__ import annotations
from typing import Any, ClassVar, Protocol, Tuple, runtime_checkable


@runtime_checkable
class Color(Protocol):
    """Capability shared by every color model."""

    def is_white(self) -> bool:
        ...

    def is_black(self) -> bool:
        ...


class ColorBase:
    """
    Immutable three-channel value.

    Subclasses declare their channel slots and fill them through ``_init_channels``;
    any assignment after that raises ``AttributeError``.
    """
    __slots__ = ('_is_frozen',)

    num_channels: ClassVar[int] = 3
    channel_names: ClassVar[Tuple[str, str, str]]

    def __setattr__(self, name, value):
        """Block attribute changes after initialisation finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def _init_channels(self, *values: Any) -> None:
        # safe assignment; __setattr__ still allows it before freezing
        for name, value in zip(self.channel_names, values):
            super().__setattr__('_' + name, value)

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    def as_tuple(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, '_' + name) for name in self.channel_names)

    def __iter__(self):
        return iter(self.as_tuple())

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index: int):
        return self.as_tuple()[index]

    def __reduce__(self):
        return (self.__class__._from_channels, self.as_tuple())

    @classmethod
    def _from_channels(cls, *values: Any):
        """Build an instance from already-normalised channel values, skipping validation."""
        obj = cls.__new__(cls)
        obj._init_channels(*values)
        return obj

    def _replace_channel(self, name: str, value: Any):
        values = [value if n == name else v for n, v in zip(self.channel_names, self.as_tuple())]
        return self._from_channels(*values)
