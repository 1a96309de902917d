from __future__ import annotations
import numbers
from typing import Any, ClassVar, Iterator, Optional, Sequence, Tuple, cast
from boundednumbers.functions import clamp
from ..types.color_types import Scalar
from ..utils import round_half_up


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[str]
    _type:      ClassVar[type]
    # (low, high) per channel; None leaves the channel unbounded
    bounds:     ClassVar[Tuple[Optional[Tuple[Scalar, Scalar]], ...]]
    null_value: ClassVar[Tuple[Scalar, ...]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Any) -> None:
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode == self.mode:
                value = value.value
            else:
                value = self._convert_from(value).value
        else:
            value = self._prepare(value)

        values = tuple(cast(Sequence[Scalar], value))
        if len(values) != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.num_channels} channels, got {len(values)}")

        # type enforcement + clamp
        self._value = tuple(
            self._coerce(v, bound) for v, bound in zip(values, self.bounds)
        )

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ HOOKS ------------------
    def _prepare(self, value: Any) -> Any:
        """Turn a non-ColorBase input into a channel sequence."""
        return value

    def _convert_from(self, other: ColorBase) -> ColorBase:
        raise TypeError(f"Cannot build {self.mode} from {other.mode}")

    def _coerce(self, v: Scalar, bound: Optional[Tuple[Scalar, Scalar]]) -> Scalar:
        if self._type is int:
            # integers of any size saturate without a float round trip
            v = int(v) if isinstance(v, numbers.Integral) else round_half_up(float(v))
        else:
            v = float(v)
        if bound is not None:
            v = clamp(v, bound[0], bound[1])
        return self._type(v)

    @classmethod
    def coerce(cls, value: Any):
        """Return ``value`` if it already is an instance, otherwise build one."""
        if isinstance(value, cls):
            return value
        return cls(value)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Scalar, ...]:
        return self._value

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __getitem__(self, index: int) -> Scalar:
        return self._value[index]

    def __len__(self) -> int:
        return self.num_channels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"
