from .default import value_or_default, resolve_stream
from .num_utils import round_half_up, np_round_half_up

__all__ = ["value_or_default", "resolve_stream", "round_half_up", "np_round_half_up"]
