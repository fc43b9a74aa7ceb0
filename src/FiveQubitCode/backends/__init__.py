from typing import Optional

from .base import QuantumBackend, QubitRegister
from .statevector import StateVectorBackend
from .stim_backend import StimBackend

BACKENDS = {
	StimBackend.name: StimBackend,
	StateVectorBackend.name: StateVectorBackend,
}


def make_backend(name: str = "stim", seed: Optional[int] = None) -> QuantumBackend:
	"""Instantiate a backend by name ('stim' or 'statevector')."""
	try:
		cls = BACKENDS[name.lower()]
	except KeyError:
		raise ValueError(f"Unknown backend '{name}'. Available: {sorted(BACKENDS)}") from None
	return cls(seed=seed)


__all__ = [
	"QuantumBackend",
	"QubitRegister",
	"StimBackend",
	"StateVectorBackend",
	"BACKENDS",
	"make_backend",
]
