"""
stim_backend.py
===============
Stabilizer-tableau backend on top of :class:`stim.TableauSimulator`.

Every gate of the encoder is Clifford, so the whole correction round stays
inside the stabilizer formalism. Pauli-product measurements use
``TableauSimulator.measure_observable`` which projects onto the joint
eigenspace of the full product without touching the individual qubits.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
import stim

from ..gates.circuit import Gate, to_stim_circuit
from ..pauli import PauliString
from .base import QuantumBackend, QubitRegister


class StimBackend(QuantumBackend):
    """Backend whose registers each own an independent ``stim.TableauSimulator``."""

    name = "stim"

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._allocations = 0

    def _new_state(self, n: int) -> stim.TableauSimulator:
        if self.seed is None:
            sim = stim.TableauSimulator()
        else:
            # Distinct but reproducible stream per register.
            sim = stim.TableauSimulator(seed=self.seed + self._allocations)
        self._allocations += 1
        sim.set_num_qubits(n)
        return sim

    def _apply(self, register: QubitRegister, gate: Gate) -> None:
        register.state.do_circuit(to_stim_circuit([gate]))

    def _measure(self, register: QubitRegister, observable: PauliString) -> int:
        return int(register.state.measure_observable(observable.to_stim()))

    def _reset(self, register: QubitRegister) -> None:
        register.state.reset(*range(register.size))

    def _state_vector(self, register: QubitRegister) -> np.ndarray:
        return np.asarray(register.state.state_vector(endian="little"), dtype=np.complex128)

    def __repr__(self) -> str:
        return f"StimBackend(seed={self.seed})"


__all__ = ["StimBackend"]
