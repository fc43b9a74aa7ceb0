"""
base.py
=======
Abstract quantum backend and the register handle it hands out.

The correction pipeline never touches amplitudes or tableaux directly; it
only issues gate and Pauli-product measurement requests through this
interface. Concrete backends live next to this module.

Core API
--------
class QuantumBackend:
    allocate(n) -> QubitRegister
    apply_gate(register, gate) -> None
    measure_pauli_product(register, pauli_string) -> int   (1 <=> eigenvalue -1)
    reset(register) -> None
    state_vector(register) -> np.ndarray                   (debug dump)

Helpers built on top: apply_pauli, measure, allocated (context manager).
"""

from __future__ import annotations

import abc
import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from itertools import count
from typing import Any, Iterator, Union

import numpy as np

from ..gates.circuit import Gate, GateKind
from ..pauli import Pauli, PauliString

logger = logging.getLogger(__name__)

_register_ids = count()


@dataclass(slots=True)
class QubitRegister:
    """Handle to ``size`` qubits owned by one backend.

    ``state`` is backend-private (a stim simulator, an amplitude array, ...).
    """

    size: int
    state: Any = field(repr=False)
    backend_name: str = ""
    released: bool = False
    uid: int = field(default_factory=lambda: next(_register_ids))

    def check_index(self, qubit: int) -> None:
        if not 0 <= qubit < self.size:
            raise ValueError(f"Qubit index {qubit} out of range for register of size {self.size}.")

    def check_alive(self) -> None:
        if self.released:
            raise ValueError(f"Register #{self.uid} has been released.")


class QuantumBackend(abc.ABC):
    """Gate / measurement engine behind a fixed-size qubit register."""

    name: str = "abstract"

    # ------------------------------------------------------------------
    # Backend-specific primitives
    # ------------------------------------------------------------------
    @abc.abstractmethod
    def _new_state(self, n: int) -> Any:
        """Return fresh backend state for ``n`` qubits in |0...0>."""

    @abc.abstractmethod
    def _apply(self, register: QubitRegister, gate: Gate) -> None:
        ...

    @abc.abstractmethod
    def _measure(self, register: QubitRegister, observable: PauliString) -> int:
        ...

    @abc.abstractmethod
    def _reset(self, register: QubitRegister) -> None:
        ...

    @abc.abstractmethod
    def _state_vector(self, register: QubitRegister) -> np.ndarray:
        ...

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def allocate(self, n: int) -> QubitRegister:
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise ValueError(f"Register size must be a positive int, got {n!r}.")
        register = QubitRegister(size=n, state=self._new_state(n), backend_name=self.name)
        logger.debug("%s: allocated register #%d with %d qubits", self.name, register.uid, n)
        return register

    def apply_gate(self, register: QubitRegister, gate: Gate) -> None:
        register.check_alive()
        for q in gate.qubits:
            register.check_index(q)
        logger.debug("%s: register #%d <- %s", self.name, register.uid, gate)
        self._apply(register, gate)

    def measure_pauli_product(self, register: QubitRegister, observable: PauliString) -> int:
        """Projectively measure a multi-qubit Pauli product; 1 means eigenvalue -1."""
        register.check_alive()
        if len(observable) != register.size:
            raise ValueError(f"Observable {observable} does not match register size {register.size}.")
        return int(self._measure(register, observable))

    def reset(self, register: QubitRegister) -> None:
        """Drive every qubit of ``register`` to |0>."""
        register.check_alive()
        self._reset(register)
        logger.debug("%s: reset register #%d", self.name, register.uid)

    def release(self, register: QubitRegister) -> None:
        if register.released:
            return
        self.reset(register)
        register.released = True

    def state_vector(self, register: QubitRegister) -> np.ndarray:
        """Little-endian amplitudes (qubit 0 is the least significant index bit)."""
        register.check_alive()
        return self._state_vector(register)

    # ------------------------------------------------------------------
    # Convenience wrappers
    # ------------------------------------------------------------------
    def apply_pauli(self, register: QubitRegister, qubit: int, pauli: Union[str, Pauli]) -> None:
        p = Pauli.from_label(pauli)
        if p == Pauli.I:
            return
        self.apply_gate(register, Gate(GateKind(p.name), (qubit,)))

    def measure(self, register: QubitRegister, qubit: int, basis: str = "Z") -> int:
        """Single-qubit measurement in the X, Y or Z basis."""
        b = Pauli.from_label(basis)
        if b == Pauli.I:
            raise ValueError("Measurement basis must be X, Y or Z.")
        register.check_index(qubit)
        return self.measure_pauli_product(register, PauliString.single(register.size, qubit, b))

    @contextmanager
    def allocated(self, n: int) -> Iterator[QubitRegister]:
        """Allocate a register and release it (reset to |0...0>) on exit."""
        register = self.allocate(n)
        try:
            yield register
        finally:
            self.release(register)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ["QubitRegister", "QuantumBackend"]
