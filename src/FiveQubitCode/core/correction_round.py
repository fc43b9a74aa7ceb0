"""
correction_round.py
===================
Provides :class:`CorrectionRound`, one full error-correction cycle of the
5-qubit code on a freshly allocated register.

Responsibilities
----------------
• Prepare the logical input (|0>, |1>, |+>, |->) on qubit 4.
• Run encode -> error -> syndrome -> decode -> correct -> inverse encode.
• Read out the logical qubit and the four ancillas, then release the register
  in |00000> on every path.
• Record the stages that were taken and, optionally, state-vector snapshots.

Stage flow
----------
    ENCODED -> [CORRUPTED] -> SYNDROME_MEASURED -> CORRECTED | UNCHANGED
            -> DECODED -> RESET

CORRECTED is taken iff the decoder returns an error event. CORRUPTED is
skipped when no error is injected.

Core API
--------
class CorrectionRound:
    backend: QuantumBackend
    randomness: RandomnessProvider
    def run(logical_state='0', error=None, inject=True, trace_states=False) -> RoundResult
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

import numpy as np

from ..backends.base import QuantumBackend, QubitRegister
from ..decoder.lookup_decoder import SyndromeDecoder
from ..gates.circuit import LOGICAL_QUBIT, gate
from .code import N_QUBITS, ErrorEvent, Syndrome
from .corrector import Corrector
from .encoder import Encoder
from .error_model import ErrorChannel
from .randomness import RandomnessProvider, SeededRandomness
from .syndrome import SyndromeExtractor

logger = logging.getLogger(__name__)

# label -> (canonical label, readout basis, expected readout bit)
_LOGICAL_STATES: Dict[str, Tuple[str, str, int]] = {
    '0': ('0', 'Z', 0), 'zero': ('0', 'Z', 0),
    '1': ('1', 'Z', 1), 'one': ('1', 'Z', 1),
    '+': ('+', 'X', 0), 'plus': ('+', 'X', 0),
    '-': ('-', 'X', 1), 'minus': ('-', 'X', 1),
}

LOGICAL_STATES = ('0', '1', '+', '-')


def parse_logical_state(state: str) -> Tuple[str, str, int]:
    """Return ``(label, readout basis, expected bit)`` for a logical state label."""
    try:
        return _LOGICAL_STATES[str(state).strip().lower()]
    except KeyError:
        raise ValueError(f"Unsupported logical state '{state}'. Supported: {LOGICAL_STATES}") from None


class PipelineStage(Enum):
    ENCODED = "encoded"
    CORRUPTED = "corrupted"
    SYNDROME_MEASURED = "syndrome_measured"
    CORRECTED = "corrected"
    UNCHANGED = "unchanged"
    DECODED = "decoded"
    RESET = "reset"


@dataclass(slots=True)
class RoundResult:
    logical_state: str
    injected: Optional[ErrorEvent]
    syndrome: Syndrome
    decoded: Optional[ErrorEvent]
    logical_out: int
    expected: int
    ancilla_bits: Tuple[int, ...]
    stages: List[PipelineStage] = field(default_factory=list)
    states: Dict[PipelineStage, np.ndarray] = field(default_factory=dict, repr=False)

    @property
    def corrected(self) -> bool:
        return self.decoded is not None

    @property
    def success(self) -> bool:
        """Logical value restored and ancillas returned to |0000>."""
        return self.logical_out == self.expected and not any(self.ancilla_bits)

    def summary(self) -> str:
        injected = self.injected if self.injected is not None else "none"
        decoded = self.decoded if self.decoded is not None else "none"
        return (
            f"|{self.logical_state}_L>: injected={injected} syndrome={self.syndrome} "
            f"decoded={decoded} readout={self.logical_out} ancillas={self.ancilla_bits} "
            f"success={self.success}"
        )


@dataclass(slots=True)
class CorrectionRound:
    """Single-shot 5-qubit code correction cycle against an injected backend."""

    backend: QuantumBackend
    randomness: RandomnessProvider = field(default_factory=SeededRandomness)
    encoder: Encoder = field(init=False)
    channel: ErrorChannel = field(init=False)
    extractor: SyndromeExtractor = field(init=False)
    decoder: SyndromeDecoder = field(init=False)
    corrector: Corrector = field(init=False)

    def __post_init__(self) -> None:
        self.encoder = Encoder(self.backend)
        self.channel = ErrorChannel(self.backend, self.randomness)
        self.extractor = SyndromeExtractor(self.backend)
        self.decoder = SyndromeDecoder()
        self.corrector = Corrector(self.backend)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def run(
        self,
        logical_state: str = '0',
        error: Optional[ErrorEvent] = None,
        inject: bool = True,
        trace_states: bool = False,
    ) -> RoundResult:
        """Run one round.

        ``error`` fixes the injected event; otherwise one is drawn from the
        randomness provider when ``inject`` is True. ``inject=False`` with no
        ``error`` runs the clean path.
        """
        label, basis, expected = parse_logical_state(logical_state)
        stages: List[PipelineStage] = []
        states: Dict[PipelineStage, np.ndarray] = {}

        def mark(stage: PipelineStage, register: QubitRegister) -> None:
            stages.append(stage)
            if trace_states:
                states[stage] = self.backend.state_vector(register)

        with self.backend.allocated(N_QUBITS) as register:
            self._prepare(register, label)
            self.encoder.encode(register)
            mark(PipelineStage.ENCODED, register)

            injected: Optional[ErrorEvent] = None
            if error is not None:
                injected = self.channel.apply_error(register, error)
            elif inject:
                injected = self.channel.inject_error(register)
            if injected is not None:
                mark(PipelineStage.CORRUPTED, register)

            syndrome = self.extractor.measure_syndrome(register)
            mark(PipelineStage.SYNDROME_MEASURED, register)

            decoded = self.decoder.decode_syndrome(syndrome.value)
            if decoded is not None:
                self.corrector.apply_correction(register, decoded)
                mark(PipelineStage.CORRECTED, register)
            else:
                mark(PipelineStage.UNCHANGED, register)

            self.encoder.decode(register)
            mark(PipelineStage.DECODED, register)

            logical_out = self.backend.measure(register, LOGICAL_QUBIT, basis)
            ancilla_bits = tuple(
                self.backend.measure(register, q) for q in range(N_QUBITS) if q != LOGICAL_QUBIT
            )
        stages.append(PipelineStage.RESET)

        result = RoundResult(
            logical_state=label,
            injected=injected,
            syndrome=syndrome,
            decoded=decoded,
            logical_out=logical_out,
            expected=expected,
            ancilla_bits=ancilla_bits,
            stages=stages,
            states=states,
        )
        logger.debug(result.summary())
        return result

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _prepare(self, register: QubitRegister, label: str) -> None:
        """Put qubit 4 into the requested single-qubit state."""
        if label in ('1', '-'):
            self.backend.apply_gate(register, gate("X", LOGICAL_QUBIT))
        if label in ('+', '-'):
            self.backend.apply_gate(register, gate("H", LOGICAL_QUBIT))

    def __repr__(self) -> str:
        return f"CorrectionRound(backend={self.backend!r})"


__all__ = [
    "CorrectionRound",
    "RoundResult",
    "PipelineStage",
    "LOGICAL_STATES",
    "parse_logical_state",
]
