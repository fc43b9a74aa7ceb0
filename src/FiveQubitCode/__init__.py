from .pauli import Pauli, PauliWithPhase, PauliString
from .core.code import (
	STABILIZER_GENERATORS,
	LOGICAL_X,
	LOGICAL_Z,
	CodeConsistencyError,
	ErrorEvent,
	Syndrome,
	syndrome_of,
)
from .gates.circuit import Gate, GateKind, ENCODER_CIRCUIT, DECODER_CIRCUIT, LOGICAL_QUBIT
from .backends import QuantumBackend, QubitRegister, StimBackend, StateVectorBackend, make_backend
from .core.randomness import RandomnessProvider, SeededRandomness, ScriptedRandomness
from .core.encoder import Encoder
from .core.error_model import ErrorChannel
from .core.syndrome import SyndromeExtractor
from .core.corrector import Corrector
from .decoder.lookup_decoder import SyndromeDecoder, SYNDROME_TABLE
from .core.correction_round import CorrectionRound, RoundResult, PipelineStage

__all__ = [
	"Pauli",
	"PauliWithPhase",
	"PauliString",
	"STABILIZER_GENERATORS",
	"LOGICAL_X",
	"LOGICAL_Z",
	"CodeConsistencyError",
	"ErrorEvent",
	"Syndrome",
	"syndrome_of",
	"Gate",
	"GateKind",
	"ENCODER_CIRCUIT",
	"DECODER_CIRCUIT",
	"LOGICAL_QUBIT",
	"QuantumBackend",
	"QubitRegister",
	"StimBackend",
	"StateVectorBackend",
	"make_backend",
	"RandomnessProvider",
	"SeededRandomness",
	"ScriptedRandomness",
	"Encoder",
	"ErrorChannel",
	"SyndromeExtractor",
	"Corrector",
	"SyndromeDecoder",
	"SYNDROME_TABLE",
	"CorrectionRound",
	"RoundResult",
	"PipelineStage",
]
