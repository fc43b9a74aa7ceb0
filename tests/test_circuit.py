import pytest
import stim

from FiveQubitCode import (
    DECODER_CIRCUIT,
    ENCODER_CIRCUIT,
    LOGICAL_QUBIT,
    CodeConsistencyError,
    Encoder,
    Gate,
    GateKind,
    StateVectorBackend,
)
from FiveQubitCode.core.encoder import check_encoder
from FiveQubitCode.gates.circuit import gate, invert_circuit, to_stim_circuit


def test_encoder_shape():
    assert len(ENCODER_CIRCUIT) == 14
    assert LOGICAL_QUBIT == 4
    assert {g.kind for g in ENCODER_CIRCUIT} == {GateKind.H, GateKind.S, GateKind.CX, GateKind.CY, GateKind.CZ}


def test_decoder_is_reversed_inverse():
    assert len(DECODER_CIRCUIT) == len(ENCODER_CIRCUIT)
    assert DECODER_CIRCUIT[0] == gate("CY", 3, 4)
    assert DECODER_CIRCUIT[-1] == gate("H", 0)
    assert gate("S_DAG", 0) in DECODER_CIRCUIT and gate("S_DAG", 3) in DECODER_CIRCUIT
    assert GateKind.S not in {g.kind for g in DECODER_CIRCUIT}
    assert invert_circuit(DECODER_CIRCUIT) == ENCODER_CIRCUIT


def test_gate_inverse():
    assert gate("S", 2).inverse() == gate("S_DAG", 2)
    assert gate("S_DAG", 2).inverse() == gate("S", 2)
    for name in ("H", "X", "Y", "Z"):
        assert gate(name, 1).inverse() == gate(name, 1)
    assert gate("CX", 0, 1).inverse() == gate("CX", 0, 1)


def test_gate_validation():
    with pytest.raises(ValueError):
        gate("CX", 1)
    with pytest.raises(ValueError):
        gate("H", 0, 1)
    with pytest.raises(ValueError):
        gate("CZ", 2, 2)
    with pytest.raises(ValueError):
        gate("H", -1)
    with pytest.raises(ValueError):
        gate("T", 0)
    with pytest.raises(TypeError):
        Gate("H", (0,))


def test_gate_str():
    assert str(gate("cy", 3, 4)) == "CY 3 4"
    assert str(gate("S_DAG", 0)) == "S_DAG 0"


def test_encoder_maps_z_ancillas_onto_code_stabilizers():
    tableau = stim.Tableau.from_circuit(to_stim_circuit(ENCODER_CIRCUIT))
    assert tableau.z_output(0) == stim.PauliString("+YZ_ZY")
    assert tableau.z_output(1) == stim.PauliString("+_XZZX")
    assert tableau.z_output(2) == stim.PauliString("+ZZX_X")
    assert tableau.z_output(3) == stim.PauliString("+Z_ZYY")


def test_stim_round_trip_is_identity():
    circuit = to_stim_circuit(ENCODER_CIRCUIT) + to_stim_circuit(DECODER_CIRCUIT)
    assert stim.Tableau.from_circuit(circuit) == stim.Tableau(5)


def test_encoder_maps_logical_operators():
    tableau = stim.Tableau.from_circuit(to_stim_circuit(ENCODER_CIRCUIT))
    assert tableau.x_output(4) == stim.PauliString("+Z__ZX")
    assert tableau.z_output(4) == stim.PauliString("+ZZZZZ")


def test_encoder_agrees_with_code():
    check_encoder()


@pytest.mark.parametrize(
    "circuit",
    [
        ENCODER_CIRCUIT + (gate("Z", 4),),
        ENCODER_CIRCUIT[:-1],
        ENCODER_CIRCUIT[:9],
    ],
    ids=["phase-flipped", "missing-last-gate", "truncated"],
)
def test_wrong_encoder_rejected(circuit):
    with pytest.raises(CodeConsistencyError):
        check_encoder(circuit)
    with pytest.raises(CodeConsistencyError):
        Encoder(StateVectorBackend(), circuit)
