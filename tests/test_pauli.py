import pytest

from FiveQubitCode import Pauli, PauliString, PauliWithPhase


def test_basic_products():
    xy = Pauli.X * Pauli.Y
    assert isinstance(xy, PauliWithPhase)
    assert xy.phase == 1j
    assert xy.op == Pauli.Z
    assert str(xy) == "iZ"

    yx = Pauli.Y * Pauli.X
    assert yx.phase == -1j
    assert yx.op == Pauli.Z
    assert str(yx) == "-iZ"

    xx = Pauli.X * Pauli.X
    assert xx.phase == 1
    assert xx.op == Pauli.I
    assert str(xx) == "I"


def test_chain_multiplication():
    prod = (Pauli.X * Pauli.Y) * Pauli.Z  # (iZ) * Z = iI
    assert prod.phase == 1j
    assert prod.op == Pauli.I
    assert str(prod) == "iI"


def test_involution():
    for p in (Pauli.X, Pauli.Y, Pauli.Z):
        sq = p * p
        assert sq.op == Pauli.I and sq.phase == 1


def test_commutation():
    assert Pauli.X.commutes_with(Pauli.X)
    assert Pauli.X.commutes_with(Pauli.I)
    assert not Pauli.X.commutes_with(Pauli.Z)
    assert not Pauli.Y.commutes_with(Pauli.X)
    assert Pauli.Z.commutes_with(Pauli.Z)


def test_phase_symmetry():
    # XZ = -iY and ZX = iY
    xz = Pauli.X * Pauli.Z
    zx = Pauli.Z * Pauli.X
    assert xz.op == Pauli.Y and zx.op == Pauli.Y
    assert xz.phase == -1j
    assert zx.phase == 1j


def test_from_label():
    assert Pauli.from_label("x") == Pauli.X
    assert Pauli.from_label("_") == Pauli.I
    assert Pauli.from_label(Pauli.Y) == Pauli.Y
    with pytest.raises(ValueError):
        Pauli.from_label("Q")
    with pytest.raises(TypeError):
        Pauli.from_label(3)


def test_pauli_string_parse_and_str():
    g = PauliString.from_str("XZZXI")
    assert str(g) == "+XZZXI"
    assert g.weight == 4
    assert g.support() == (0, 1, 2, 3)
    assert PauliString.from_str("-X_Z").sign == -1
    assert str(PauliString.single(5, 3, "Y")) == "+IIIYI"


def test_pauli_string_commutation():
    g4 = PauliString.from_str("XZZXI")
    g3 = PauliString.from_str("IXZZX")
    assert g4.commutes_with(g3)
    assert not g4.commutes_with(PauliString.single(5, 0, "Z"))
    assert g4.commutes_with(PauliString.single(5, 0, "X"))
    with pytest.raises(ValueError):
        g4.commutes_with(PauliString.from_str("XX"))


def test_pauli_string_products():
    g1 = PauliString.from_str("ZXIXZ")
    g3 = PauliString.from_str("IXZZX")
    g4 = PauliString.from_str("XZZXI")
    assert g1 * g3 == PauliString.from_str("+ZIZYY")
    assert PauliString.product([g4, g1, g3]) == PauliString.from_str("+YZIZY")
    with pytest.raises(ValueError):
        PauliString.from_str("XXXXX") * PauliString.from_str("ZZZZZ")


def test_pauli_string_to_stim():
    assert str(PauliString.from_str("-XIZ").to_stim()) == "-X_Z"
    assert str(PauliString.from_str("ZXIXZ").to_stim()) == "+ZX_XZ"
