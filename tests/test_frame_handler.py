import pytest

from prt7.protocol import FrameHandler, apply
from prt7.protocol.data import Payload, Rotor
from prt7.protocol.frame import LoadFrame, MapFrame


@pytest.fixture
def rotor():
    return Rotor()


@pytest.fixture
def payload():
    return Payload()


def test_load_decodes_and_appends(rotor, payload):
    status = apply(LoadFrame("H"), rotor, payload)
    assert payload.render_final() == "H"
    assert status == "Frame [L,H] -> fragment 'H' decoded as 'H'. Message: [H]"


def test_load_uses_current_rotation(rotor, payload):
    rotor.rotate(2)
    status = apply(LoadFrame("a"), rotor, payload)
    assert payload.render_final() == "C"
    assert "decoded as 'C'" in status


def test_load_space_shows_token(rotor, payload):
    status = apply(LoadFrame(" "), rotor, payload)
    assert payload.render_final() == " "
    assert status.startswith("Frame [L,Space]")
    assert status.endswith("Message: [ ]")


def test_map_rotates_and_reports(rotor, payload):
    status = apply(MapFrame(-2), rotor, payload)
    assert rotor.offset == 24
    assert len(payload) == 0
    assert status == (
        "Frame [M,-2] -> rotating rotor -2 (effective: +24). "
        "Rotor state: YZABCDEFGHIJKLMNOPQRSTUVWX"
    )


def test_map_status_without_rotor_state(rotor, payload):
    handler = FrameHandler(rotor, payload, show_rotor=False)
    assert handler.apply(MapFrame(28)) == "Frame [M,28] -> rotating rotor +28 (effective: +2)"


def test_unknown_object_is_rejected(rotor, payload):
    with pytest.raises(TypeError):
        apply("L,A", rotor, payload)
    assert rotor.offset == 0
    assert len(payload) == 0


def test_payload_grows_by_one_per_load(rotor, payload):
    frames = [LoadFrame("H"), MapFrame(3), LoadFrame("I"), MapFrame(-3), LoadFrame(" ")]
    handler = FrameHandler(rotor, payload)
    sizes = []
    for frame in frames:
        handler.apply(frame)
        sizes.append(len(payload))
    assert sizes == [1, 1, 2, 2, 3]
    assert payload.render_final() == "HL "
