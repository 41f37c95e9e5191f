import pytest

from ekaci.types import (
    InfoRequest,
    InfoResponse,
    ProtocolError,
    ServerStatus,
    decode_request,
    decode_response,
    encode_request,
    encode_response,
)


def test_info_request_wire_form():
    assert encode_request(InfoRequest()) == '{"type":"Info"}'


def test_info_response_wire_form():
    response = InfoResponse(ServerStatus.ACTIVE, "0.1.0")
    assert encode_response(response) == '{"type":"Info","status":"Active","version":"0.1.0"}'


def test_request_round_trip():
    assert decode_request(encode_request(InfoRequest())) == InfoRequest()


@pytest.mark.parametrize("status", list(ServerStatus))
def test_response_round_trip(status):
    response = InfoResponse(status, "9.9.9")
    assert decode_response(encode_response(response)) == response


def test_decode_accepts_bytes():
    assert decode_request(encode_request(InfoRequest()).encode()) == InfoRequest()


def test_extra_fields_are_ignored():
    text = '{"type":"Info","status":"Dead","version":"1","extra":3}'
    assert decode_response(text) == InfoResponse(ServerStatus.DEAD, "1")


@pytest.mark.parametrize(
    "text",
    ["not json", "[]", "{}", '{"type":"Status"}', '{"type":1}'],
)
def test_bad_requests(text):
    with pytest.raises(ProtocolError):
        decode_request(text)


@pytest.mark.parametrize(
    "text",
    [
        '{"type":"Info","version":"1"}',
        '{"type":"Info","status":"Active"}',
        '{"type":"Info","status":"Sleeping","version":"1"}',
        '{"type":"Info","status":"Active","version":1}',
        '{"type":"Other","status":"Active","version":"1"}',
        '{"status":"Active","version":"1"}',
    ],
)
def test_bad_responses(text):
    with pytest.raises(ProtocolError):
        decode_response(text)


def test_encode_rejects_foreign_objects():
    with pytest.raises(TypeError):
        encode_request("Info")
    with pytest.raises(TypeError):
        encode_response(InfoRequest())