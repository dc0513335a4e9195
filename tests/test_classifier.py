import pytest

from prompts import LASH_TYPE_RESPONSE_FORMAT
from services.classifier import LashClassifier, parse_lash_type


@pytest.mark.parametrize("reply, expected", [
    ('{"type": "natural"}', "natural"),
    ('{"type": "extensions"}', "extensions"),
    ('```json\n{"type": "Natural"}\n```', "natural"),
])
def test_classify_reads_type(stub_gateway, image, reply, expected):
    assert LashClassifier(stub_gateway(reply)).classify(image) == expected


@pytest.mark.parametrize("reply", [
    "not json at all",
    '{"kind": "natural"}',
    '{"type": "lift"}',
    '{"type": 3}',
    "",
])
def test_classify_falls_back_to_extensions(stub_gateway, image, reply):
    assert LashClassifier(stub_gateway(reply)).classify(image) == "extensions"


def test_classify_swallows_gateway_failure(stub_gateway, image):
    gateway = stub_gateway(ConnectionError("network down"))
    assert LashClassifier(gateway).classify(image) == "extensions"


def test_classify_makes_one_structured_call(stub_gateway, image):
    gateway = stub_gateway('{"type": "natural"}')
    LashClassifier(gateway, model="test-model").classify(image)

    assert len(gateway.calls) == 1
    call = gateway.calls[0]
    assert call["model"] == "test-model"
    assert call["image"] is image
    assert call["temperature"] == 0
    assert call["response_format"] == LASH_TYPE_RESPONSE_FORMAT
    schema = call["response_format"]["json_schema"]["schema"]
    assert schema["required"] == ["type"]
    assert schema["properties"]["type"]["enum"] == ["natural", "extensions"]


def test_parse_lash_type_rejects_unknown_value():
    with pytest.raises(ValueError):
        parse_lash_type('{"type": "volume"}')
