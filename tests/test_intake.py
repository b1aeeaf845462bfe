import pytest

from geojson_compare.errors import InvalidGeoJSONError, UnsupportedFileTypeError
from geojson_compare.intake import (
    decode_payload,
    is_supported_filename,
    load_payload,
    validate_geojson,
)


def test_supported_filenames_are_case_insensitive() -> None:
    assert is_supported_filename("parcels.geojson")
    assert is_supported_filename("PARCELS.JSON")
    assert not is_supported_filename("parcels.shp")
    assert not is_supported_filename("geojson")
    assert is_supported_filename("roads.topojson", extensions=(".topojson",))


def test_decode_payload_drops_bom_and_replaces_invalid_bytes() -> None:
    assert decode_payload(b'\xef\xbb\xbf{"type":"Point"}') == '{"type":"Point"}'
    assert decode_payload(b"\xff") == "\ufffd"
    assert decode_payload("Zürich".encode()) == "Zürich"


def test_validate_geojson_returns_top_level_type() -> None:
    assert validate_geojson('{"type":"FeatureCollection","features":[]}') == "FeatureCollection"


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("not json", "Invalid JSON format"),
        ('{"features":[]}', 'Invalid GeoJSON: missing "type" property'),
        ("[]", 'Invalid GeoJSON: missing "type" property'),
        ('{"type":"Topology"}', 'Invalid GeoJSON: unsupported type "Topology"'),
    ],
)
def test_validate_geojson_rejects_invalid_documents(text: str, message: str) -> None:
    with pytest.raises(InvalidGeoJSONError) as excinfo:
        validate_geojson(text)

    assert str(excinfo.value) == message


def test_load_payload_rejects_unsupported_extension() -> None:
    with pytest.raises(UnsupportedFileTypeError, match=r"\.geojson or \.json"):
        load_payload("parcels.csv", b'{"type":"Point"}')


def test_load_payload_decodes_and_validates() -> None:
    payload = load_payload("point.geojson", b'{"type":"Point","coordinates":[0,0]}')

    assert payload.filename == "point.geojson"
    assert payload.content == '{"type":"Point","coordinates":[0,0]}'
    assert payload.byte_size == 36
    assert payload.geojson_type == "Point"


def test_load_payload_can_skip_validation() -> None:
    payload = load_payload("notes.json", b"not json", validate=False)

    assert payload.content == "not json"
    assert payload.geojson_type is None


def test_validate_geojson_escapes_lone_surrogate_in_message() -> None:
    with pytest.raises(InvalidGeoJSONError) as excinfo:
        validate_geojson('{"type":"\\udc80"}')

    message = str(excinfo.value)
    assert message == 'Invalid GeoJSON: unsupported type "\\udc80"'
    assert message.encode("utf-8")
