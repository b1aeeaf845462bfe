from geojson_compare.text import display_text


def test_display_text_keeps_encodable_text() -> None:
    assert display_text("Zürich ✓") == "Zürich ✓"
    assert display_text("") == ""


def test_display_text_escapes_lone_surrogates() -> None:
    rendered = display_text("a\ud800b")

    assert rendered == "a\\ud800b"
    assert rendered.encode("utf-8") == b"a\\ud800b"
