from hypothesis import given, strategies as st

from zb_core.codec import ByteArrayEncoder, project_text, string_to_byte_array, string_to_bytes
from zb_core.exceptions import LossyProjectionError


@given(st.text())
def test_one_byte_per_code_point(text: str) -> None:
    values = string_to_byte_array(text)
    assert len(values) == len(text)
    assert all(0 <= value <= 255 for value in values)


@given(st.text())
def test_deterministic(text: str) -> None:
    assert string_to_byte_array(text) == string_to_byte_array(text)
    assert string_to_bytes(text) == bytes(string_to_byte_array(text))


@given(st.text(alphabet=st.characters(max_codepoint=0xFF)))
def test_latin1_text_matches_latin1_codec(text: str) -> None:
    assert string_to_bytes(text) == text.encode("latin-1")


@given(st.integers(min_value=0x10000, max_value=0x10FFFF), st.integers(min_value=0, max_value=0x3FF))
def test_astral_output_ignores_low_surrogate(code_point: int, low_bits: int) -> None:
    sibling = (code_point & ~0x3FF) | low_bits
    high = 0xD800 + ((code_point - 0x10000) >> 10)
    assert string_to_byte_array(chr(code_point)) == [high & 0xFF]
    assert string_to_byte_array(chr(sibling)) == string_to_byte_array(chr(code_point))


@given(st.text())
def test_report_agrees_with_projection(text: str) -> None:
    report = project_text(text)
    assert report.values() == string_to_byte_array(text)
    assert report.is_lossless() == all(ord(char) <= 0xFF for char in text)


@given(st.text())
def test_strict_rejects_exactly_wide_text(text: str) -> None:
    encoder = ByteArrayEncoder(strict=True)
    wide = [index for index, char in enumerate(text) if ord(char) > 0xFF]
    try:
        values = encoder.encode(text)
    except LossyProjectionError as exc:
        assert wide and exc.index == wide[0]
    else:
        assert not wide
        assert values == list(text.encode("latin-1"))
