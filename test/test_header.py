import pytest

from figfont import InvalidHeader, Layout, NotEnoughData, PrintDirection
from figfont.header import decode_header, layout_from_old_layout


# ---------------------------------------------------------------------------
# Layout flags
# ---------------------------------------------------------------------------

def test_layout_bit_order():
    assert Layout(horizontal_equal=True).bits == 1
    assert Layout(horizontal_hardblank=True).bits == 32
    assert Layout(horizontal_kerning=True).bits == 64
    assert Layout(horizontal_smush=True).bits == 128
    assert Layout(vertical_equal=True).bits == 256
    assert Layout(vertical_bigx=True).bits == 4096
    assert Layout(vertical_kerning=True).bits == 8192
    assert Layout(vertical_smush=True).bits == 16384


def test_layout_from_bits():
    layout = Layout.from_bits(143)
    assert layout.enabled() == [
        "horizontal_equal",
        "horizontal_lowline",
        "horizontal_hierarchy",
        "horizontal_pair",
        "horizontal_smush",
    ]
    assert layout.bits == 143


def test_layout_all_bits():
    assert Layout.from_bits(32767).bits == 32767


@pytest.mark.parametrize("bits", [-1, 32768, 65536])
def test_layout_rejects_unknown_bits(bits):
    with pytest.raises(InvalidHeader):
        Layout.from_bits(bits)


def test_old_layout_negative():
    assert layout_from_old_layout(-1) == Layout()


def test_old_layout_zero():
    assert layout_from_old_layout(0) == Layout(horizontal_hardblank=True)


def test_old_layout_positive():
    layout = layout_from_old_layout(5)
    assert layout == Layout(horizontal_equal=True, horizontal_hierarchy=True, horizontal_smush=True)


def test_old_layout_keeps_low_five_bits():
    assert layout_from_old_layout(32).bits == 128
    assert layout_from_old_layout(47).bits == 15 | 128


# ---------------------------------------------------------------------------
# Header with comment block
# ---------------------------------------------------------------------------

def test_decode_header(stream):
    source = stream(b"flf2a$ 6 5 20 15 3 0 143 0\nfirst\nsecond\r\nthird\nrest\n")
    header = decode_header(source)
    assert header.hard_blank == b"$"
    assert header.height == 6
    assert header.baseline == 5
    assert header.max_length == 20
    assert header.old_layout == 15
    assert header.comment_lines == 3
    assert header.print_direction is PrintDirection.LEFT_TO_RIGHT
    assert header.layout.bits == 143
    assert header.codetag_count == 0
    assert header.comment == "first\nsecond\nthird"
    assert source.read() == b"rest\n"


def test_decode_header_without_comment(stream):
    header = decode_header(stream(b"flf2a$ 1 1 1 -1 0\n"))
    assert header.comment == ""
    assert header.layout == Layout()
    assert header.codetag_count is None


def test_comment_latin1(stream):
    header = decode_header(stream(b"flf2a$ 1 1 1 -1 1\nGr\xfc\xdfe\n"))
    assert header.comment == "Grüße"


def test_comment_block_too_short(stream):
    with pytest.raises(NotEnoughData):
        decode_header(stream(b"flf2a$ 6 5 20 15 3\nonly one\n"))


def test_comment_last_line_unterminated(stream):
    with pytest.raises(NotEnoughData):
        decode_header(stream(b"flf2a$ 6 5 20 15 1\ncomment"))


def test_header_needs_terminator(stream):
    with pytest.raises(NotEnoughData):
        decode_header(stream(b"flf2a$ 6 5 20 15 0"))


def test_five_fields(stream):
    with pytest.raises(InvalidHeader):
        decode_header(stream(b"flf2a$ 6 5 20 15\n"))
