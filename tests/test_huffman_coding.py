import pytest

from bit_utils import write_bit_string
from freq_utils import SymbolFreq
from huffman_coding import HuffmanCoding


def make_coder(tmp_path, text, name="source.txt"):
    path = tmp_path / name
    path.write_bytes(text.encode("utf-8"))
    return HuffmanCoding(str(path)).build()


def roundtrip(tmp_path, text):
    coder = make_coder(tmp_path, text)
    encoded = str(tmp_path / "source.huff")
    decoded = tmp_path / "decoded.txt"
    coder.encode(encoded)
    coder.decode(encoded, str(decoded))
    return decoded.read_bytes().decode("utf-8")


@pytest.mark.parametrize("text", [
    "ab",
    "aaaa",
    "abracadabra",
    "line one\nline two\r\n\ttabbed  spaces\n",
    "".join(chr(i) for i in range(128)),
    "The quick brown fox jumps over the lazy dog. " * 50,
])
def test_roundtrip(tmp_path, text):
    assert roundtrip(tmp_path, text) == text


def test_two_symbol_example(tmp_path):
    coder = make_coder(tmp_path, "ab")
    assert coder.sorted_char_freq_list == [SymbolFreq("a", 0.5), SymbolFreq("b", 0.5)]
    assert coder.encodings[ord("a")] == "0"
    assert coder.encodings[ord("b")] == "1"
    encoded = tmp_path / "ab.huff"
    assert coder.encode(str(encoded)) == 1
    assert encoded.read_bytes() == b"\x05"


def test_single_symbol_example(tmp_path):
    coder = make_coder(tmp_path, "aaaa")
    root = coder.huffman_root
    assert root.left.is_leaf() and root.right.is_leaf()
    assert coder.encodings[ord("a")] == "1"
    encoded = tmp_path / "a.huff"
    coder.encode(str(encoded))
    assert encoded.read_bytes() == b"\x1f"
    assert coder.decode(str(encoded), str(tmp_path / "a.txt")) == "aaaa"


def test_empty_input(tmp_path):
    coder = make_coder(tmp_path, "")
    assert coder.sorted_char_freq_list == []
    assert coder.huffman_root is None
    assert coder.encodings == [None] * 128
    encoded = tmp_path / "empty.huff"
    coder.encode(str(encoded))
    assert encoded.read_bytes() == b"\x01"
    decoded = tmp_path / "empty.txt"
    assert coder.decode(str(encoded), str(decoded)) == ""
    assert decoded.read_bytes() == b""


def test_accessors_return_copies(tmp_path):
    coder = make_coder(tmp_path, "hello")
    coder.encodings[ord("h")] = "broken"
    coder.sorted_char_freq_list.clear()
    assert coder.encodings[ord("h")] != "broken"
    assert len(coder.sorted_char_freq_list) == 4
    assert coder.file_name.endswith("source.txt")


def test_stages_must_run_in_order(tmp_path):
    path = tmp_path / "x.txt"
    path.write_text("xyz")
    coder = HuffmanCoding(str(path))
    with pytest.raises(RuntimeError):
        coder.make_tree()
    coder.make_sorted_list()
    with pytest.raises(RuntimeError):
        coder.make_encodings()
    with pytest.raises(RuntimeError):
        coder.encode(str(tmp_path / "x.huff"))


def test_missing_source(tmp_path):
    coder = HuffmanCoding(str(tmp_path / "missing.txt"))
    with pytest.raises(FileNotFoundError):
        coder.make_sorted_list()


def test_non_ascii_source(tmp_path):
    path = tmp_path / "utf8.txt"
    path.write_bytes("naïve".encode("utf-8"))
    with pytest.raises(ValueError):
        HuffmanCoding(str(path)).make_sorted_list()


def test_encode_unknown_character(tmp_path):
    coder = make_coder(tmp_path, "ab")
    with pytest.raises(KeyError):
        coder.encode_text("abc")


def test_decode_corrupted_stream(tmp_path):
    coder = make_coder(tmp_path, "abcc")
    encoded = str(tmp_path / "bad.huff")
    write_bit_string(encoded, "01")
    with pytest.raises(ValueError):
        coder.decode(encoded, str(tmp_path / "bad.txt"))


def test_encoded_size_beats_raw(tmp_path):
    text = "aaaaaaaabbbbccd" * 40
    coder = make_coder(tmp_path, text)
    encoded = tmp_path / "s.huff"
    size = coder.encode(str(encoded))
    assert size == encoded.stat().st_size
    assert size < len(text)


def test_root_accessor_does_not_expose_tree(tmp_path):
    coder = make_coder(tmp_path, "abcc")
    root = coder.huffman_root
    root.left, root.right = root.right, root.left
    assert coder.huffman_root.left.data.symbol == "c"
    assert coder.decode_bits("0") == "c"
