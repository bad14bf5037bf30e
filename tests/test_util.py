import pytest

from texstream.util import format_tex, get_file_contents, print_tex


def test_get_file_contents_roundtrip(tmp_path):
    path = tmp_path / "shader.vert"
    text = "#version 440\r\nvoid main() {}\n"
    path.write_bytes(text.encode("utf-8"))
    assert get_file_contents(path) == text


def test_get_file_contents_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_file_contents(tmp_path / "absent.frag")


def test_format_tex_single_pixel():
    assert format_tex(1, 1, bytes([10, 20, 30, 40])) == "5 10 15 20    \n"


def test_format_tex_shape():
    image = bytes(range(4 * 3 * 2))
    text = format_tex(3, 2, image)
    rows = text.splitlines()
    assert len(rows) == 2
    assert all(len(row.split()) == 3 * 4 for row in rows)


def test_format_tex_halves_maximum():
    rows = format_tex(2, 1, bytes([255] * 8)).split()
    assert set(rows) == {str(255 // 2)}


def test_print_tex_outputs_format(capsys):
    image = bytes([2, 4, 6, 8] * 4)
    print_tex(2, 2, image)
    assert capsys.readouterr().out == format_tex(2, 2, image) + "\n"