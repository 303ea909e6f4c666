import io

import pytest
from PIL import Image

from sowa.document import Document
from sowa.filesystem import FileData, FileSystem
from sowa.image_texture import ImageTexture

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


def _png_top_red_bottom_blue():
    image = Image.new("RGBA", (1, 2))
    image.putpixel((0, 0), RED)
    image.putpixel((0, 1), BLUE)
    out = io.BytesIO()
    image.save(out, format="PNG")
    return out.getvalue()


@pytest.fixture
def fs():
    system = FileSystem()
    server = system.new_data_file_server()
    server.add_file("tile.png", FileData(_png_top_red_bottom_blue()))
    server.add_file("broken.png", FileData(b"not an image"))
    system.register_file_server("res", server)
    return system


def test_load_reads_size_and_flips_rows(fs):
    texture = ImageTexture(fs)
    assert texture.load("res://tile.png") is True
    assert (texture.width, texture.height, texture.channels) == (1, 2, 4)
    assert texture.pixels == bytes(BLUE) + bytes(RED)
    assert texture.filepath == "res://tile.png"
    assert texture.id > 0


def test_load_missing_file_returns_false(fs):
    texture = ImageTexture(fs)
    assert texture.load("res://nope.png") is False
    assert texture.id == 0
    assert texture.filepath == ""


def test_load_undecodable_raises_and_releases(fs):
    texture = ImageTexture(fs)
    texture.load("res://tile.png")
    with pytest.raises(ValueError):
        texture.load("res://broken.png")
    assert texture.id == 0
    assert texture.pixels == b""


def test_load_from_data_sets_fields():
    texture = ImageTexture()
    data = bytes(RED) * 6
    texture.load_from_data(data, 3, 2)
    assert (texture.width, texture.height, texture.channels) == (3, 2, 4)
    assert texture.pixels == data


def test_load_from_data_wrong_length_raises():
    with pytest.raises(ValueError):
        ImageTexture().load_from_data(b"\x00" * 5, 1, 1)


def test_each_load_gets_a_new_id():
    first = ImageTexture()
    second = ImageTexture()
    first.load_from_data(bytes(RED), 1, 1)
    second.load_from_data(bytes(RED), 1, 1)
    assert first.id > 0 and second.id > 0
    assert first.id != second.id


def test_delete_releases_image():
    texture = ImageTexture()
    texture.load_from_data(bytes(RED), 1, 1)
    texture.delete()
    assert (texture.id, texture.width, texture.height, texture.pixels) == (0, 0, 0, b"")


def test_str_format():
    texture = ImageTexture(rid=42)
    assert str(texture) == "ImageTexture(ID: 0, RID: 42)"


def test_resource_round_trip(fs):
    original = ImageTexture(fs)
    original.load("res://tile.png")
    doc = Document()
    original.save_resource(doc)
    assert doc.get("Path", "") == "res://tile.png"

    restored = ImageTexture(fs)
    restored.load_resource(doc)
    assert restored.pixels == original.pixels
    assert restored.filepath == original.filepath


def test_load_resource_without_path_does_nothing(fs):
    texture = ImageTexture(fs)
    texture.load_resource(Document())
    assert texture.id == 0
    assert texture.filepath == ""