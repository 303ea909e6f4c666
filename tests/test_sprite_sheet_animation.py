import pytest

from sowa.document import Document
from sowa.sprite_sheet_animation import SpriteSheet, SpriteSheetAnimation


def _sheet():
    return SpriteSheet(texture=7, grid_size=(4, 2), frames=[(0, 0), (3, 1)], speed=2.5)


def test_defaults():
    sheet = SpriteSheet()
    assert sheet.texture == 0
    assert sheet.grid_size == (1, 1)
    assert sheet.frames == []
    assert sheet.speed == 1.0


def test_dict_round_trip():
    sheet = _sheet()
    assert SpriteSheet.from_dict(sheet.to_dict()) == sheet


def test_dict_keys():
    assert set(_sheet().to_dict()) == {"Texture", "GridSize", "Speed", "Frames"}


def test_from_dict_rejects_non_mapping():
    with pytest.raises(ValueError):
        SpriteSheet.from_dict([1, 2])


def test_from_dict_bad_fields_keep_defaults():
    sheet = SpriteSheet.from_dict({"GridSize": [1, 2, 3], "Frames": [[1]], "Texture": "x"})
    assert sheet == SpriteSheet()


def test_set_get_has_remove():
    anim = SpriteSheetAnimation()
    assert anim.get_animation("run") is None
    anim.set_animation("run", _sheet())
    assert anim.has_animation("run")
    assert anim.get_animation("run") == _sheet()
    anim.remove_animation("run")
    assert not anim.has_animation("run")
    anim.remove_animation("run")
    assert anim.get_animations() == {}


def test_set_animation_copies():
    anim = SpriteSheetAnimation()
    sheet = _sheet()
    anim.set_animation("run", sheet)
    sheet.frames.append((1, 1))
    assert anim.get_animation("run").frames == [(0, 0), (3, 1)]


def test_get_animation_is_live():
    anim = SpriteSheetAnimation()
    anim.set_animation("idle", SpriteSheet())
    anim.get_animation("idle").speed = 3.0
    assert anim.get_animation("idle").speed == 3.0


def test_animations_sorted_by_name():
    anim = SpriteSheetAnimation()
    for name in ("walk", "idle", "run"):
        anim.set_animation(name, SpriteSheet())
    assert list(anim.get_animations()) == ["idle", "run", "walk"]


def test_resource_round_trip_through_yaml():
    anim = SpriteSheetAnimation()
    anim.set_animation("run", _sheet())
    anim.set_animation("idle", SpriteSheet())
    doc = Document()
    anim.save_resource(doc)

    restored = SpriteSheetAnimation()
    restored.load_resource(Document.from_yaml(doc.to_yaml()))
    assert restored.get_animations() == anim.get_animations()


def test_load_invalid_keeps_existing():
    anim = SpriteSheetAnimation()
    anim.set_animation("run", _sheet())
    anim.load_resource(Document({"Animations": {"bad": [1, 2]}}))
    assert anim.get_animations() == {"run": _sheet()}
    anim.load_resource(Document())
    assert anim.has_animation("run")