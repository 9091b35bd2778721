"""Tests for the gallery workflow."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from PIL import Image

from people_gallery.config import GalleryConfig
from people_gallery.io.image_library import ImageImportError, ImageLibrary
from people_gallery.io.key_value import MemoryKeyValueStore
from people_gallery.models.person import Person
from people_gallery.services.gallery import Gallery
from people_gallery.services.record_store import PersonStore


def _create_image(path: Path) -> Path:
    Image.new("RGB", (4, 4), color=(123, 222, 111)).save(path)
    return path


@pytest.fixture()
def slots() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture()
def gallery(tmp_path, slots) -> Gallery:
    instance = Gallery(PersonStore(slots), ImageLibrary(tmp_path / "images"))
    instance.load()
    return instance


def _saved(slots: MemoryKeyValueStore) -> list[dict[str, str]]:
    return json.loads(slots.get("people"))


def test_add_image_appends_placeholder_and_saves(gallery, slots, tmp_path):
    source = _create_image(tmp_path / "portrait.png")

    person = gallery.add_image(source)

    assert person.display_name == "Unknown"
    assert gallery.people == (person,)
    assert gallery.image_path(person).is_file()
    assert gallery.last_save is not None and gallery.last_save.ok
    assert _saved(slots) == [{"name": "Unknown", "image": person.image_reference}]


def test_add_image_keeps_insertion_order(gallery, tmp_path):
    first = gallery.add_image(_create_image(tmp_path / "b.png"))
    second = gallery.add_image(_create_image(tmp_path / "a.png"))

    assert [p.image_reference for p in gallery.people] == [
        first.image_reference,
        second.image_reference,
    ]


def test_failed_import_does_not_mutate(gallery, slots, tmp_path):
    bogus = tmp_path / "bogus.png"
    bogus.write_text("nope", encoding="utf-8")

    with pytest.raises(ImageImportError):
        gallery.add_image(bogus)

    assert len(gallery) == 0
    assert slots.get("people") is None


def test_rename_updates_and_saves(gallery, slots, tmp_path):
    person = gallery.add_image(_create_image(tmp_path / "x.png"))

    renamed = gallery.rename(0, "Alice")

    assert renamed is person
    assert gallery[0].display_name == "Alice"
    assert _saved(slots) == [{"name": "Alice", "image": person.image_reference}]


def test_rename_accepts_empty_name(gallery, slots, tmp_path):
    gallery.add_image(_create_image(tmp_path / "x.png"))

    gallery.rename(0, "")

    assert _saved(slots)[0]["name"] == ""


def test_cancelled_rename_skips_mutation(gallery, slots, tmp_path):
    gallery.add_image(_create_image(tmp_path / "x.png"))
    before = slots.get("people")
    last_save = gallery.last_save

    gallery.rename(0, None)

    assert gallery[0].display_name == "Unknown"
    assert slots.get("people") == before
    assert gallery.last_save is last_save


def test_rename_unknown_index_raises(gallery):
    with pytest.raises(IndexError):
        gallery.rename(3, "Ghost")


def test_load_replaces_in_memory_collection(tmp_path, slots):
    store = PersonStore(slots)
    store.save([Person(display_name="Bob", image_reference="B.jpg")])
    gallery = Gallery(store, ImageLibrary(tmp_path))

    loaded = gallery.load()

    assert [p.display_name for p in loaded] == ["Bob"]
    assert len(gallery) == 1


def test_people_view_is_read_only(gallery, tmp_path):
    gallery.add_image(_create_image(tmp_path / "x.png"))

    view = gallery.people

    assert isinstance(view, tuple)


def test_custom_default_name(tmp_path, slots):
    gallery = Gallery(PersonStore(slots), ImageLibrary(tmp_path), default_name="Nobody")

    person = gallery.add_image(Image.new("RGB", (2, 2)))

    assert person.display_name == "Nobody"


def test_from_config_persists_across_instances(tmp_path):
    config = GalleryConfig(data_directory=tmp_path / "data", storage_key="friends")
    gallery = Gallery.from_config(config)
    gallery.load()
    person = gallery.add_image(_create_image(tmp_path / "x.png"))
    gallery.rename(0, "Alice")

    reopened = Gallery.from_config(config)
    reopened.load()

    assert reopened.people == (Person(display_name="Alice", image_reference=person.image_reference),)
    assert (tmp_path / "data" / "friends.json").exists()
    assert reopened.image_path(reopened[0]) == tmp_path / "data" / "images" / person.image_reference
    assert reopened.image_path(reopened[0]).is_file()


def test_rename_rejects_negative_index(gallery, slots, tmp_path):
    gallery.add_image(_create_image(tmp_path / "x.png"))
    before = slots.get("people")

    with pytest.raises(IndexError):
        gallery.rename(-1, "Ghost")

    assert gallery[0].display_name == "Unknown"
    assert slots.get("people") == before
