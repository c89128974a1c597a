import json
from pathlib import Path
from typing import List, Tuple

import pytest

from autousecase.common.messaging.bus import MessageBus
from autousecase.common.needle import L, Needle


class ListRenderer:
    def __init__(self):
        self.records: List[Tuple[str, str]] = []

    def render(self, message: str, level: str) -> None:
        self.records.append((level, message))


@pytest.fixture
def catalog(tmp_path: Path) -> Needle:
    en_dir = tmp_path / "needle" / "en"
    en_dir.mkdir(parents=True)
    (en_dir / "greet.json").write_text(
        json.dumps({"greet.hello": "Hello {name}", "greet.plain": "Plain"}),
        encoding="utf-8",
    )
    return Needle(roots=[tmp_path])


def test_bus_formats_and_forwards_to_renderer(catalog):
    bus = MessageBus(catalog=catalog)
    renderer = ListRenderer()
    bus.set_renderer(renderer)

    bus.info(L.greet.hello, name="World")
    bus.success(L.greet.plain)
    bus.warning("greet.hello", name="str id")

    assert renderer.records == [
        ("info", "Hello World"),
        ("success", "Plain"),
        ("warning", "Hello str id"),
    ]


def test_bus_without_renderer_is_silent(catalog):
    bus = MessageBus(catalog=catalog)

    bus.error(L.greet.hello, name="nobody")


def test_missing_template_argument_is_reported(catalog):
    bus = MessageBus(catalog=catalog)
    renderer = ListRenderer()
    bus.set_renderer(renderer)

    bus.error(L.greet.hello)

    assert renderer.records == [("error", "<formatting_error for 'greet.hello'>")]


def test_unknown_id_renders_the_key(catalog):
    bus = MessageBus(catalog=catalog)
    renderer = ListRenderer()
    bus.set_renderer(renderer)

    bus.debug(L.not_in.catalog)

    assert renderer.records == [("debug", "not_in.catalog")]
