import pytest

from vimeo_player.core.errors import ConfigParseError
from vimeo_player.models import VimeoVideoConfig


def test_from_json_reads_progressive_in_server_order():
    config = VimeoVideoConfig.from_json(
        {
            "request": {
                "files": {
                    "progressive": [
                        {"url": "https://cdn/360.mp4", "quality": "360p", "width": 640, "height": 360},
                        {"url": "https://cdn/1080.mp4", "quality": "1080p", "fps": "30"},
                    ]
                }
            },
            "video": {"id": 76979871, "title": "The New Vimeo Player", "duration": 62},
        }
    )

    streams = config.progressive
    assert [s.quality for s in streams] == ["360p", "1080p"]
    assert streams[0].width == 640
    assert streams[1].fps == 30
    assert config.video.id == "76979871"
    assert config.video.duration == 62


def test_missing_sections_are_none():
    config = VimeoVideoConfig.from_json({"video": {}})
    assert config.request is None
    assert config.progressive is None

    config = VimeoVideoConfig.from_json({"request": {"files": {}}})
    assert config.progressive is None


def test_non_object_entries_become_none():
    config = VimeoVideoConfig.from_json({"request": {"files": {"progressive": [None, "x", {"url": "a.mp4"}]}}})
    assert config.progressive[0] is None
    assert config.progressive[1] is None
    assert config.progressive[2].url == "a.mp4"


@pytest.mark.parametrize("data", [[], "config", None, 42])
def test_non_object_document_is_rejected(data):
    with pytest.raises(ConfigParseError):
        VimeoVideoConfig.from_json(data)


def test_progressive_must_be_a_list():
    with pytest.raises(ConfigParseError):
        VimeoVideoConfig.from_json({"request": {"files": {"progressive": {"url": "a.mp4"}}}})
