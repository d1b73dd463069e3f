import pytest

from qgitcore.constants import EXT_DIFF_DEF, EXT_DIFF_KEY, FLAGS_KEY
from qgitcore.settings import (
    ConfigNode,
    Flag,
    SettingsStore,
    UserSource,
    build_config_tree,
    codec_list,
    codec_name,
    default_user_index,
    find_codec_index,
    parse_user_info,
)


def test_value_default_when_missing():
    store = SettingsStore()
    assert store.value(EXT_DIFF_KEY, EXT_DIFF_DEF) == "kompare"


def test_set_value_round_trip_through_file(tmp_path):
    path = tmp_path / "sub" / "settings.json"
    store = SettingsStore(path)
    store.set_value("Patch/args", "--signoff")
    reloaded = SettingsStore(path)
    assert reloaded.value("Patch/args") == "--signoff"


def test_set_and_clear_flag():
    store = SettingsStore()
    store.set_flag(Flag.NUMBERS, True)
    assert store.test_flag(Flag.NUMBERS)
    store.set_flag(Flag.NUMBERS, False)
    assert not store.test_flag(Flag.NUMBERS)


def test_set_flag_keeps_other_flags(tmp_path):
    store = SettingsStore(tmp_path / "s.json")
    before = store.flags()
    store.set_flag(Flag.WHOLE_HISTORY, True)
    after = store.flags()
    assert after & ~Flag.WHOLE_HISTORY == before & ~Flag.WHOLE_HISTORY
    assert SettingsStore(tmp_path / "s.json").flags() == after


def test_flags_under_other_key():
    store = SettingsStore()
    store.set_flag(Flag.SIGN_CMT, True, "other")
    assert store.test_flag(Flag.SIGN_CMT, "other")
    assert store.flags(FLAGS_KEY) == store.flags()
    assert store.value("other") == int(store.flags("other"))


def test_bad_settings_file(tmp_path):
    path = tmp_path / "s.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        SettingsStore(path)


def test_config_tree_nested():
    root = build_config_tree(["user.name=Jane", "core.bare=false", "user.email=jane@example.com"])
    assert [c.name for c in root.children] == ["core", "user"]
    assert root.child("user").child("name").value == "Jane"
    assert root.child("user").child("email").value == "jane@example.com"
    assert root.child("core").child("bare").value == "false"


def test_config_tree_deep_and_shared_prefix():
    root = build_config_tree(["remote.origin.url=a", "remote.origin.fetch=b"])
    origin = root.child("remote").child("origin")
    assert len(root.child("remote").children) == 1
    assert {c.name: c.value for c in origin.children} == {"fetch": "b", "url": "a"}


def test_config_tree_skips_empty_values():
    root = build_config_tree(["core.editor=", "noequals"])
    assert root.children == []


def test_config_node_missing_child():
    with pytest.raises(KeyError):
        ConfigNode("x").child("y")


def test_parse_user_info_and_default_index():
    info = ["Local config", "", "", "Global config", "Jane", "jane@example.com"]
    sources = parse_user_info(info)
    assert sources[1] == UserSource("Global config", "Jane", "jane@example.com")
    assert default_user_index(sources) == 1


def test_default_user_index_none_found():
    sources = parse_user_info(["a", "", "", "b", "", ""])
    assert default_user_index(sources) == 0


def test_parse_user_info_bad_length():
    with pytest.raises(ValueError):
        parse_user_info(["a", "b"])


def test_codec_list_and_names():
    codecs = codec_list("UTF-8")
    assert codecs[0] == "Local Codec (UTF-8)"
    assert codecs[1] == "Latin1"
    assert "windows-1258" in codecs
    idx = codecs.index("UTF-8 -- Unicode, 8-bit")
    assert codec_name(codecs, idx, "ISO-8859-1") == "UTF-8"
    assert codec_name(codecs, 0, "ISO-8859-1") == "ISO-8859-1"


def test_find_codec_index():
    codecs = codec_list("System")
    assert codecs[find_codec_index(codecs, "koi8-r")] == "KOI8-R -- Russian"
    assert find_codec_index(codecs, None) == codecs.index("Latin1")
    assert find_codec_index(codecs, "nope") == 0


def test_find_codec_index_local_match_first():
    codecs = codec_list("UTF-8")
    assert find_codec_index(codecs, "UTF-8") == 0