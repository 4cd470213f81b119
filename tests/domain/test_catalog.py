import pytest

from dlnaprofile.domain import catalog
from dlnaprofile.domain.catalog import _build_index
from dlnaprofile.domain.entities.profile import ProfileRecord
from dlnaprofile.domain.enums import MediaClass


def test_catalog_ids_are_unique_and_indexed():
    records = catalog.all_profiles()
    ids = [r.id for r in records]
    assert len(ids) == len(set(ids))
    for rec in records:
        assert catalog.get_profile(rec.id) is rec


def test_get_profile_unknown_is_none():
    assert catalog.get_profile("NOT_A_PROFILE") is None


def test_duplicate_ids_rejected():
    with pytest.raises(ValueError):
        _build_index([catalog.AC3, catalog.AC3])


def test_media_class_matches_id_family():
    for rec in catalog.profiles_by_class(MediaClass.AUDIO):
        assert rec.mime.startswith("audio/")
    for rec in catalog.profiles_by_class(MediaClass.AV):
        assert rec.mime.startswith("video/")
        assert rec.id.startswith("MPEG")
    for rec in catalog.profiles_by_class(MediaClass.IMAGE):
        assert rec.mime.startswith("image/")


def test_transport_stream_variants_mime():
    # 188-byte (_ISO) streams are plain video/mpeg; 192-byte ones are DLNA TTS
    assert catalog.MPEG_TS_HD_NA_ISO.mime == "video/mpeg"
    assert catalog.MPEG_TS_HD_NA_T.mime == "video/vnd.dlna.mpeg-tts"
    assert catalog.MPEG_TS_HD_NA.mime == "video/vnd.dlna.mpeg-tts"


def test_well_known_records():
    assert catalog.AAC_ADTS_320.mime == "audio/vnd.dlna.adts"
    assert catalog.AAC_ISO_320.mime == "audio/mp4"
    assert catalog.AAC_LTP_MULT7_ISO.label == "multi"
    assert catalog.MPEG_TS_HD_NA_T.label == "HD"
    assert str(catalog.MPEG_PS_PAL) == "MPEG_PS_PAL"


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        catalog.CATALOG["X"] = catalog.AC3  # type: ignore[index]


def test_every_record_constant_is_listed_once():
    constants = {v.id for v in vars(catalog).values() if isinstance(v, ProfileRecord)}
    listed = [rec.id for group in catalog.PROFILE_GROUPS for rec in group]
    assert len(listed) == len(set(listed)) == len(catalog.CATALOG) == 60
    assert set(listed) == constants
