import pytest

from querychunker.pos import (
    MINOR_TO_MAJOR,
    MajorPOS,
    MinorPOS,
    PartOfSpeechError,
    is_noun,
    major_pos,
)


class TestMajorPOS:
    def test_every_minor_tag_has_exactly_one_major(self):
        assert set(MINOR_TO_MAJOR) == set(MinorPOS)
        for minor in MinorPOS:
            assert isinstance(major_pos(minor), MajorPOS)

    def test_every_major_category_is_used(self):
        assert set(MINOR_TO_MAJOR.values()) == set(MajorPOS)

    @pytest.mark.parametrize(
        "minor, major",
        [
            (MinorPOS.CP, MajorPOS.VERB),
            (MinorPOS.JJS, MajorPOS.ADJECTIVE),
            (MinorPOS.RBR, MajorPOS.ADVERB),
            (MinorPOS.PRP, MajorPOS.NOUN),
            (MinorPOS.NNA, MajorPOS.NOUN),
            (MinorPOS.EX, MajorPOS.GLUE),
            (MinorPOS.DA, MajorPOS.VALUE),
            (MinorPOS.WPO, MajorPOS.WHWORD),
            (MinorPOS.SEP, MajorPOS.SYMBOL),
        ],
    )
    def test_known_pairs(self, minor, major):
        assert major_pos(minor) is major

    def test_accepts_tag_names(self):
        assert major_pos("NNPS") is MajorPOS.NOUN

    def test_unknown_tag_name_fails_fast(self):
        with pytest.raises(PartOfSpeechError):
            major_pos("PRP$")

    def test_non_tag_fails_fast(self):
        with pytest.raises(PartOfSpeechError):
            major_pos(None)

    def test_error_is_a_value_error(self):
        assert issubclass(PartOfSpeechError, ValueError)

    def test_is_noun(self):
        assert is_noun(MinorPOS.PP)
        assert not is_noun(MinorPOS.WP)


class TestMinorPOSFromTag:
    def test_round_trips_names(self):
        assert MinorPOS.from_tag("VBF") is MinorPOS.VBF

    def test_unknown(self):
        with pytest.raises(PartOfSpeechError, match="XYZ"):
            MinorPOS.from_tag("XYZ")
