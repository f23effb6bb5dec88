import pandas as pd
import pytest

from querychunker import PartOfSpeechError, QueryParser, preprocess_query_string

from conftest import LexiconTagger, SuffixSingularizer


def nouns(group):
    return [t.normalized_word for t in group.noun]


class TestPreprocess:
    def test_space_before_commas(self):
        assert preprocess_query_string("a, b,c") == "a , b ,c"

    def test_no_commas(self):
        assert preprocess_query_string("Who won?") == "Who won?"


class TestParse:
    def test_yellow_dog(self, parser):
        result = parser.parse("the yellow dog ran away from home")
        dog, home = result.noun_groups
        assert nouns(dog) == ["dog"]
        assert [t.normalized_word for t in dog.children] == ["the", "yellow"]
        assert (dog.begin, dog.end) == (0, 2)
        assert (home.begin, home.end) == (6, 6)
        assert result.used == [True, True, True, False, False, False, True]
        assert [t.normalized_word for t in result.unused_tokens()] == ["ran", "away", "from"]

    def test_proper_names_merge(self, parser):
        [group] = parser.parse("Chris Steve Granger").noun_groups
        assert nouns(group) == ["chris", "steve", "granger"]
        assert (group.begin, group.end) == (0, 2)
        assert group.is_proper is True

    def test_commas_separate_names(self, parser, tagger):
        result = parser.parse("Ages of Chris, Steve")
        assert tagger.calls == ["Ages of Chris , Steve"]
        ages, chris, steve = result.noun_groups
        assert nouns(ages) == ["age"]
        assert ages.is_plural is True
        assert [t.normalized_word for t in ages.children] == ["of"]
        assert nouns(chris) == ["chris"]
        assert nouns(steve) == ["steve"]

    def test_possessive_name(self, parser):
        result = parser.parse("What is Corey Montella's age?")
        person, age = result.noun_groups
        assert nouns(person) == ["corey", "montella"]
        assert person.is_possessive is True
        assert nouns(age) == ["age"]
        assert result.tokens[3].normalized_word == "montella"

    def test_whose(self, parser):
        result = parser.parse("People whose age < 30")
        whose = result.tokens[1]
        assert whose.pos.value == "WPO"
        assert whose.is_possessive is True
        assert result.tokens[3].pos.value == "LT"
        assert [nouns(g) for g in result.noun_groups] == [["people"], ["age"]]

    def test_groups_are_ordered_and_disjoint(self, parser):
        result = parser.parse(
            "What is the average elevation of the highest points in each state?"
        )
        groups = result.noun_groups
        assert [nouns(g) for g in groups] == [["elevation"], ["point"], ["state"]]
        for prev, nxt in zip(groups, groups[1:]):
            assert prev.end < nxt.begin

    @pytest.mark.parametrize("query", ["", "   "])
    def test_empty_query(self, parser, tagger, query):
        result = parser.parse(query)
        assert result.tokens == []
        assert result.noun_groups == []
        assert result.used == []
        assert tagger.calls == []

    def test_unknown_tag_is_reported(self, singularizer):
        parser = QueryParser(tagger=LexiconTagger(default="NN-X"), singularizer=singularizer)
        with pytest.raises(PartOfSpeechError):
            parser.parse("anything")

    def test_parses_are_independent(self, parser):
        first = parser.parse("the yellow dog ran away from home")
        parser.parse("Chris Steve Granger")
        assert len(first.noun_groups) == 2
        assert first.used == [True, True, True, False, False, False, True]


class TestParserConfig:
    def test_injected_backends(self, parser):
        assert parser.config == {
            "method": "spacy",
            "spacy_model": "en_core_web_sm",
            "tagger": "LexiconTagger",
            "singularizer": "SuffixSingularizer",
        }

    def test_result_carries_config(self, parser):
        assert parser.parse("dogs").config["tagger"] == "LexiconTagger"

    def test_unknown_method(self):
        with pytest.raises(ValueError):
            QueryParser(method="stanza", singularizer=SuffixSingularizer())


class TestLogging:
    def test_verbose_logs_groups_and_unused_tokens(self, tagger, singularizer):
        messages = []
        parser = QueryParser(tagger=tagger, singularizer=singularizer, logger=messages.append)
        parser.parse("the yellow dog ran away from home", verbose=True)
        assert len(messages) == 2
        assert "NOUN GROUPS" in messages[0]
        assert "ran | ran | VERB | VB" in messages[1]

    def test_quiet_by_default(self, tagger, singularizer):
        messages = []
        parser = QueryParser(tagger=tagger, singularizer=singularizer, logger=messages.append)
        parser.parse("the yellow dog")
        assert messages == []

    def test_falls_back_to_print(self, parser, capsys):
        parser.parse("dogs", verbose=True)
        assert "NOUN GROUPS" in capsys.readouterr().out


class TestDataFrames:
    def test_tokens_df(self, parser):
        df = parser.parse("the yellow dog ran away").tokens_df()
        assert isinstance(df, pd.DataFrame)
        assert list(df["normalized_word"]) == ["the", "yellow", "dog", "ran", "away"]
        assert list(df["used"]) == [True, True, True, False, False]
        assert df.loc[2, "minor_pos"] == "NN"

    def test_noun_groups_df(self, parser):
        df = parser.parse("Chris Steve Granger").noun_groups_df()
        assert len(df) == 1
        assert df.loc[0, "noun"] == "chris steve granger"
        assert (df.loc[0, "begin"], df.loc[0, "end"]) == (0, 2)

    def test_empty_frames_keep_columns(self, parser):
        result = parser.parse("")
        assert "minor_pos" in result.tokens_df().columns
        assert "noun" in result.noun_groups_df().columns
