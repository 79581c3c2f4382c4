# tests/services/test_translator.py
from lexigram.adapters.persistence.text_source import TextFileRuleSource
from lexigram.services.translator import Translator


class TestTranslatorOperations:
    def test_from_files(self, rule_files):
        words, grammar = rule_files
        translator = Translator.from_files(TextFileRuleSource(), str(words), str(grammar))
        assert translator.generate("Spanish", "Spanish") == "el camion el"
        assert translator.validate("el camion el", "Spanish")
        assert not translator.validate("el camion azul", "Spanish")

    def test_operations_delegate(self, translator):
        assert translator.generate("English", ["DET", "ADJ", "NOU"]) == "the blue truck"
        assert translator.transform("blue the truck", ["ADJ", "DET", "NOU"], "English") == "the blue truck"
        assert translator.translate_words("the blue truck", "English", "Spanish") == "el azul camion"
        assert translator.translate_with_grammar("rouge mer le", "French", "English") == "the red sea"


class TestTranslatorUpdates:
    def test_update_lexicon_from_file(self, translator, tmp_path, captured_logs):
        path = tmp_path / "more_words.txt"
        path.write_text(
            "truck, ADJ, French:camion\n"
            "boat, NOU, Spanish:barco\n"
            "broken line\n",
            encoding="utf-8",
        )
        translator.update_lexicon_from_file(str(path))

        lexicon = translator.phrasebook.lexicon
        assert lexicon.lookup("truck").pos == "NOU"
        assert lexicon.lookup("truck").translation("French") == "camion"
        assert lexicon.words()[-1] == "boat"
        assert any(log["event"] == "lexicon_merged" and log["added"] == 1 for log in captured_logs)

    def test_update_grammar_from_file(self, translator, tmp_path):
        path = tmp_path / "more_grammar.txt"
        path.write_text("German: DET, NOU\nItalian: NOU\n", encoding="utf-8")
        translator.update_grammar_from_file(str(path))

        grammar = translator.phrasebook.grammar
        assert grammar.get("German") == ["DET", "NOU", "ADJ"]
        assert grammar.get("Italian") == ["NOU"]
        assert translator.validate("forchetta", "Italian")

    def test_updates_are_seen_by_operations(self, translator, tmp_path):
        path = tmp_path / "more_words.txt"
        path.write_text("truck, NOU, French:camion\n", encoding="utf-8")
        translator.update_lexicon_from_file(str(path))
        assert translator.generate("French", ["NOU"]) == "camion"


class TestTranslatorDisplay:
    def test_describe_words(self, translator):
        text = translator.describe_words()
        assert text.startswith(
            "Word: the\n"
            "Part of Speech: DET\n"
            "Translations:\n"
            "German => der\n"
            "French => le\n"
            "Spanish => el\n"
            "\n"
        )
        assert text.count("Word: ") == 6

    def test_describe_grammar(self, translator):
        text = translator.describe_grammar()
        assert text.startswith("Language: English\nParts of Speech:\nDET\nADJ\nNOU\n\n")
        assert "Language: Spanish\nParts of Speech:\nDET\nNOU\nDET\n" in text
