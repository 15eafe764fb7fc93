import logging

import pytest

from model import FrequencyModel, build, words


def test_build_counts_tiny_corpus() -> None:
    model = build("the cat sat on the mat")

    assert dict(model) == {"the": 2, "cat": 1, "sat": 1, "on": 1, "mat": 1}
    assert model.total == 6


def test_build_is_case_insensitive_and_splits_on_non_letters() -> None:
    model = build("The THE the, the-end; 42the 'the' there x1y")

    assert model["the"] == 6
    assert model["end"] == 1
    assert model["there"] == 1
    assert model["x"] == 1
    assert model["y"] == 1
    assert "42the" not in model


def test_words_ignores_non_ascii_letters() -> None:
    assert words("café naïve") == ["caf", "na", "ve"]


def test_empty_corpus_gives_empty_model() -> None:
    model = build("")

    assert len(model) == 0
    assert model.total == 0
    assert model.probability("the") == 0.0


def test_model_is_read_only() -> None:
    model = build("the cat")

    with pytest.raises(TypeError):
        model["dog"] = 3  # type: ignore[index]


def test_counts_below_one_are_dropped() -> None:
    model = FrequencyModel({"the": 3, "ghost": 0, "minus": -1})

    assert list(model) == ["the"]


def test_read_helpers() -> None:
    model = build("a a a b b c")

    assert model.count("a") == 3
    assert model.count("zzz") == 0
    assert model.probability("b") == pytest.approx(2 / 6)
    assert model.most_common(1) == [("a", 3)]


def test_keys_outside_a_to_z_are_dropped() -> None:
    model = FrequencyModel({"": 1, "The": 2, "don't": 4, "caf\u00e9": 1, "the": 3})

    assert dict(model) == {"the": 3}
    assert model.total == 3


def test_from_text_logs_model_size(caplog) -> None:
    caplog.set_level(logging.INFO, logger="model")

    FrequencyModel.from_text("Hello hello world")

    assert "Built frequency model: 2 words, 3 tokens" in caplog.text
