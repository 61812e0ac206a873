import pandas as pd
import pytest

from src.features.palette_metrics import add_text_recommendation, scales_to_frame


class TestScalesToFrame:
    def test_shape_and_columns(self, scenario_tokens):
        df = scales_to_frame(scenario_tokens)
        assert len(df) == 66
        assert list(df.columns) == [
            "palette",
            "shade",
            "hex",
            "lightness",
            "luminance",
            "contrast_white",
            "contrast_black",
        ]

    def test_seed_row(self, scenario_tokens):
        df = scales_to_frame(scenario_tokens)
        row = df[(df["palette"] == "primary") & (df["shade"] == 500)].iloc[0]
        assert row["hex"] == "#6366f1"
        assert 0 < row["lightness"] < 100

    def test_lightness_decreases_per_palette(self, scenario_tokens):
        df = scales_to_frame(scenario_tokens)
        for _, group in df.groupby("palette"):
            assert group.sort_values("shade")["lightness"].is_monotonic_decreasing

    def test_contrast_bounds(self, scenario_tokens):
        df = scales_to_frame(scenario_tokens)
        for column in ("contrast_white", "contrast_black"):
            assert df[column].between(1.0 - 1e-9, 21.0 + 1e-9).all()


class TestTextRecommendation:
    @pytest.mark.parametrize(
        "white, black, text_color, level",
        [
            (21.0, 1.0, "#ffffff", "AAA"),
            (1.5, 14.0, "#000000", "AAA"),
            (4.6, 4.5, "#ffffff", "AA"),
            (3.2, 3.1, "#ffffff", "AA grande"),
            (2.0, 2.0, "#ffffff", "-"),
        ],
    )
    def test_levels(self, white, black, text_color, level):
        df = pd.DataFrame({"contrast_white": [white], "contrast_black": [black]})
        result = add_text_recommendation(df)
        assert result.loc[0, "text_color"] == text_color
        assert result.loc[0, "wcag"] == level

    def test_does_not_mutate_input(self, scenario_tokens):
        df = scales_to_frame(scenario_tokens)
        add_text_recommendation(df)
        assert "wcag" not in df.columns

    def test_extremes_of_real_palette(self, scenario_tokens):
        df = add_text_recommendation(scales_to_frame(scenario_tokens))
        lightest = df[(df["palette"] == "primary") & (df["shade"] == 50)].iloc[0]
        darkest = df[(df["palette"] == "primary") & (df["shade"] == 950)].iloc[0]
        assert lightest["text_color"] == "#000000"
        assert darkest["text_color"] == "#ffffff"
