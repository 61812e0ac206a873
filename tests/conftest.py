"""Fixtures compartidas para los tests del generador de tokens."""

import pytest

from src.tokens.design_tokens import DesignConfig, generate_design_tokens


@pytest.fixture
def scenario_config() -> DesignConfig:
    return DesignConfig(primary_color="#6366f1", base_spacing=4, font_family="Inter")


@pytest.fixture
def scenario_tokens(scenario_config):
    return generate_design_tokens(scenario_config)


@pytest.fixture
def full_config() -> DesignConfig:
    return DesignConfig(
        primary_color="#6366f1",
        secondary_color="#8b5cf6",
        base_spacing=4,
        font_family="Inter, system-ui, sans-serif",
        heading_font="Playfair Display",
    )


@pytest.fixture
def full_tokens(full_config):
    return generate_design_tokens(full_config)
