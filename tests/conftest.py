import pytest

from tintshade.palettes import generate_palette, generate_palette_model


@pytest.fixture
def gray_swatches():
    return generate_palette("#808080", 10)


@pytest.fixture
def gray_palette():
    return generate_palette_model("#808080", 10)
