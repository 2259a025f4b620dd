from framefit import DisplayConfig, DisplayGeometry, FrameSize, FrameSizer, max_columns, max_rows


def test_max_columns_scenario():
    """Scroll bar and both fringes are subtracted before dividing."""
    assert max_columns(1600, 15, 8, 8, 0, 9) == 174


def test_max_rows_scenario():
    assert max_rows(1200, 45, 18) == 64


def test_max_columns_matches_floor_division():
    for width in (0, 1, 80, 799, 800, 1920, 2561):
        for char_width in (1, 7, 8, 9, 13):
            expected = (width - 3 - 2 - 1 - 10) // char_width
            assert max_columns(width, 3, 2, 1, 10, char_width) == expected


def test_max_rows_matches_floor_division():
    for height in (0, 44, 45, 46, 1080, 1200):
        for char_height in (1, 16, 18):
            assert max_rows(height, 45, char_height) == (height - 45) // char_height


def test_padding_wider_than_display_is_not_clamped():
    """Negative space rounds toward negative infinity."""
    assert max_columns(10, 0, 0, 0, 30, 8) == -3
    assert max_rows(20, 45, 18) == -2


def test_exact_fit():
    assert max_columns(800, 0, 0, 0, 0, 8) == 100
    assert max_rows(845, 45, 16) == 50


def test_compute_uses_every_geometry_field():
    geometry = DisplayGeometry(
        width_pixels=1600,
        height_pixels=1200,
        char_cell_width_pixels=9,
        char_cell_height_pixels=18,
        scroll_bar_width_pixels=15,
        left_fringe_width_pixels=8,
        right_fringe_width_pixels=8,
    )
    assert FrameSizer().compute(geometry) == FrameSize(columns=174, rows=64)


def test_geometry_defaults():
    geometry = DisplayGeometry(
        width_pixels=100, height_pixels=100,
        char_cell_width_pixels=10, char_cell_height_pixels=10,
    )
    assert geometry.padding_width_pixels == 0
    assert geometry.padding_height_pixels == 45
    assert geometry.usable_width == 100
    assert geometry.usable_height == 55


def test_sizer_default_config():
    sizer = FrameSizer()
    assert sizer.config == DisplayConfig()
    assert sizer.config.padding_height == 45
    assert sizer.config.max_width is None
