"""
Unit tests for the panel renderer.

Tests each panel kind, the description data seam, text wrapping and the
guarantee that panels never draw outside their region.
"""
import pytest

from dungeons.core.config_loader import DEFAULT_HELP_TEXT, DEFAULT_TITLE_TEXT
from dungeons.core.data import PanelKind, Rect
from dungeons.core.frame import DEFAULT_STYLE, Frame
from dungeons.core.layout import partition
from dungeons.dashboard import Grid, PanelData, PanelRenderer, wrap_text


@pytest.fixture
def renderer():
    return PanelRenderer()


def painted_cells(frame: Frame):
    """Yield coordinates of every cell that differs from a blank frame."""
    for y in range(frame.height):
        for x in range(frame.width):
            if frame.char_at(x, y) != " " or frame.style_at(x, y) != DEFAULT_STYLE:
                yield x, y


class TestTitlePanel:
    """Test the borderless title line."""

    def test_title_centered(self, renderer, frame, panel_data):
        """The title text is centred on the first row."""
        renderer.render_panel(PanelKind.TITLE, Rect(0, 0, 80, 1), panel_data, frame)

        start = (80 - len(DEFAULT_TITLE_TEXT)) // 2
        assert frame.text_at(start, 0, len(DEFAULT_TITLE_TEXT)) == DEFAULT_TITLE_TEXT
        assert frame.char_at(start - 1, 0) == " "

    def test_title_truncated_in_narrow_region(self, renderer, panel_data):
        """A title wider than its region is cut to fit."""
        frame = Frame(10, 1)
        renderer.render_panel(PanelKind.TITLE, Rect(0, 0, 10, 1), panel_data, frame)

        assert frame.plain_lines() == [DEFAULT_TITLE_TEXT[:10]]


class TestDescriptionPanel:
    """Test the description panel and its path statistics seam."""

    def test_border_and_title(self, renderer, panel_data):
        """Description is a rounded box with its title in the top border."""
        frame = Frame(40, 8)
        renderer.render_panel(PanelKind.DESCRIPTION, Rect(0, 0, 40, 8), panel_data, frame)

        assert frame.char_at(0, 0) == "╭"
        assert frame.char_at(39, 0) == "╮"
        assert frame.char_at(0, 7) == "╰"
        assert frame.char_at(39, 7) == "╯"
        assert frame.text_at(0, 0, 13) == "╭Description─"

    def test_title_truncated_between_corners(self, renderer, panel_data):
        """A title wider than the box is cut before the right corner."""
        frame = Frame(6, 3)
        renderer.render_panel(PanelKind.DESCRIPTION, Rect(0, 0, 6, 3), panel_data, frame)

        assert frame.plain_lines()[0] == "╭Desc╮"

    def test_values_not_computed(self, renderer, panel_data):
        """Missing statistics are shown as not computed."""
        frame = Frame(40, 8)
        renderer.render_panel(PanelKind.DESCRIPTION, Rect(0, 0, 40, 8), panel_data, frame)

        # Border (1) + left padding (2), top border (1) + top padding (1)
        assert frame.text_at(3, 2, 27) == "Minimal steps: not computed"
        assert frame.text_at(3, 3, 27) == "  Total paths: not computed"

    def test_values_from_collaborator(self, renderer, sample_grid):
        """Supplied statistics are rendered as numbers in the value style."""
        data = PanelData(grid=sample_grid, minimal_steps=14, total_paths=0)
        frame = Frame(40, 8)
        renderer.render_panel(PanelKind.DESCRIPTION, Rect(0, 0, 40, 8), data, frame)

        assert frame.text_at(3, 2, 17) == "Minimal steps: 14"
        assert frame.text_at(3, 3, 16) == "  Total paths: 0"
        assert frame.style_at(18, 2).bold
        assert frame.style_at(18, 2).fg == "32"
        assert not frame.style_at(3, 2).bold

    def test_too_short_for_content(self, renderer, frame, panel_data, screen):
        """At 80x24 the description box has no room inside its padding."""
        region = partition(screen).description
        renderer.render_panel(PanelKind.DESCRIPTION, region, panel_data, frame)

        assert frame.char_at(region.x, region.y) == "╭"
        assert "Minimal" not in "".join(frame.plain_lines())


class TestOptionsPanel:
    """Test the wrapped options text."""

    def test_wrapped_body(self, renderer, panel_data):
        """Options text is word-wrapped inside the padded area."""
        frame = Frame(40, 12)
        renderer.render_panel(PanelKind.OPTIONS, Rect(0, 0, 40, 12), panel_data, frame)

        # Inner width: 40 - 2 (border) - 15 (padding) = 23
        expected = wrap_text(panel_data.options_text, 23)
        assert expected[0] == "Lorem ipsum dolor sit"
        assert len(expected) == 6
        for offset, line in enumerate(expected):
            assert frame.text_at(6, 2 + offset, 23).rstrip() == line
        assert frame.text_at(0, 0, 9) == "╭Options─"

    def test_body_truncated_to_height(self, renderer, sample_grid):
        """Lines that do not fit the inner height are dropped."""
        data = PanelData(grid=sample_grid, options_text="one two three four five six")
        frame = Frame(20, 6)
        renderer.render_panel(PanelKind.OPTIONS, Rect(0, 0, 20, 6), data, frame)

        # Inner area: width 20 - 2 - 15 = 3, height 6 - 2 - 3 = 1
        assert frame.text_at(6, 2, 3) == "one"
        assert "two" not in "".join(frame.plain_lines())


class TestWrapText:
    """Test word wrapping."""

    def test_trims_and_collapses_whitespace(self):
        """Leading, trailing and repeated whitespace does not survive wrapping."""
        assert wrap_text("  hello   world  ", 5) == ["hello", "world"]

    def test_long_words_are_broken(self):
        """Words longer than the width are split."""
        assert wrap_text("abcdefgh", 3) == ["abc", "def", "gh"]

    @pytest.mark.parametrize("text,width", [("", 10), ("words", 0), ("words", -3)])
    def test_degenerate_inputs(self, text: str, width: int):
        """Empty text or no width gives no lines."""
        assert wrap_text(text, width) == []


class TestMapPanel:
    """Test the glyph grid."""

    def test_sample_map_positions(self, renderer, frame, panel_data, screen):
        """Markers and walls land on the expected screen cells at 80x24."""
        region = partition(screen).map
        renderer.render_panel(PanelKind.MAP, region, panel_data, frame)

        # Map region starts at (20, 1); border + padding put the grid at (26, 3)
        origin_x, origin_y = 26, 3
        assert frame.text_at(origin_x + 2 * 1, origin_y + 1, 2) == "A "
        assert frame.text_at(origin_x + 2 * 8, origin_y + 8, 2) == "B "
        for index in range(10):
            assert frame.text_at(origin_x + 2 * index, origin_y, 2) == "██"
            assert frame.text_at(origin_x + 2 * index, origin_y + 9, 2) == "██"
            assert frame.text_at(origin_x, origin_y + index, 2) == "██"
            assert frame.text_at(origin_x + 18, origin_y + index, 2) == "██"

    def test_rows_rendered_in_order(self, renderer, frame, panel_data, screen, sample_grid):
        """Each screen row shows the matching grid row."""
        renderer.render_panel(PanelKind.MAP, partition(screen).map, panel_data, frame)

        for row, line in enumerate(sample_grid.render_rows()):
            assert frame.text_at(26, 3 + row, 20) == line

    def test_map_title(self, renderer, frame, panel_data, screen):
        """The map box carries its title."""
        region = partition(screen).map
        renderer.render_panel(PanelKind.MAP, region, panel_data, frame)

        assert frame.text_at(region.x, region.y, 5) == "╭Map─"

    def test_map_clipped_to_inner_area(self, renderer):
        """Grid content wider or taller than the inner area is cut off."""
        grid = Grid.from_rows([[1] * 30 for _ in range(30)])
        frame = Frame(30, 10)
        region = Rect(0, 0, 30, 10)
        renderer.render_panel(PanelKind.MAP, region, PanelData(grid=grid), frame)

        # Inner area: x 6..19 (width 13), y 2..6 (height 5)
        assert frame.text_at(6, 2, 13) == "█" * 13
        assert frame.char_at(19, 2) == " "
        assert frame.text_at(6, 7, 13) == " " * 13

    def test_empty_grid(self, renderer):
        """An empty grid draws only the box."""
        frame = Frame(30, 10)
        renderer.render_panel(PanelKind.MAP, Rect(0, 0, 30, 10), PanelData(grid=Grid.from_rows([])), frame)

        assert frame.char_at(0, 0) == "╭"
        assert "█" not in "".join(frame.plain_lines())


class TestFooterPanel:
    """Test the help footer."""

    def test_double_border_and_help_text(self, renderer, frame, panel_data, screen):
        """Footer is a double box holding the help line."""
        region = partition(screen).footer
        renderer.render_panel(PanelKind.FOOTER, region, panel_data, frame)

        assert frame.char_at(0, 21) == "╔"
        assert frame.char_at(1, 21) == "═"
        assert frame.char_at(79, 23) == "╝"
        assert frame.char_at(0, 22) == "║"
        # The help line is wider than the 78-cell inner area, so it starts flush left
        assert frame.text_at(1, 22, 78) == DEFAULT_HELP_TEXT[:78]

    def test_short_help_is_centered(self, renderer, sample_grid):
        """Help text narrower than the footer is centred."""
        data = PanelData(grid=sample_grid, help_text="(q) quit")
        frame = Frame(20, 3)
        renderer.render_panel(PanelKind.FOOTER, Rect(0, 0, 20, 3), data, frame)

        # Inner width 18, text width 8: start at 1 + 5
        assert frame.text_at(6, 1, 8) == "(q) quit"

    def test_footer_background(self, renderer, frame, panel_data, screen):
        """The whole footer region carries the slate background."""
        region = partition(screen).footer
        renderer.render_panel(PanelKind.FOOTER, region, panel_data, frame)

        assert frame.style_at(40, 22).bg == renderer.styles["footer_text"].bg
        assert frame.style_at(40, 20).bg is None


class TestRenderingIsTotal:
    """Test degenerate inputs and region confinement."""

    @pytest.mark.parametrize("kind", list(PanelKind))
    @pytest.mark.parametrize("region", [
        Rect(0, 0, 0, 0),
        Rect(3, 3, 0, 5),
        Rect(3, 3, 5, 0),
    ])
    def test_empty_regions_draw_nothing(self, renderer, panel_data, kind, region):
        """Zero-sized regions leave the frame untouched."""
        frame = Frame(10, 10)
        renderer.render_panel(kind, region, panel_data, frame)

        assert list(painted_cells(frame)) == []

    @pytest.mark.parametrize("kind", [PanelKind.DESCRIPTION, PanelKind.OPTIONS, PanelKind.MAP])
    @pytest.mark.parametrize("region", [Rect(2, 2, 1, 1), Rect(2, 2, 1, 6), Rect(2, 2, 6, 1)])
    def test_regions_too_small_for_a_border(self, renderer, panel_data, kind, region):
        """Boxed panels need at least 2x2 cells and otherwise draw nothing."""
        frame = Frame(10, 10)
        renderer.render_panel(kind, region, panel_data, frame)

        assert frame.plain_lines() == [" " * 10] * 10

    @pytest.mark.parametrize("width,height", [(80, 24), (30, 10), (120, 40), (13, 7), (5, 5)])
    def test_panels_stay_inside_their_regions(self, renderer, panel_data, width: int, height: int):
        """Nothing a panel draws falls outside its assigned region."""
        for kind, region in partition(Rect(0, 0, width, height)).panels():
            frame = Frame(width, height)
            renderer.render_panel(kind, region, panel_data, frame)
            for x, y in painted_cells(frame):
                assert region.contains_point(x, y), f"{kind.name} drew at ({x}, {y}) outside {region}"

    def test_region_partly_off_screen(self, renderer, panel_data):
        """Regions extending past the frame are clipped by the frame."""
        frame = Frame(10, 5)
        renderer.render_panel(PanelKind.MAP, Rect(5, 2, 30, 30), panel_data, frame)

        assert frame.char_at(5, 2) == "╭"
