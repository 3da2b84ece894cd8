"""
Test Suite for SFEN Preview
===========================

Run with: python -m pytest sfen_preview/tests/test_all.py -v
"""

import inspect
import io
import logging
import threading
import xml.etree.ElementTree as ET

import pytest
import numpy as np
from PIL import Image

# Core imports
from sfen_preview.core.pieces import Piece, PieceType, Player, HAND_ORDER, PIECE_SYMBOLS
from sfen_preview.core.board import Board, Hand, Square, BOARD_SIZE
from sfen_preview.core.position import create_initial_position
from sfen_preview.core.errors import SfenNotFoundError, MalformedSfenError
from sfen_preview.core.locator import find_sfen, locate, hover_text
from sfen_preview.core.sfen import parse_sfen, decode, encode

# Rendering imports
from sfen_preview.render.instructions import Diagram, FilledRect, Glyph, Line, Tile, TileRef
from sfen_preview.render.layout import RenderOptions, layout
from sfen_preview.render.svg import SvgBackend
from sfen_preview.render.raster import RasterBackend

# Pipeline imports
from sfen_preview.config import PreviewConfig
from sfen_preview.preview import Preview, SfenPreviewer, render_sfen_preview


START_SFEN = "lnsgkgsnl/1r5b1/ppppppppp/9/9/9/PPPPPPPPP/1B5R1/LNSGKGSNL b - 1"
MIDGAME_SFEN = "lnsgk2nl/1r4gs1/p1pppp1pp/1p4p2/7P1/2P6/PP1PPPP1P/1SG4R1/LN2KGSNL b Bb 15"
TSUME_SFEN = "8l/1l+R2P3/p2pBG1pp/kps1p4/Nn1P2G2/P1P1P2PP/1PS6/1KSG3+r1/LN2N3L w BGS2Pp 1"
EMPTY_BOARD = "9/9/9/9/9/9/9/9/9"


def board_glyphs(diagram: Diagram, options: RenderOptions):
    """Glyphs drawn inside the board columns."""
    c = options.cell_size
    return [g for g in diagram.of_type(Glyph) if c < g.x < (BOARD_SIZE + 1) * c]


def stack_glyphs(diagram: Diagram, options: RenderOptions):
    """Glyphs in the hand columns other than the two hand markers."""
    markers = {Player.SENTE.mark, Player.GOTE.mark}
    return [
        g for g in diagram.of_type(Glyph)
        if g not in board_glyphs(diagram, options) and g.text not in markers
    ]


class TestPieces:
    """Test piece tables."""

    def test_player_opponent(self):
        assert Player.SENTE.opponent() == Player.GOTE
        assert Player.GOTE.opponent() == Player.SENTE

    def test_player_marks(self):
        assert Player.SENTE.mark == "☗"
        assert Player.GOTE.mark == "☖"

    def test_fourteen_kinds_with_distinct_glyphs(self):
        assert len(PieceType) == 14
        assert len(set(PIECE_SYMBOLS.values())) == 14

    def test_promotion_and_demotion(self):
        assert PieceType.PAWN.promoted_form() == PieceType.TOKIN
        assert PieceType.PROMOTED_LANCE.demoted_form() == PieceType.LANCE
        assert PieceType.KING.promoted_form() is None
        assert not PieceType.GOLD.can_promote()
        assert PieceType.PROMOTED_ROOK.is_promoted()

    def test_piece_from_sfen(self):
        assert Piece.from_sfen("P") == Piece(PieceType.PAWN, Player.SENTE)
        assert Piece.from_sfen("+r") == Piece(PieceType.PROMOTED_ROOK, Player.GOTE)
        assert Piece.from_sfen("k") == Piece(PieceType.KING, Player.GOTE)

    def test_piece_from_sfen_rejects(self):
        for token in ["x", "+G", "+k", "+", "1", "ſ", "+ſ"]:
            with pytest.raises(ValueError):
                Piece.from_sfen(token)

    def test_piece_sfen_token(self):
        assert Piece(PieceType.TOKIN, Player.GOTE).sfen == "+p"
        assert Piece(PieceType.SILVER, Player.SENTE).sfen == "S"

    def test_promoted_from_sfen(self):
        tokin = Piece.from_sfen("+p")

        assert tokin.piece_type == PieceType.TOKIN
        assert tokin.owner == Player.GOTE
        assert tokin.piece_type.demoted_form() == PieceType.PAWN


class TestBoard:
    """Test board and hand containers."""

    def test_initial_position(self):
        position = create_initial_position()

        assert position.board.piece_count() == 40
        assert position.board.piece_count(Player.SENTE) == 20
        assert position.board.piece_count(Player.GOTE) == 20
        assert position.turn == Player.SENTE

    def test_square_file_rank(self):
        sq = Square(0, 0)
        assert sq.file == 9
        assert sq.rank == 1
        assert Square.from_file_rank(1, 9) == Square(8, 8)

    def test_board_shape_enforced(self):
        with pytest.raises(ValueError):
            Board(grid=((None,) * 9,) * 8)
        with pytest.raises(ValueError):
            Board(grid=((None,) * 8,) * 9)

    def test_to_array(self):
        board = create_initial_position().board
        array = board.to_array()

        assert array.shape == (BOARD_SIZE, BOARD_SIZE)
        assert array[8, 4] == PieceType.KING.value
        assert array[0, 4] == -PieceType.KING.value
        assert np.count_nonzero(array[3:6]) == 0

    def test_hand_counts(self):
        hand = Hand.from_counts({PieceType.ROOK: 1, PieceType.PAWN: 3})

        assert hand.count(PieceType.PAWN) == 3
        assert hand.count(PieceType.TOKIN) == 0
        assert hand.total() == 4
        # Canonical order: pawn before rook
        assert list(hand.items()) == [(PieceType.PAWN, 3), (PieceType.ROOK, 1)]

    def test_hand_rejects_promoted_and_negative(self):
        with pytest.raises(ValueError):
            Hand.from_counts({PieceType.TOKIN: 1})
        with pytest.raises(ValueError):
            Hand((-1,) + (0,) * (len(HAND_ORDER) - 1))

    def test_position_is_immutable(self):
        position = create_initial_position()
        with pytest.raises(Exception):
            position.turn = Player.GOTE


class TestLocator:
    """Test finding SFEN in free text."""

    def test_not_found(self):
        for text in ["", "hello world", "a/b/c", "1/2/3/4/5/6/7/8", "1/2/3/4/5/6/7/8/9/10"]:
            assert find_sfen(text) is None
            with pytest.raises(SfenNotFoundError):
                locate(text)

    def test_found_with_surrounding_text(self):
        sfen = locate("foo " + START_SFEN + " bar")

        assert sfen.startswith(START_SFEN)
        # Trailing words are kept; the decoder ignores them
        assert sfen == START_SFEN + " bar"

    def test_whitespace_runs_collapse(self):
        text = "foo   lnsgkgsnl/1r5b1/ppppppppp/9/9/9/PPPPPPPPP/1B5R1/LNSGKGSNL  b \t - 1"
        assert locate(text) == START_SFEN

    def test_invalid_content_still_found(self):
        assert locate("x a/b/c/d/e/f/g/h/i y") == "a/b/c/d/e/f/g/h/i y"

    def test_first_candidate_wins(self):
        text = START_SFEN + " then " + MIDGAME_SFEN
        assert locate(text).startswith(START_SFEN)

    def test_hover_text(self):
        line = "  sfen: " + START_SFEN + "; next"
        column = line.index("PPPPPPPPP")
        text = hover_text(line, column)

        assert text is not None
        assert locate(text) == START_SFEN
        assert hover_text(line, line.index(";")) is None


class TestDecoder:
    """Test SFEN decoding."""

    def test_start_position(self):
        position = decode(START_SFEN)

        assert position.board.piece_count() == 40
        assert position.sente_hand.is_empty()
        assert position.gote_hand.is_empty()
        assert position.turn == Player.SENTE
        assert position == create_initial_position()

    def test_file_orientation(self):
        board = decode(START_SFEN).board

        assert board.get_piece(Square.from_file_rank(5, 1)) == Piece(PieceType.KING, Player.GOTE)
        assert board.get_piece(Square.from_file_rank(2, 8)) == Piece(PieceType.ROOK, Player.SENTE)
        assert board.get_piece(Square.from_file_rank(8, 8)) == Piece(PieceType.BISHOP, Player.SENTE)
        assert board.get_piece(Square.from_file_rank(8, 2)) == Piece(PieceType.ROOK, Player.GOTE)

    def test_promoted_pieces(self):
        position = decode(TSUME_SFEN)
        board = position.board

        assert board.get_piece(Square(1, 2)) == Piece(PieceType.PROMOTED_ROOK, Player.SENTE)
        assert board.get_piece(Square(7, 7)) == Piece(PieceType.PROMOTED_ROOK, Player.GOTE)
        assert position.turn == Player.GOTE

    def test_hands(self):
        position = decode(f"{EMPTY_BOARD} w 2Pp 1")

        assert position.sente_hand.count(PieceType.PAWN) == 2
        assert position.gote_hand.count(PieceType.PAWN) == 1
        assert position.turn == Player.GOTE

    def test_hand_counts_multi_digit_and_explicit_one(self):
        position = decode(f"{EMPTY_BOARD} b 18P1rP2b -")

        assert position.sente_hand.count(PieceType.PAWN) == 19
        assert position.gote_hand.count(PieceType.ROOK) == 1
        assert position.gote_hand.count(PieceType.BISHOP) == 2

    def test_trailing_fields_ignored(self):
        assert decode(START_SFEN + " extra words here") == decode(START_SFEN)
        assert decode(START_SFEN[:-2]) == decode(START_SFEN)

    @pytest.mark.parametrize("board", [
        "9p/9/9/9/9/9/9/9/9",
        "8/9/9/9/9/9/9/9/9",
        "9/9/9/9/9/9/9/9/",
        "ppppppppp1/9/9/9/9/9/9/9/9",
        "0/9/9/9/9/9/9/9/9",
        "x8/9/9/9/9/9/9/9/9",
        "+G8/9/9/9/9/9/9/9/9",
        "8+/9/9/9/9/9/9/9/9",
        "²7/9/9/9/9/9/9/9/9",
        "９/9/9/9/9/9/9/9/9",
        "ſ8/9/9/9/9/9/9/9/9",
    ])
    def test_malformed_board(self, board):
        result = parse_sfen(f"{board} b - 1")

        assert not result.ok
        assert result.field == "board"
        with pytest.raises(MalformedSfenError):
            decode(f"{board} b - 1")

    def test_malformed_turn(self):
        with pytest.raises(MalformedSfenError) as excinfo:
            decode(f"{EMPTY_BOARD} x - 1")
        assert excinfo.value.field == "turn"

    @pytest.mark.parametrize("hands", ["3", "+P", "0P", "Z", "2x", "01P", "²P", "２P", "ſ"])
    def test_malformed_hands(self, hands):
        result = parse_sfen(f"{EMPTY_BOARD} b {hands} 1")

        assert not result.ok
        assert result.field == "hands"

    def test_missing_fields(self):
        assert parse_sfen(EMPTY_BOARD).field == "turn"
        assert parse_sfen(f"{EMPTY_BOARD} b").field == "hands"
        assert parse_sfen("").field == "board"

    def test_unreachable_position_decodes(self):
        # No kings, nine rooks: structurally fine
        position = decode("RRRRRRRRR/9/9/9/9/9/9/9/9 b - 1")
        assert position.board.piece_count(Player.SENTE) == 9


class TestEncoder:
    """Test writing positions back to SFEN."""

    @pytest.mark.parametrize("sfen", [START_SFEN, MIDGAME_SFEN, TSUME_SFEN])
    def test_round_trip(self, sfen):
        position = decode(sfen)
        move_number = int(sfen.split()[-1])

        assert encode(position, move_number) == sfen
        assert decode(encode(position)) == position

    def test_to_sfen(self):
        assert create_initial_position().to_sfen(1) == START_SFEN

    def test_empty_hands_written_as_dash(self):
        assert encode(decode(f"{EMPTY_BOARD} w - 3")) == f"{EMPTY_BOARD} w -"


class TestLayout:
    """Test diagram geometry."""

    def setup_method(self):
        self.options = RenderOptions(cell_size=40)
        self.start = decode(START_SFEN)

    def test_derived_measurements(self):
        assert self.options.board_font_size == 30
        assert self.options.hand_height == 30
        assert self.options.hand_font_size == 24
        assert self.options.width == 444
        assert self.options.default_height == 361

        options = RenderOptions.from_font_size(30)
        assert options.cell_size == 40
        assert RenderOptions(cell_size=40, font_size=20).board_font_size == 20

    def test_start_position(self):
        diagram = layout(self.start, self.options)

        assert len(diagram.of_type(Line)) == 20
        assert len(board_glyphs(diagram, self.options)) == 40
        assert stack_glyphs(diagram, self.options) == []
        assert diagram.width == 444
        assert diagram.height == 361

    def test_gote_pieces_rotated(self):
        glyphs = board_glyphs(layout(self.start, self.options), self.options)

        assert sum(g.rotated180 for g in glyphs) == 20
        # Upper half belongs to GOTE
        assert all(g.rotated180 == (g.y < 4 * 40) for g in glyphs)

    def test_glyph_centred_in_cell(self):
        glyphs = board_glyphs(layout(self.start, self.options), self.options)
        gote_king = [g for g in glyphs if g.piece_type == PieceType.KING and g.rotated180][0]

        # File 5 is column 4, drawn in canvas column 5
        assert (gote_king.x, gote_king.y) == (5 * 40 + 20, 20)

    def test_highlight_follows_turn(self):
        rects = layout(self.start, self.options).of_type(FilledRect)
        assert len(rects) == 1
        assert rects[0].x == self.options.highlight_x(Player.SENTE)
        assert rects[0].x >= 10 * 40

        gote_to_move = decode(START_SFEN.replace(" b ", " w "))
        rects = layout(gote_to_move, self.options).of_type(FilledRect)
        assert rects[0].x == 0

    def test_emission_order(self):
        instructions = layout(self.start, self.options).instructions
        kinds = [type(i) for i in instructions]

        assert kinds[:20] == [Line] * 20
        assert kinds[20] == FilledRect
        assert all(kind == Glyph for kind in kinds[21:])

    def test_hand_stack(self):
        position = decode(f"{EMPTY_BOARD} b 2PLr 1")
        diagram = layout(position, self.options)
        stack = stack_glyphs(diagram, self.options)
        sente = [g for g in stack if g.x > 10 * 40]
        gote = [g for g in stack if g.x < 40]

        assert [g.text for g in sente] == ["歩", "2", "香"]
        assert [g.text for g in gote] == ["飛"]
        assert [g.y for g in sente] == [45, 75, 105]
        assert not any(g.rotated180 for g in stack)

    def test_single_piece_has_no_numeral(self):
        diagram = layout(decode(f"{EMPTY_BOARD} b P 1"), self.options)
        assert [g.text for g in stack_glyphs(diagram, self.options)] == ["歩"]

    def test_tall_hand_grows_canvas(self):
        start_height = layout(self.start, self.options).height
        position = decode(f"{EMPTY_BOARD} b 2R2B4G4S4N4L18P 1")
        diagram = layout(position, self.options)

        assert diagram.height > start_height
        assert diagram.height == (14 + 2) * self.options.hand_height
        assert "18" in [g.text for g in diagram.of_type(Glyph)]

    def test_one_kind_keeps_default_height(self):
        diagram = layout(decode(f"{EMPTY_BOARD} b 18P 1"), self.options)

        assert diagram.height == self.options.default_height
        assert [g.text for g in stack_glyphs(diagram, self.options)] == ["歩", "18"]

    def test_tiles(self):
        options = RenderOptions(cell_size=40, use_tiles=True)
        diagram = layout(self.start, options)
        tiles = diagram.of_type(Tile)

        assert len(tiles) == 40
        assert board_glyphs(diagram, options) == []
        assert all(t.x % 40 == 0 and t.y % 40 == 0 for t in tiles)

    def test_idempotent(self):
        position = decode(TSUME_SFEN)
        first = layout(position, self.options)
        second = layout(position, self.options)

        assert first == second
        assert SvgBackend().render(first) == SvgBackend().render(second)


class TestSvgBackend:
    """Test SVG output."""

    def test_document(self):
        svg = SvgBackend().render(layout(decode(START_SFEN))).decode("utf-8")
        root = ET.fromstring(svg)
        ns = "{http://www.w3.org/2000/svg}"

        assert root.get("width") == "444"
        assert root.get("height") == "361"
        assert len(root.findall(f"{ns}line")) == 20
        assert len(root.findall(f"{ns}rect")) == 1
        assert len(root.findall(f"{ns}text")) == 42
        assert svg.count("rotate(180") == 20
        assert "#ffff0066" in svg

    def test_tiles_drawn_as_text(self):
        options = RenderOptions(use_tiles=True)
        with_tiles = SvgBackend().render(layout(decode(START_SFEN), options))
        with_glyphs = SvgBackend().render(layout(decode(START_SFEN)))

        assert with_tiles == with_glyphs

    def test_text_escaped(self):
        diagram = Diagram(10, 10, (Glyph("<&>", 5, 5, 4, "black"),))
        svg = SvgBackend().render(diagram).decode("utf-8")

        assert "&lt;&amp;&gt;" in svg
        ET.fromstring(svg)

    def test_rotation_about_glyph_centre(self):
        diagram = Diagram(100, 100, (Glyph("歩", 60, 20, 30, "black", rotated180=True),))
        svg = SvgBackend().render(diagram).decode("utf-8")

        assert 'x="60" y="20"' in svg
        assert 'rotate(180 60 20)' in svg


class TestRasterBackend:
    """Test PNG output and tile caching."""

    def test_png(self):
        backend = RasterBackend()
        data = backend.render(layout(decode(START_SFEN), RenderOptions(use_tiles=True)))

        assert data.startswith(b"\x89PNG")
        image = Image.open(io.BytesIO(data))
        assert image.size == (444, 361)
        assert image.mode == "RGBA"

    def test_fractional_canvas_rounds_up(self):
        options = RenderOptions.from_font_size(20)
        array = RasterBackend().render_array(layout(decode(START_SFEN), options))

        assert array.shape == (int(np.ceil(options.default_height)), int(np.ceil(options.width)), 4)

    def test_translucent_rect(self):
        diagram = Diagram(20, 20, (FilledRect(0, 0, 10, 10, "#ffff0066"),))
        array = RasterBackend().render_array(diagram)

        assert np.allclose(array[5, 5], [255, 255, 0, 102], atol=2)
        assert array[15, 15, 3] == 0

    def test_line(self):
        diagram = Diagram(20, 20, (Line(0, 5, 19, 5, "black"),))
        array = RasterBackend().render_array(diagram)

        assert array[5, 10, 3] == 255
        assert array[10, 10, 3] == 0

    def test_tile_cache_reused(self):
        backend = RasterBackend()
        diagram = layout(decode(START_SFEN), RenderOptions(use_tiles=True))

        backend.render(diagram)
        # 8 kinds per side, upright and rotated
        assert len(backend.tiles) == 16

        ref = diagram.of_type(Tile)[0].image_ref
        tile = backend.tiles.get(ref)
        backend.render(diagram)
        assert len(backend.tiles) == 16
        assert backend.tiles.get(ref) is tile

    def test_glyph_mode_builds_no_tiles(self):
        backend = RasterBackend()
        backend.render(layout(decode(START_SFEN)))
        assert len(backend.tiles) == 0

    def test_rotated_tile_is_upright_tile_turned(self):
        backend = RasterBackend()
        upright = TileRef(PieceType.PAWN, False, 40, 30, "black")
        rotated = TileRef(PieceType.PAWN, True, 40, 30, "black")

        expected = np.array(backend.tiles.get(upright).rotate(180))
        assert np.array_equal(np.array(backend.tiles.get(rotated)), expected)

    def test_concurrent_first_use(self):
        backend = RasterBackend()
        ref = TileRef(PieceType.ROOK, False, 40, 30, "black")
        results = []

        def fetch():
            results.append(backend.tiles.get(ref))

        threads = [threading.Thread(target=fetch) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(backend.tiles) == 1
        assert all(tile is results[0] for tile in results)


class TestConfig:
    """Test preview configuration."""

    def test_defaults(self):
        config = PreviewConfig()
        assert config.text_color == "default"
        assert config.font_size == 30
        assert config.accepts("anything.txt")

    def test_from_dict(self):
        config = PreviewConfig.from_dict({
            "sfen-viewer.text-color": "white",
            "sfen-viewer.font-size": 24,
            "sfen-viewer.file-selector": ["*.kif", "*.sfen"],
            "editor.fontSize": 14,
        })

        assert config.text_color == "white"
        assert config.font_size == 24
        assert config.accepts("games/a.sfen")
        assert not config.accepts("notes.md")
        assert not config.accepts(None)
        assert PreviewConfig.from_dict(config.to_dict()) == config

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            PreviewConfig(text_color="purple")
        with pytest.raises(ValueError):
            PreviewConfig(font_size=0)

    def test_text_color_resolution(self):
        assert PreviewConfig(text_color="default").resolve_text_color(True) == "white"
        assert PreviewConfig(text_color="default").resolve_text_color(False) == "black"
        assert PreviewConfig(text_color="white").resolve_text_color(False) == "white"
        assert PreviewConfig(text_color="black").resolve_text_color(True) == "black"

    def test_render_options(self):
        options = PreviewConfig(font_size=30).render_options(theme_is_dark=True, use_tiles=True)

        assert options.cell_size == 40
        assert options.board_font_size == 30
        assert options.text_color == "white"
        assert options.use_tiles


class TestPreview:
    """Test the end-to-end preview pipeline."""

    def test_svg_preview(self):
        preview = render_sfen_preview("see " + START_SFEN)

        assert isinstance(preview, Preview)
        assert preview.mime_type == "image/svg+xml"
        assert preview.data_uri().startswith("data:image/svg+xml;base64,")
        assert preview.markdown().startswith("![](data:image/svg+xml;base64,")

    def test_png_preview(self):
        preview = render_sfen_preview(START_SFEN, backend=RasterBackend())

        assert preview.mime_type == "image/png"
        assert preview.data.startswith(b"\x89PNG")

    def test_no_preview_for_plain_text(self):
        assert render_sfen_preview("just some words") is None

    def test_no_preview_for_malformed_sfen(self):
        assert render_sfen_preview(f"{EMPTY_BOARD} q - 1") is None
        assert render_sfen_preview("9p/9/9/9/9/9/9/9/9 b - 1") is None
        assert render_sfen_preview(f"{EMPTY_BOARD} b ²P 1") is None
        assert render_sfen_preview("²7/9/9/9/9/9/9/9/9 b - 1") is None

    def test_failure_does_not_affect_next_request(self):
        previewer = SfenPreviewer(backend=RasterBackend())

        assert previewer.render("8/9/9/9/9/9/9/9/9 b - 1") is None
        assert previewer.render(START_SFEN) is not None

    def test_file_selector(self):
        previewer = SfenPreviewer(PreviewConfig(file_selector=["*.kif"]))

        assert previewer.render(START_SFEN, filename="notes.txt") is None
        assert previewer.render(START_SFEN, filename="game.kif") is not None

    def test_theme_colour(self):
        previewer = SfenPreviewer(PreviewConfig(text_color="default"))

        dark = previewer.render(START_SFEN, dark_theme=True).data.decode("utf-8")
        light = previewer.render(START_SFEN, dark_theme=False).data.decode("utf-8")
        assert 'stroke="white"' in dark
        assert 'stroke="black"' in light

    def test_previewer_uses_tiles_for_raster(self):
        backend = RasterBackend()
        previewer = SfenPreviewer(backend=backend)

        assert previewer.options().use_tiles
        previewer.render(START_SFEN)
        assert len(backend.tiles) == 16

    def test_failures_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="sfen_preview"):
            render_sfen_preview("nothing to see")
        assert "string contains no SFEN" in caplog.text


def run_all_tests():
    """Run all tests manually."""
    print("Running SFEN Preview Tests...")

    test_classes = [
        TestPieces,
        TestBoard,
        TestLocator,
        TestDecoder,
        TestEncoder,
        TestLayout,
        TestSvgBackend,
        TestRasterBackend,
        TestConfig,
        TestPreview,
    ]

    total_passed = 0
    total_failed = 0

    for test_class in test_classes:
        print(f"\n{test_class.__name__}:")
        instance = test_class()

        for method_name in dir(instance):
            if not method_name.startswith("test_"):
                continue
            method = getattr(instance, method_name)
            # Parametrized and fixture-based tests need pytest
            if inspect.signature(method).parameters:
                continue
            try:
                if hasattr(instance, "setup_method"):
                    instance.setup_method()
                method()
                print(f"  ✓ {method_name}")
                total_passed += 1
            except Exception as e:
                print(f"  ✗ {method_name}: {e}")
                total_failed += 1

    print(f"\n{'='*50}")
    print(f"Results: {total_passed} passed, {total_failed} failed")

    return total_failed == 0


if __name__ == "__main__":
    success = run_all_tests()
    exit(0 if success else 1)
