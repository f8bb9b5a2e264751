"""BoardScene — QGraphicsScene that draws the board and pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsItem,
    QGraphicsLineItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from seasons.core.enums import PieceType, Player
from seasons.core.types import BOARD_SIZE, Square
from seasons.game.interfaces import IGameController
from seasons.ui.styles.theme import BoardTheme, piece_text_color, player_color

_CROSS_FROM = 2  # centre cross spans rows/cols 2..5
_CROSS_TO = BOARD_SIZE - 2


class BoardScene(QGraphicsScene):
    """Renders the board, highlights and pieces; owns click selection.

    Selection is a two-step state machine: the first click arms a piece
    the current player controls, the second click either fires
    ``move_requested`` (legal target), re-arms (another own piece),
    disarms (same cell) or clears (anything else).

    Signals:
        move_requested(Square, Square): A legal from/to pair was clicked.
    """

    move_requested = pyqtSignal(object, object)

    TILE = 80  # px per square

    def __init__(
        self, parent: QObject | None = None, tile: int | None = None
    ) -> None:
        super().__init__(parent)
        if tile is not None:
            self.TILE = tile
        self._theme = BoardTheme.default()
        self._controller: IGameController | None = None

        # Interaction state
        self._selected_sq: Square | None = None
        self._legal_targets: set[Square] = set()
        self._interactive = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._cross_items: list[QGraphicsLineItem] = []
        self._highlight_items: list[QGraphicsRectItem] = []
        self._legal_target_items: list[QGraphicsRectItem] = []
        self._check_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, list[QGraphicsItem]] = {}

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_controller(self, controller: IGameController) -> None:
        """Attach the game whose board is displayed (full redraw of pieces)."""
        self._controller = controller
        self.sync()

    def sync(self) -> None:
        """Redraw pieces and check markers from the controller's board."""
        self._clear_selection()
        self._sync_pieces()
        self._sync_check_highlights()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable piece interaction."""
        self._interactive = interactive
        if not interactive:
            self._clear_selection()

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-target highlights."""
        self._show_legal_moves = visible
        if not visible:
            self._clear_items(self._legal_target_items)

    @property
    def selected_square(self) -> Square | None:
        return self._selected_sq

    @property
    def legal_targets(self) -> set[Square]:
        return set(self._legal_targets)

    def handle_click(self, sq: Square) -> None:
        """Advance the select → target state machine with a click on *sq*."""
        ctrl = self._controller
        if not self._interactive or ctrl is None:
            return

        if self._selected_sq is None:
            if ctrl.can_control(sq):
                self._select_square(sq)
            return

        if sq == self._selected_sq:
            self._clear_selection()
            return

        if sq in self._legal_targets:
            from_sq = self._selected_sq
            self._clear_selection()
            self.move_requested.emit(from_sq, sq)
            return

        if ctrl.can_control(sq):
            self._select_square(sq)
        else:
            self._clear_selection()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw the 64 squares and the centre cross."""
        t = self.TILE
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                is_dark = (row + col) % 2 == 1
                color = self._theme.dark_square if is_dark else self._theme.light_square
                rect = QGraphicsRectItem(col * t, row * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items[(row, col)] = rect

        # The cross stroke alternates colour with the squares it crosses.
        lo, hi = _CROSS_FROM * t, _CROSS_TO * t
        width = max(2, t // 8)
        for x1, y1, x2, y2, color in (
            (lo, lo, hi, hi, self._theme.cross_main),
            (hi, lo, lo, hi, self._theme.cross_anti),
        ):
            line = QGraphicsLineItem(x1, y1, x2, y2)
            pen = QPen(color)
            pen.setWidth(width)
            line.setPen(pen)
            line.setZValue(0.2)
            self.addItem(line)
            self._cross_items.append(line)

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the controller's board."""
        for items in self._piece_items.values():
            for item in items:
                self.removeItem(item)
        self._piece_items.clear()

        if self._controller is None:
            return

        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                info = self._controller.piece_at((row, col))
                if info is not None:
                    self._piece_items[(row, col)] = self._make_piece(
                        row, col, info.piece_type, info.controller, info.owner
                    )

    def _make_piece(
        self,
        row: int,
        col: int,
        piece_type: PieceType,
        controller: Player,
        owner: Player,
    ) -> list[QGraphicsItem]:
        t = self.TILE
        margin = t / 8
        size = t - 2 * margin
        x, y = col * t + margin, row * t + margin

        shadow = QGraphicsEllipseItem(x + 2, y + 2, size, size)
        shadow.setBrush(QBrush(self._theme.piece_shadow))
        shadow.setPen(QPen(Qt.PenStyle.NoPen))
        shadow.setZValue(1)

        disc = QGraphicsEllipseItem(x, y, size, size)
        disc.setBrush(QBrush(player_color(controller)))
        # Inherited pieces keep a ring in their original owner's colour.
        ring = QPen(player_color(owner))
        ring.setWidth(4 if controller != owner else 1)
        disc.setPen(ring)
        disc.setZValue(1.1)

        label = QGraphicsSimpleTextItem(piece_type.symbol)
        font = QFont("Arial", max(8, t // 5))
        font.setBold(True)
        label.setFont(font)
        label.setBrush(QBrush(piece_text_color(controller)))
        bounds = label.boundingRect()
        label.setPos(
            col * t + (t - bounds.width()) / 2,
            row * t + (t - bounds.height()) / 2,
        )
        label.setZValue(1.2)

        items: list[QGraphicsItem] = [shadow, disc, label]
        for item in items:
            self.addItem(item)
        return items

    def _sync_check_highlights(self) -> None:
        """Mark every king whose controller is currently in check."""
        self._clear_items(self._check_items)
        ctrl = self._controller
        if ctrl is None:
            return
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                info = ctrl.piece_at((row, col))
                if (
                    info is not None
                    and info.piece_type == PieceType.KING
                    and ctrl.is_in_check(info.controller)
                ):
                    rect = self._make_highlight((row, col), self._theme.highlight_check)
                    rect.setZValue(0.6)
                    self._check_items.append(rect)

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is None:
            self._clear_selection()
        else:
            self.handle_click(sq)
        super().mousePressEvent(event)

    # ── Selection / highlights ───────────────────────────────────────────

    def _select_square(self, sq: Square) -> None:
        self._clear_selection()
        self._selected_sq = sq
        origin = self._make_highlight(sq, self._theme.highlight_from)
        self._highlight_items.append(origin)

        if self._controller is not None:
            self._legal_targets = self._controller.legal_moves(sq)
        if self._show_legal_moves:
            for target in sorted(self._legal_targets):
                self._legal_target_items.append(
                    self._make_highlight(target, self._theme.highlight_to)
                )

    def _clear_selection(self) -> None:
        self._selected_sq = None
        self._legal_targets = set()
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_target_items)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        return row, col

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        row, col = sq
        rect = QGraphicsRectItem(col * t, row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
