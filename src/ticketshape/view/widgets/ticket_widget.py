"""
Ticket Widget
A Qt container that paints the ticket background and hosts content on top.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QRectF, Signal
from PySide6.QtGui import QPainter, QPaintEvent
from PySide6.QtWidgets import QVBoxLayout, QWidget

from ticketshape.model.container import TicketContainer, compose
from ticketshape.view.qt_utils import QtUtils

logger = logging.getLogger(__name__)


class TicketWidget(QWidget):
    """
    Paints a TicketContainer as the widget background.

    If the container content is a QWidget it is laid out inside the ticket and
    drawn over the background without clipping; callable content is painted
    directly by `QtUtils.paint_layers`.
    """
    container_changed = Signal(object)

    def __init__(self, container: Optional[TicketContainer] = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._container = container if container is not None else TicketContainer()
        self._content_widget: QWidget | None = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self._attach_content()

    @property
    def container(self) -> TicketContainer:
        return self._container

    @property
    def content_widget(self) -> QWidget | None:
        return self._content_widget

    def set_container(self, container: TicketContainer) -> None:
        """Replace the configuration, swap hosted content if needed and repaint."""
        if container == self._container:
            return
        self._container = container
        self._attach_content()
        self.container_changed.emit(container)
        self.update()

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _attach_content(self) -> None:
        content = self._container.content
        new_widget = content if isinstance(content, QWidget) else None
        if new_widget is self._content_widget:
            return

        layout = self.layout()
        if self._content_widget is not None:
            layout.removeWidget(self._content_widget)
            self._content_widget.setParent(None)
        if new_widget is not None:
            layout.addWidget(new_widget)
            logger.debug(f"Hosting content widget {type(new_widget).__name__}")
        self._content_widget = new_widget

    def paintEvent(self, event: QPaintEvent) -> None:
        # Widget content is drawn by Qt as a child; only the background is painted here
        container = self._container
        if self._content_widget is not None:
            container = container.with_content(None)

        painter = QPainter(self)
        try:
            QtUtils.paint_layers(painter, compose(container, QtUtils.from_qrectf(QRectF(self.rect()))))
        finally:
            painter.end()
