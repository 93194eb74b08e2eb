"""Background graph building using QThread."""

import logging
from typing import Callable

from PyQt6.QtCore import QThread, pyqtSignal

from slidespace.errors import SlidespaceError
from slidespace.layout.engine import LayoutConfig
from slidespace.model.board import Board
from slidespace.pipeline import GraphLayout, build_graph
from slidespace.settings import SearchSettings

logger = logging.getLogger(__name__)


class ExplorationWorker(QThread):
    """Worker thread that runs search and layout as one unit of work.

    The computation has no internal cancellation point; a caller that gives
    up on a worker should disconnect from it and discard its result.
    """

    # Signals
    progress = pyqtSignal(str)  # Emits status messages
    completed = pyqtSignal(object)  # Emits GraphLayout when done
    error = pyqtSignal(str)  # Emits error messages

    def __init__(
        self,
        board: Board,
        search: SearchSettings | None = None,
        layout: LayoutConfig | None = None,
    ) -> None:
        """Initialize the worker.

        Args:
            board: Board to explore
            search: Search parameters
            layout: Layout parameters
        """
        super().__init__()
        self.board = board
        self.search = search or SearchSettings()
        self.layout = layout or LayoutConfig()
        self.result: GraphLayout | None = None

    def run(self) -> None:
        """Run the pipeline."""
        self.progress.emit("Solving puzzle...")
        try:
            self.result = build_graph(self.board, self.search, self.layout)
        except SlidespaceError as e:
            logger.error(f"Graph build failed: {e}")
            self.error.emit(str(e))
            return
        self.progress.emit(self.result.status)
        self.completed.emit(self.result)


class GraphBuilder:
    """High-level interface for building graphs synchronously or in the background."""

    def __init__(self, search: SearchSettings | None = None, layout: LayoutConfig | None = None) -> None:
        self.search = search or SearchSettings()
        self.layout = layout or LayoutConfig()
        self._worker: ExplorationWorker | None = None

    def build(self, board: Board) -> GraphLayout:
        """Synchronously build the graph for a board."""
        return build_graph(board, self.search, self.layout)

    def build_async(
        self,
        board: Board,
        on_progress: Callable[[str], None] | None = None,
        on_finished: Callable[[GraphLayout], None] | None = None,
        on_error: Callable[[str], None] | None = None,
    ) -> ExplorationWorker:
        """Build the graph for a board on a worker thread.

        Args:
            board: Board to explore
            on_progress: Callback for status messages
            on_finished: Callback with the finished GraphLayout
            on_error: Callback for errors

        Returns:
            The started worker thread
        """
        self._worker = ExplorationWorker(board, self.search, self.layout)

        if on_progress is not None:
            self._worker.progress.connect(on_progress)
        if on_finished is not None:
            self._worker.completed.connect(on_finished)
        if on_error is not None:
            self._worker.error.connect(on_error)

        self._worker.start()
        return self._worker

    def wait(self) -> None:
        """Block until the running worker, if any, has finished."""
        if self._worker is not None:
            self._worker.wait()
