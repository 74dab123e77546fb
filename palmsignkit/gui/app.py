from __future__ import annotations
import sys
import logging
import cv2
import numpy as np
from typing import Optional

from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QComboBox, QMessageBox, QFrame
)
from PySide6.QtCore import QThread, Signal, Qt
from PySide6.QtGui import QImage, QPixmap
import qdarkstyle

from ..config import DEFAULT_CONFIG_PATH, AppConfig, load_config
from ..hand.landmarks import HandLandmarks
from ..hand.gestures import classify_frame
from ..io.camera import frames
from ..logs import setup_logging
from .overlay import panel_texts, render

logger = logging.getLogger(__name__)


class HandWorker(QThread):
    """Worker thread running capture, tracking and classification."""

    frame_ready = Signal(np.ndarray, list)  # annotated frame, GestureResults
    error_occurred = Signal(str)

    def __init__(self, cfg: AppConfig, camera_index: int):
        super().__init__()
        self.cfg = cfg
        self.camera_index = camera_index
        self.running = False

    def start_capture(self):
        self.running = True
        self.start()

    def stop_capture(self):
        self.running = False
        self.wait()

    def run(self):
        cam = self.cfg.camera
        hands = None
        try:
            hands = HandLandmarks.from_config(self.cfg.tracker)
            for f in frames(self.camera_index, cam.width, cam.height, should_stop=lambda: not self.running):
                frame = f["image"]
                hs = hands(frame)
                results = classify_frame([h["pts"] for h in hs])
                render(frame, hs, results)
                self.frame_ready.emit(frame, results)
        except Exception as e:
            logger.exception("capture failed")
            self.error_occurred.emit(str(e))
        finally:
            if hands: hands.close()


class HandPreview(QLabel):
    """Camera feed with the skeleton overlay already drawn into the frame."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setMinimumSize(640, 480)
        self.setStyleSheet("border: 1px solid gray; background-color: black;")
        self.setAlignment(Qt.AlignCenter)
        self.clear_feed()

    def clear_feed(self):
        self.clear()
        self.setText("No camera feed")

    def update_frame(self, frame: np.ndarray):
        rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        h, w, ch = rgb.shape
        img = QImage(rgb.data, w, h, ch * w, QImage.Format_RGB888)
        pixmap = QPixmap.fromImage(img)
        self.setPixmap(pixmap.scaled(self.size(), Qt.KeepAspectRatio, Qt.SmoothTransformation))


class PalmSignGUI(QMainWindow):
    """Start/stop window showing the detected gesture and its translation."""

    def __init__(self, cfg: Optional[AppConfig] = None):
        super().__init__()
        self.cfg = cfg or AppConfig()
        self.worker: Optional[HandWorker] = None
        self.setup_ui()
        self.setup_connections()

    def setup_ui(self):
        self.setWindowTitle("PalmSign - Hand Gesture Translator")
        self.setGeometry(100, 100, 900, 700)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        self.preview = HandPreview()
        layout.addWidget(self.preview)

        controls = QFrame()
        controls.setFrameStyle(QFrame.StyledPanel)
        controls_layout = QHBoxLayout(controls)
        self.start_btn = QPushButton("▶ Start")
        self.start_btn.setStyleSheet("background-color: #4CAF50; color: white; font-weight: bold; padding: 8px;")
        self.stop_btn = QPushButton("⏹ Stop")
        self.stop_btn.setStyleSheet("background-color: #f44336; color: white; font-weight: bold; padding: 8px;")
        self.stop_btn.setEnabled(False)
        self.camera_combo = QComboBox()
        self.camera_combo.addItems([f"Camera {i}" for i in range(4)])
        self.camera_combo.setCurrentIndex(min(max(self.cfg.camera.index, 0), 3))
        controls_layout.addWidget(self.start_btn)
        controls_layout.addWidget(self.stop_btn)
        controls_layout.addWidget(QLabel("Camera:"))
        controls_layout.addWidget(self.camera_combo)
        layout.addWidget(controls)

        self.gesture_label = QLabel()
        self.gesture_label.setStyleSheet("font-size: 18px; font-weight: bold; padding: 4px;")
        self.translation_label = QLabel()
        self.translation_label.setStyleSheet("font-size: 18px; color: #4CAF50; padding: 4px;")
        layout.addWidget(self.gesture_label)
        layout.addWidget(self.translation_label)
        self.show_results([])

    def setup_connections(self):
        self.start_btn.clicked.connect(self.start_tracking)
        self.stop_btn.clicked.connect(self.stop_tracking)

    def show_results(self, results: list):
        gesture, translation = panel_texts(results)
        self.gesture_label.setText(gesture)
        self.translation_label.setText(translation)

    def start_tracking(self):
        if self.worker:
            self.worker.stop_capture()
        self.worker = HandWorker(self.cfg, self.camera_combo.currentIndex())
        self.worker.frame_ready.connect(self.update_preview)
        self.worker.error_occurred.connect(self.handle_error)
        self.start_btn.setEnabled(False)
        self.stop_btn.setEnabled(True)
        self.camera_combo.setEnabled(False)
        self.worker.start_capture()
        logger.info("tracking started on camera %d", self.camera_combo.currentIndex())

    def stop_tracking(self):
        if self.worker:
            self.worker.stop_capture()
            self.worker = None
        self.start_btn.setEnabled(True)
        self.stop_btn.setEnabled(False)
        self.camera_combo.setEnabled(True)
        self.preview.clear_feed()
        self.show_results([])
        logger.info("tracking stopped")

    def update_preview(self, frame: np.ndarray, results: list):
        if self.worker is None:
            return  # frames queued before stop
        self.preview.update_frame(frame)
        self.show_results(results)

    def handle_error(self, error_msg: str):
        QMessageBox.warning(self, "Capture Error", error_msg)
        self.stop_tracking()

    def closeEvent(self, event):
        if self.worker:
            self.worker.stop_capture()
        event.accept()


def main(config_path: str = DEFAULT_CONFIG_PATH):
    """Entry point for the GUI application."""
    cfg = load_config(config_path)
    setup_logging(cfg.log_level)
    app = QApplication(sys.argv)
    app.setStyleSheet(qdarkstyle.load_stylesheet_pyside6())
    window = PalmSignGUI(cfg)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
