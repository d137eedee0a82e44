from typing import Optional

import sys

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPixmap
from PyQt5.QtWidgets import (
    QAction,
    QApplication,
    QDialog,
    QDialogButtonBox,
    QFileDialog,
    QFormLayout,
    QHBoxLayout,
    QInputDialog,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QRadioButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from IP_Libs.constants import (
    DEFAULT_IMAGE_PANE_HEIGHT,
    DEFAULT_IMAGE_PANE_WIDTH,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    EMPTY_IMAGE_TEXT,
    OPEN_FILE_FILTER,
    PROGRAM_NAME,
)
from IP_Libs.ControllerLib.editor_config import load_editor_config
from IP_Libs.ControllerLib.image_controller import ImageController
from IP_Libs.ControllerLib.view import Features, ImageView, RainbowInput
from IP_Libs.ImageEditingLib.image_editing_ops import to_png_bytes
from IP_Libs.ImageEditingLib.image_models import FilterKind, GeneratorKind, PixelBuffer
from IP_Libs.logging_setup import setup_logging


class RainbowSpecDialog(QDialog):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Enter Rainbow Specifications")

        self.input_width = QLineEdit()
        self.input_height = QLineEdit()
        self.radio_horizontal = QRadioButton("Horizontal")
        self.radio_vertical = QRadioButton("Vertical")
        self.radio_horizontal.setChecked(True)

        orientation_row = QHBoxLayout()
        orientation_row.addWidget(self.radio_horizontal)
        orientation_row.addWidget(self.radio_vertical)

        form = QFormLayout(self)
        form.addRow("Image Width:", self.input_width)
        form.addRow("Image Height:", self.input_height)
        form.addRow(orientation_row)

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        form.addRow(buttons)

    def values(self) -> RainbowInput:
        orientation = "horizontal" if self.radio_horizontal.isChecked() else "vertical"
        return orientation, self.input_width.text(), self.input_height.text()


class ImageProcessorWindow(QMainWindow, ImageView):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle(PROGRAM_NAME)
        self.resize(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)
        self._build_ui()

    def _build_ui(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)

        root = QVBoxLayout(central)
        body = QHBoxLayout()
        buttons_row = QHBoxLayout()

        file_menu = self.menuBar().addMenu("File")
        self.action_save = file_menu.addAction("Save")
        self.action_load = file_menu.addAction("Load")
        file_menu.addSeparator()
        generate_menu = file_menu.addMenu("Generate")
        self.action_rainbow = generate_menu.addAction("Rainbow")
        self.action_checkerboard = generate_menu.addAction("Checkerboard")

        edit_menu = self.menuBar().addMenu("Edit Image")
        self.action_undo = edit_menu.addAction("Undo")
        self.action_redo = edit_menu.addAction("Redo")
        edit_menu.addSeparator()
        self.filter_actions = {
            FilterKind.BLUR: edit_menu.addAction("Blur"),
            FilterKind.SHARPEN: edit_menu.addAction("Sharpen"),
            FilterKind.GREYSCALE: edit_menu.addAction("Greyscale"),
            FilterKind.SEPIA: edit_menu.addAction("Sepia"),
            FilterKind.DITHER: edit_menu.addAction("Dither"),
            FilterKind.MOSAIC: edit_menu.addAction("Mosaic..."),
        }
        edit_menu.addSeparator()
        self.action_execute = edit_menu.addAction("Execute Script")

        self.script_box = QPlainTextEdit()
        self.btn_execute = QPushButton("Execute Script")
        script_col = QVBoxLayout()
        script_col.addWidget(QLabel("Script Editor"))
        script_col.addWidget(self.script_box)
        script_col.addWidget(self.btn_execute)

        self.label_image = QLabel(EMPTY_IMAGE_TEXT)
        self.label_image.setAlignment(Qt.AlignCenter)
        image_scroll = QScrollArea()
        image_scroll.setWidget(self.label_image)
        image_scroll.setWidgetResizable(True)
        image_scroll.setMinimumSize(DEFAULT_IMAGE_PANE_WIDTH, DEFAULT_IMAGE_PANE_HEIGHT)

        body.addLayout(script_col, stretch=1)
        body.addWidget(image_scroll, stretch=3)

        self.btn_open = QPushButton("Open Image")
        self.btn_save = QPushButton("Save Image")
        self.btn_exit = QPushButton("Exit")
        buttons_row.addWidget(self.btn_open)
        buttons_row.addWidget(self.btn_save)
        buttons_row.addStretch(1)
        buttons_row.addWidget(self.btn_exit)

        root.addLayout(body)
        root.addLayout(buttons_row)

    # ImageView

    def set_features(self, features: Features) -> None:
        self.btn_exit.clicked.connect(lambda: features.exit_program())
        self.btn_open.clicked.connect(lambda: features.open_file())
        self.btn_save.clicked.connect(lambda: features.save_file())
        self.btn_execute.clicked.connect(
            lambda: features.run_script(self.script_box.toPlainText())
        )

        self.action_load.triggered.connect(lambda: features.open_file())
        self.action_save.triggered.connect(lambda: features.save_file())
        self.action_undo.triggered.connect(lambda: features.undo())
        self.action_redo.triggered.connect(lambda: features.redo())
        self.action_execute.triggered.connect(
            lambda: features.run_script(self.script_box.toPlainText())
        )
        self.action_rainbow.triggered.connect(
            lambda: features.generate(GeneratorKind.RAINBOW)
        )
        self.action_checkerboard.triggered.connect(
            lambda: features.generate(GeneratorKind.CHECKERBOARD)
        )
        for kind, action in self.filter_actions.items():
            self._connect_filter(action, kind, features)

    def _connect_filter(self, action: QAction, kind: FilterKind, features: Features) -> None:
        action.triggered.connect(lambda: features.apply_filter(kind))

    def display(self) -> None:
        self.show()

    def show_image(self, buffer: PixelBuffer) -> None:
        pixmap = QPixmap()
        if not pixmap.loadFromData(to_png_bytes(buffer), "PNG"):
            self.label_image.setText("Preview failed")
            return
        self.label_image.setText("")
        self.label_image.setPixmap(pixmap)

    def clear_image(self) -> None:
        self.label_image.clear()
        self.label_image.setText(EMPTY_IMAGE_TEXT)

    def pick_open_path(self) -> Optional[str]:
        file_path, _ = QFileDialog.getOpenFileName(self, "Open Image", ".", OPEN_FILE_FILTER)
        return file_path or None

    def pick_save_path(self) -> Optional[str]:
        file_path, _ = QFileDialog.getSaveFileName(self, "Save Image", ".")
        return file_path or None

    def show_error(self, message: str) -> None:
        QMessageBox.critical(self, "Error", message)

    def prompt_number(self, prompt: str) -> Optional[str]:
        return self._single_number_input(prompt, "Mosaic Specifications")

    def prompt_rainbow_specs(self) -> Optional[RainbowInput]:
        dialog = RainbowSpecDialog(self)
        if dialog.exec_() != QDialog.Accepted:
            return None
        return dialog.values()

    def prompt_checkerboard_size(self) -> Optional[str]:
        return self._single_number_input(
            "Checkerboard Square Size: ", "Checkerboard Specifications"
        )

    def clear_script_editor(self) -> None:
        self.script_box.setPlainText("")

    def confirm_overwrite(self) -> bool:
        status = QMessageBox.question(
            self,
            "Confirm Overwrite",
            "Doing this will overwrite your currently displayed image. "
            "Do you wish to proceed?",
            QMessageBox.Yes | QMessageBox.No,
        )
        return status == QMessageBox.Yes

    def _single_number_input(self, message: str, title: str) -> Optional[str]:
        text, ok = QInputDialog.getText(self, title, message)
        return text if ok else None


def main() -> None:
    config = load_editor_config()
    setup_logging(config.log_level)

    app = QApplication(sys.argv)
    window = ImageProcessorWindow()
    controller = ImageController(window, config=config, on_exit=app.quit)
    controller.start()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
