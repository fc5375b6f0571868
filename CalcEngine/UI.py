# UI.py
"""""
PySide6 user interface for the Linear Equation Calculator.

Structure
---------
- Calculator UI: main window with display and button grid
- Settings UI: modal dialog for user preferences

Responsibilities (Calculator)
-----------------------------
- Build window, display, layout and buttons
- Handle user input and maintain undo/redo
- Dispatch expression/equation to MathEngine in a worker thread
- Render results and show MathEngine errors as dialogs
- Clipboard integration and optional auto-evaluate after paste

Threading Note
--------------
Evaluation is executed off the UI thread in Worker(QObject). The result (or
the error) is emitted via a Qt signal and handled back in the UI.
"""""

from PySide6 import QtWidgets
from PySide6.QtCore import Qt, QObject, Signal
import sys
import threading
import pyperclip
from . import error as E
from . import config_manager as config_manager
from . import MathEngine as MathEngine

ENTER = '⏎'
CLIPBOARD = '📋'
SETTINGS = '⚙'
UNDO = '↶'
REDO = '↷'


def is_shift_pressed():
    """""

    Small and simple check, whether shift is pressed or not.
    Used for the clipboard button (Shift = paste).

    """""

    # pynput needs a display backend on Linux
    from pynput.keyboard import Controller

    keyboard_controller = Controller()
    return keyboard_controller.shift_pressed


def render_result(result, is_equation):
    if is_equation:
        return f"x = {result}"
    return f"= {result}"


def next_input(result, is_equation):
    """Input to continue with after a result; only plain decimals ("-3.5") can be typed on."""
    if is_equation or not result.lstrip("-").replace(".", "", 1).isdigit():
        return "0"
    return result


class Worker(QObject):
    """""

    Runs one calculation. Meant to be started in its own thread; it emits a Signal when the
    calculation is done / failed back to the Calculator UI for processing.

    """""

    job_finished = Signal(object, str, bool)

    def __init__(self, problem, settings):
        super().__init__()
        self.data = problem
        self.settings = settings

    def run_Calc(self):

        try:
            result, is_equation = MathEngine.calculate(self.data, self.settings["verbose"], self.settings)
            self.job_finished.emit(result, self.data, is_equation)

        except E.MathError as e:
            # Known, handled error (e.g., "Division by zero")
            self.job_finished.emit(e, self.data, False)


class SettingsDialog(QtWidgets.QDialog):
    """""

    Settings window. Every setting is either a checkbox (True / False) or an input field
    (integers). Nothing is written unless OK was pressed and all inputs are valid.

    """""

    settings_saved = Signal()  # Signal to tell the main window to update

    def __init__(self, parent=None):
        super().__init__(parent)
        self.widgets = {}

        # --- 1. Window Setup ---
        self.setWindowTitle("Calculator Settings")
        self.setMinimumSize(300, 200)

        main_layout = QtWidgets.QVBoxLayout(self)

        # --- 2. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")
        self.setting_description_list = config_manager.load_setting_description("all")

        # --- 3. Build Widgets ---
        for key_value, value in self.setting_value_list.items():
            description = self.setting_description_list.get(key_value, key_value)

            if isinstance(value, bool):
                checkbox = QtWidgets.QCheckBox(description)
                checkbox.setChecked(value)
                main_layout.addWidget(checkbox)
                self.widgets[key_value] = checkbox

            elif isinstance(value, int):
                row_h_layout = QtWidgets.QHBoxLayout()
                main_layout.addLayout(row_h_layout)
                label = QtWidgets.QLabel(description + " (min. 1):")
                input_field = QtWidgets.QLineEdit()
                input_field.setPlaceholderText(str(value))  # Show current value as placeholder

                row_h_layout.addWidget(label)
                row_h_layout.addWidget(input_field)
                row_h_layout.setStretch(1, 1)
                self.widgets[key_value] = input_field

        # --- 4. OK / Cancel Buttons ---
        button_box = QtWidgets.QDialogButtonBox(QtWidgets.QDialogButtonBox.Ok | QtWidgets.QDialogButtonBox.Cancel)
        main_layout.addWidget(button_box)
        main_layout.addStretch(1)

        button_box.accepted.connect(self.save_settings)
        button_box.rejected.connect(self.reject)

        self.update_darkmode()

    def save_settings(self):
        setting_value_list = dict(self.setting_value_list)

        for key_value, widget in self.widgets.items():
            if isinstance(widget, QtWidgets.QCheckBox):
                setting_value_list[key_value] = widget.isChecked()

            elif isinstance(widget, QtWidgets.QLineEdit):
                new_value_str = widget.text().strip()
                if new_value_str == "":
                    continue  # left blank: keep the old value
                try:
                    new_value_int = int(new_value_str)
                    if new_value_int < 1:
                        raise ValueError(f"'{new_value_int}' is too small. Minimum is 1.")
                except ValueError as e:
                    # Show an error box and STOP the save process
                    QtWidgets.QMessageBox.critical(self, "Invalid Input:",
                                                   f"Error in input for '{key_value}':\n\n{e}\n\nPlease correct your input.")
                    return
                setting_value_list[key_value] = new_value_int

        saved_settings = config_manager.save_setting(setting_value_list)

        if saved_settings != {}:
            self.setting_value_list = saved_settings
            self.settings_saved.emit()
            self.accept()
        else:
            QtWidgets.QMessageBox.critical(self, "Error",
                                           f"Error 4501: {E.ERROR_MESSAGES['4501']}{config_manager.config_json}")

    def update_darkmode(self):
        if self.setting_value_list["darkmode"]:
            self.setStyleSheet("""
                        QDialog {background-color: #121212;}
                        QLabel {color: white;}
                        QCheckBox {color: white;}
                        QLineEdit {background-color: #444444;color: white;border: 1px solid #666666;}
                        QDialogButtonBox QPushButton {background-color: #666666;color: white;}""")
        else:
            self.setStyleSheet("")


class CalculatorWindow(QtWidgets.QWidget):
    shift_is_held = False

    def __init__(self):
        super().__init__()

        # --- 1. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")

        # --- 2. Instance State Variables ---
        self.calculator_result = ""  # last rendered result
        self.thread_active = False  # Is a calculation running?
        self.display_text = "0"
        self.undo = ["0"]
        self.redo = []
        self.workers = []  # keeps running workers alive until they report back

        # --- 3. Window Setup ---
        self.button_objects = {}
        self.setWindowTitle("Calculator")
        self.setMinimumSize(400, 540)
        main_v_layout = QtWidgets.QVBoxLayout(self)

        expanding_policy = QtWidgets.QSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Expanding
        )

        # --- 4. Display Setup ---
        self.display = QtWidgets.QLineEdit("0")
        self.display.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.display.setReadOnly(True)
        font = self.display.font()
        font.setPointSize(32)
        self.display.setFont(font)
        self.display.setSizePolicy(expanding_policy)
        main_v_layout.addWidget(self.display, 1)

        # --- 5. Button Grid Setup ---
        button_container = QtWidgets.QWidget()
        main_v_layout.addWidget(button_container, 3)
        button_grid = QtWidgets.QGridLayout(button_container)
        button_grid.setSpacing(0)
        button_grid.setContentsMargins(0, 0, 0, 0)

        # (text, row, column)
        self.buttons = [
            (SETTINGS, 0, 0), (CLIPBOARD, 0, 1), (REDO, 0, 2), (UNDO, 0, 3), ('<', 0, 4),
            ('log(', 1, 0), ('max(', 1, 1), ('x', 1, 2), ('=', 1, 3), ('/', 1, 4),
            ('min(', 2, 0), ('(', 2, 1), (')', 2, 2), (',', 2, 3), ('*', 2, 4),
            ('pow(', 3, 0), ('7', 3, 1), ('8', 3, 2), ('9', 3, 3), ('-', 3, 4),
            ('sin(', 4, 0), ('4', 4, 1), ('5', 4, 2), ('6', 4, 3), ('+', 4, 4),
            ('cos(', 5, 0), ('1', 5, 1), ('2', 5, 2), ('3', 5, 3), (' ', 5, 4),
            ('C', 6, 0), ('0', 6, 1), ('.', 6, 2), (ENTER, 6, 3),
        ]

        for text, row, col in self.buttons:
            button = QtWidgets.QPushButton(text if text != ' ' else '␣')
            button.setSizePolicy(expanding_policy)

            if text == SETTINGS:
                button.clicked.connect(self.open_settings)
            else:
                button.clicked.connect(lambda checked=False, val=text: self.handle_button_press(val))

            if text == ENTER:
                button_grid.addWidget(button, row, col, 1, 2)
            else:
                button_grid.addWidget(button, row, col)
            self.button_objects[text] = button

        self.update_darkmode()

    # --- Window/Key Event Handlers ---
    def keyPressEvent(self, event):
        if event.key() == Qt.Key.Key_Shift:
            self.shift_is_held = True
        elif event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            self.handle_button_press(ENTER)
        elif event.key() == Qt.Key.Key_Backspace:
            self.handle_button_press('<')
        elif event.text() and (event.text() in "0123456789.,+-*/()=x "):
            self.handle_button_press(event.text())
        super().keyPressEvent(event)

    def keyReleaseEvent(self, event):
        if event.key() == Qt.Key.Key_Shift:
            self.shift_is_held = False
        super().keyReleaseEvent(event)

    def handle_button_press(self, value):
        if value == ENTER:
            self.start_calculation(self.display_text)
            return

        elif value == CLIPBOARD:
            # Shift held: paste into the input; otherwise copy the display
            if self.shift_is_held or is_shift_pressed():
                clipboard_text = QtWidgets.QApplication.clipboard().text().strip()
                if clipboard_text:
                    self.set_input(clipboard_text if self.display_text == "0" else self.display_text + clipboard_text)
                    if self.setting_value_list["after_paste_enter"]:
                        self.start_calculation(self.display_text)
            else:
                pyperclip.copy(self.display.text())
            return

        elif value == UNDO:
            if len(self.undo) > 1:
                self.redo.append(self.undo.pop())
                self.display_text = self.undo[-1]
            self.display.setText(self.display_text)
            return

        elif value == REDO:
            if self.redo:
                self.undo.append(self.redo.pop())
                self.display_text = self.undo[-1]
            self.display.setText(self.display_text)
            return

        elif value == "<":
            new_text = self.display_text[:-1]

        elif value == "C":
            new_text = "0"

        else:
            new_text = value if self.display_text == "0" else self.display_text + value

        self.set_input(new_text or "0")

    def set_input(self, text):
        self.display_text = text
        self.undo.append(text)
        self.redo.clear()
        self.display.setText(text)

    def start_calculation(self, problem):
        if self.thread_active:
            QtWidgets.QMessageBox.warning(self, "Calculator", E.ERROR_MESSAGES["4002"])
            return

        self.thread_active = True
        self.update_return_button()
        self.display.setText("...")

        worker_instance = Worker(problem, self.setting_value_list)
        worker_instance.job_finished.connect(self.Calc_result)
        self.workers.append(worker_instance)
        threading.Thread(target=worker_instance.run_Calc, daemon=True).start()

    def update_return_button(self):
        return_button = self.button_objects.get(ENTER)
        if not return_button:
            return

        # Change button to "X" and red to show it's busy
        if self.thread_active:
            return_button.setStyleSheet("background-color: #FF0000; color: white; font-weight: bold;")
            return_button.setText("X")
        else:
            return_button.setStyleSheet("background-color: #007bff; color: white; font-weight: bold;")
            return_button.setText(ENTER)

    def update_darkmode(self):
        if self.setting_value_list["darkmode"]:
            button_style = "background-color: #121212; color: white; font-weight: bold;"
            self.setStyleSheet("background-color: #121212;")
            self.display.setStyleSheet("background-color: #121212; color: white; font-weight: bold;")
        else:
            button_style = "font-weight: normal;"
            self.setStyleSheet("")
            self.display.setStyleSheet("font-weight: bold;")

        for text, button in self.button_objects.items():
            if text != ENTER:
                button.setStyleSheet(button_style)
        self.update_return_button()

    def open_settings(self):
        settings_dialog = SettingsDialog(self)
        settings_dialog.exec()  # modal

        self.setting_value_list = config_manager.load_setting_value("all")
        self.update_darkmode()

    def get_message_box_stylesheet(self):
        if self.setting_value_list["darkmode"]:
            return """
                QMessageBox { background-color: #121212; color: white; }
                QLabel { color: white; }
                QPushButton { background-color: #2e2e2e; color: white; border: 1px solid #444444; padding: 5px 15px; }
            """
        return ""

    def Calc_result(self, result, equation, is_equation):
        self.thread_active = False
        self.update_return_button()
        self.workers = [worker for worker in self.workers if worker is not self.sender()]

        if isinstance(result, E.MathError):
            error_box = QtWidgets.QMessageBox(self)
            error_box.setIcon(QtWidgets.QMessageBox.Critical)
            error_box.setWindowTitle("Calculation error")
            error_box.setText(f"Error {result.code}: {E.ERROR_MESSAGES.get(result.code, 'Unknown error')}")
            error_box.setInformativeText(f"Details: {result.render()}\nEquation: {result.equation}")
            error_box.setStandardButtons(QtWidgets.QMessageBox.Ok)
            error_box.setStyleSheet(self.get_message_box_stylesheet())
            error_box.exec()
            self.display.setText(equation)
            return

        self.calculator_result = result
        final_display_text = render_result(result, is_equation)
        self.display.setText(final_display_text)

        # Next input starts from the result of a plain expression
        self.display_text = next_input(result, is_equation)
        self.undo.append(self.display_text)
        self.redo.clear()


def main():
    app = QtWidgets.QApplication(sys.argv)
    window = CalculatorWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
