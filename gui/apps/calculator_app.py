import FreeSimpleGUI as sg

from calc_core.buttons import CalculatorButton
from calc_core.engine import CalculatorEngine
from calc_core.keymap import resolve_key


class CalculatorApp:
    TITLE = 'Việt Tiến'
    BUTTON_SIZE = (5, 2)
    BUTTON_FONT = ('Arial', 16, 'bold')
    DISPLAY_FONT = ('Arial', 32, 'bold')
    BACKGROUND = '#222'
    DIGIT_COLOR = ('white', '#34495e')
    FUNCTION_COLOR = ('white', '#7f8c8d')
    OPERATOR_COLOR = ('white', '#2980b9')
    EQUALS_COLOR = ('white', '#27ae60')
    CLEAR_COLOR = ('white', '#d35400')

    def __init__(self, logger=None):
        self.engine = CalculatorEngine(logger=logger)
        layout = [[sg.Text(
            '', size=(18, 1), key='-DISPLAY-', justification='right',
            font=self.DISPLAY_FONT, background_color=self.BACKGROUND,
            text_color='#1565c0', pad=((8, 8), (18, 18)), relief='groove', border_width=2
        )]]
        for row in self.engine.buttons:
            layout.append([self._make_button(button) for button in row])
        layout.append([sg.Button('Close', size=(23, 1), font=('Arial', 12), button_color=('white', '#c0392b'))])

        self.window = sg.Window(
            self.TITLE, layout, finalize=True, element_justification='center',
            background_color=self.BACKGROUND, return_keyboard_events=True
        )

    def _make_button(self, button):
        size = self.BUTTON_SIZE
        if button is CalculatorButton.ZERO:
            # bottom row has three keys; zero spans two columns
            size = (self.BUTTON_SIZE[0] * 2 + 1, self.BUTTON_SIZE[1])
        return sg.Button(button.title, key=button.title, size=size,
                         font=self.BUTTON_FONT, button_color=self._button_color(button))

    def _button_color(self, button):
        if button is CalculatorButton.CLEAR:
            return self.CLEAR_COLOR
        if button is CalculatorButton.EQUALS:
            return self.EQUALS_COLOR
        if button.is_operator:
            return self.OPERATOR_COLOR
        if button.is_digit:
            return self.DIGIT_COLOR
        return self.FUNCTION_COLOR

    def handle_event(self, event, values):
        if event in (sg.WIN_CLOSED, 'Close'):
            return 'close'

        button = resolve_key(event)
        if button is None:
            return
        self.engine.handle_input(button)
        self.window['-DISPLAY-'].update(self.engine.display_text)

    def run(self):
        while True:
            event, values = self.window.read()
            result = self.handle_event(event, values)
            if result == 'close':
                break
        self.window.close()


if __name__ == '__main__':
    app = CalculatorApp()
    app.run()
