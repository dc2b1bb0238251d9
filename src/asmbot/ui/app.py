from textual.app import App, ComposeResult
from textual.widgets import Footer, Input
from textual.containers import VerticalScroll
from textual.binding import Binding
from ..engine import CommandEngine
from .widgets import MessageLine, StatusBar

# User Palette
C_BG = "#EBEEEE"
C_TEXT = "#191A1A"
C_ACCENT1 = "#45d3ee" # Cyan
C_ACCENT2 = "#9FBFC5" # Muted Blue
C_ACCENT3 = "#94bfc1" # Teal


class AsmBotApp(App):
    """Local chat console: type commands, read replies."""

    CSS = f"""
    Screen {{
        background: {C_BG};
        color: {C_TEXT};
    }}

    #conversation {{
        height: 1fr;
        border: solid {C_ACCENT2};
        margin: 1 1;
    }}

    MessageLine {{ width: 100%; height: auto; margin-bottom: 1; }}
    MessageLine.user  {{ color: {C_ACCENT3}; }}
    MessageLine.error {{ color: #a80000; }}

    #command-input {{ border: solid {C_ACCENT1}; margin: 0 1; }}
    #status-bar {{ height: 1; margin: 0 2; }}

    Footer {{ background: {C_TEXT}; color: {C_ACCENT1}; }}
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
        Binding("ctrl+l", "clear", "Clear", show=True),
    ]

    def __init__(self, engine: CommandEngine):
        super().__init__()
        self.engine = engine
        self._requests = 0

    def compose(self) -> ComposeResult:
        yield VerticalScroll(id="conversation")
        yield Input(placeholder=f"{self.engine.prefix}asm x86 mov eax, 1; ret", id="command-input")
        yield StatusBar()
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#status-bar", StatusBar).set_status(prefix=self.engine.prefix, requests=0)
        self.query_one("#command-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        message = event.value
        event.input.value = ""
        if not message.strip():
            return

        conversation = self.query_one("#conversation", VerticalScroll)
        conversation.mount(MessageLine("you", message, classes="user"))

        args = self.engine.parse_message(message)
        if args is None:
            text = f"Commands start with '{self.engine.prefix}', try {self.engine.prefix}help"
            status = "ignored"
        else:
            self._requests += 1
            reply = self.engine.dispatch(args)
            text = reply.text
            status = "ok" if reply.ok else "error"

        line = MessageLine("asmbot", text)
        if status == "error":
            line.add_class("error")
        conversation.mount(line)
        line.scroll_visible()

        self.query_one("#status-bar", StatusBar).set_status(requests=self._requests, status=status)

    def action_clear(self) -> None:
        self.query_one("#conversation", VerticalScroll).query(MessageLine).remove()


def run_tui(engine: CommandEngine):
    app = AsmBotApp(engine)
    app.run()
