"""
Custom Widgets
==============
Exposes: MessageLine, StatusBar

The console mimics a chat channel: each request and each reply is one
MessageLine in the conversation pane.
"""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static


class MessageLine(Static):
    """
    One chat message. Replies are shown verbatim, never parsed as markup,
    since listings contain brackets and backticks.
    """

    def __init__(self, author: str, body: str, **kwargs) -> None:
        self.author = author
        self.body = body
        super().__init__(self._build(), **kwargs)

    def _build(self) -> Text:
        text = Text()
        text.append(f"{self.author}: ", style="bold")
        text.append(self.body)
        return text


class StatusBar(Static):
    """
    Bottom bar — command prefix, request count, last outcome.
    ID: #status-bar
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(id="status-bar", **kwargs)
        self._prefix: str = ""
        self._requests: int = 0
        self._status: str = "idle"

    def set_status(
        self,
        *,
        prefix: str | None = None,
        requests: int | None = None,
        status: str | None = None,
    ) -> None:
        if prefix is not None:
            self._prefix = prefix
        if requests is not None:
            self._requests = requests
        if status is not None:
            self._status = status
        self._render_bar()

    def _render_bar(self) -> None:
        parts = []
        if self._prefix:
            parts.append(f"prefix {self._prefix}")
        parts.append(f"{self._requests} request(s)")
        parts.append(f"● {self._status}")
        self.update("  │  ".join(parts))
