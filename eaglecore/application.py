"""Application base class and the delegate it drives."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from .events import EventBus


class ApplicationDelegate(ABC):
    """User code run by an application's main loop."""

    @abstractmethod
    def init(self) -> None:
        """Set up before the first step."""

    @abstractmethod
    def step(self) -> None:
        """Run one frame."""

    @abstractmethod
    def destroy(self) -> None:
        """Tear down after the loop ends."""


class Application(ABC):
    """A running application; the most recently created one is the instance."""

    _instance: ClassVar[Application | None] = None

    def __init__(self) -> None:
        self.logger = logging.getLogger("eagle")
        Application._instance = self

    @classmethod
    def instance(cls) -> Application:
        """The current application."""
        if Application._instance is None:
            raise RuntimeError("No application has been created.")
        return Application._instance

    @abstractmethod
    def quit(self) -> None:
        """Ask the main loop to stop."""

    @abstractmethod
    def window(self) -> Any:
        """The application's window."""

    @abstractmethod
    def event_bus(self) -> EventBus:
        """The bus that window events are emitted on."""

    @abstractmethod
    def delegate(self) -> ApplicationDelegate:
        """The delegate driven by the main loop."""