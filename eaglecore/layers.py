"""Layers and an ordered stack that attaches and detaches them."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from .events import EventBus
from .input import Input

_log = logging.getLogger("eagle")


class Layer:
    """A unit of application behaviour driven by a layer stack."""

    def handle_attach(self) -> None:
        """Called when the layer becomes active; no action by default."""

    def handle_detach(self) -> None:
        """Called when the layer is removed; no action by default."""

    def handle_update(self) -> None:
        """Called once per frame; no action by default."""


class LayerStack:
    """Ordered layers, attached on ``init`` and detached on ``deinit``."""

    def __init__(self, layers: Iterable[Layer] = ()) -> None:
        self._layers: list[Layer] = []
        self._initialized = False
        self.emplace(layers)

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __len__(self) -> int:
        return len(self._layers)

    def emplace_back(self, layer: Layer) -> None:
        """Append a layer, attaching it if the stack is initialised."""
        _log.debug("Emplacing back a new layer!")
        self._layers.append(layer)
        if self._initialized:
            layer.handle_attach()

    def emplace_front(self, layer: Layer) -> None:
        """Prepend a layer, attaching it if the stack is initialised."""
        _log.debug("Emplacing front a new layer!")
        self._layers.insert(0, layer)
        if self._initialized:
            layer.handle_attach()

    def emplace(self, layers: Iterable[Layer]) -> None:
        """Append several layers in order."""
        for layer in layers:
            self.emplace_back(layer)

    def pop_layer(self, layer: Layer) -> None:
        """Remove a layer, detaching it if the stack is initialised."""
        _log.debug("Popping a layer!")
        index = next((i for i, item in enumerate(self._layers) if item is layer), None)
        if index is None:
            _log.debug("Layer not found!")
            return
        del self._layers[index]
        if self._initialized:
            layer.handle_detach()
            _log.debug("Layer popped!")

    def init(self) -> None:
        """Attach every layer; does nothing if already initialised."""
        if self._initialized:
            return
        _log.debug("Initializing layer stack!")
        self._initialized = True
        for layer in self._layers:
            layer.handle_attach()

    def deinit(self) -> None:
        """Detach every layer and empty the stack."""
        if not self._initialized:
            return
        _log.debug("Deinitializing layer stack!")
        for layer in self._layers:
            layer.handle_detach()
        self._layers.clear()
        self._initialized = False


class InputLayer(Layer):
    """Keeps the shared input state refreshed each frame."""

    def __init__(self, bus: EventBus | None = None) -> None:
        self._bus = bus

    def handle_attach(self) -> None:
        """Connect the shared input state to the bus, if one was given."""
        if self._bus is not None:
            Input.instance().init(self._bus)

    def handle_detach(self) -> None:
        """Disconnect the shared input state."""
        Input.instance().deinit()

    def handle_update(self) -> None:
        """Clear the per-frame input state."""
        Input.instance().refresh()