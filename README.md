# eaglecore

The core pieces of a small game engine, in plain Python with no third-party dependencies:

- `eaglecore.events`: a prioritised event bus. A listener can consume an event. There are also immediate (multicast) events.
- `eaglecore.input_events` and `eaglecore.keycodes`: the event records and the key, modifier, mouse-button and action codes.
- `eaglecore.input`: per-frame keyboard and mouse state, fed from a bus.
- `eaglecore.layers`: layers and a layer stack that attaches and detaches them.
- `eaglecore.random`: a shared, seedable random source.
- `eaglecore.graphics_buffer`, `eaglecore.vertex_layout`, `eaglecore.device_buffer`: byte buffers and vertex layouts.
- `eaglecore.cleaner`: a queue of dirty objects that are flushed once per frame.
- `eaglecore.file_system` and `eaglecore.asset_file_system`: a shared file-system instance that reads from disk or from an asset manager.
- `eaglecore.window`, `eaglecore.application`, `eaglecore.platform_application`: windows and applications that drive a delegate through its lifecycle.

## Installation

```
pip install eaglecore
```

Tests need the `test` extra:

```
pip install "eaglecore[test]"
```

## Events

An `EventBus` keeps one `ConsumableEventStream` for each event type and routes each event by its type. Listeners with higher priority are called first. The default priority is `0x7FFFFFFF`. A callback that returns a truthy value consumes the event, and later listeners do not receive it. A listener can subscribe or unsubscribe while an event is being emitted. The change takes effect once that emission ends.

An `EventListener` owns a unique id and is attached to one bus at a time.

```python
from eaglecore.events import EventBus, EventListener
from eaglecore.input_events import OnKey
from eaglecore.keycodes import Key, KeyAction

bus = EventBus()
listener = EventListener()
listener.attach(bus)

def on_key(event):
    print("key", event.key)
    return False  # do not consume

listener.subscribe(OnKey, on_key, 10)
bus.emit(OnKey(Key.A, KeyAction.PRESS, 0))

listener.destroy()
```

Other `EventListener` methods:

- `receive(event_type, receiver, priority)` routes events to `receiver.receive(event)`.
- `unsubscribe(event_type)` removes one subscription.
- `detach()` drops every subscription on the bus.
- `destroy()` detaches and also leaves every immediate event. Leaving a `with` block does the same.

`ImmediateEvent` calls all of its callbacks in the order they subscribed. Call `emit(*args)` or call the event itself. Subscribe through `EventListener.subscribe_immediate` and unsubscribe through `EventListener.unsubscribe_immediate`. The following raise an error:

- emitting while the event is already emitting,
- subscribing twice with the same id,
- unsubscribing an id that is not subscribed.

## Input

`Input.instance()` returns the shared input state. `init(bus)` feeds it from `OnKey`, `OnMouseMove`, `OnMouseButton` and `OnMouseScrolled` events, and `deinit()` stops that. Call `refresh()` once per frame. It clears the pressed and released sets and the mouse and scroll deltas. The held-down state stays.

```python
from eaglecore.input import Input

inp = Input.instance()
inp.init(bus)
bus.emit(OnKey(Key.SPACE, KeyAction.PRESS, 0))
assert inp.key_pressed(Key.SPACE) and inp.key_down(Key.SPACE)
inp.refresh()
assert not inp.key_pressed(Key.SPACE) and inp.key_down(Key.SPACE)
```

Mouse state is read with:

- `mouse_button_down`, `mouse_button_pressed`, `mouse_button_released`
- `mouse_position`, `mouse_x`, `mouse_y`
- `mouse_move_delta`, `mouse_scroll_delta`

## Layers

Subclass `Layer` and override `handle_attach`, `handle_detach` and `handle_update`. Add layers to a `LayerStack` with `emplace_back`, `emplace_front` or `emplace`, and remove one with `pop_layer`.

- `init()` attaches every layer. Layers added after that are attached as soon as they are added.
- `deinit()` detaches every layer and empties the stack.

`InputLayer(bus)` connects the shared `Input` to `bus` when it is attached and disconnects it when it is detached. Its `handle_update` calls `refresh()` on the shared `Input`.

## Random numbers

`Random.init(seed)` reseeds the shared generator. With no seed, it uses system entropy. The generator starts seeded with 0.

- `Random.value()` returns a float in [0, 1).
- `Random.range(a, b)` returns a value in [a, b). The result is an int when both bounds are ints.

## Buffers and vertex layouts

`GraphicsBuffer` is an abstract, growable byte buffer. Subclasses implement `upload()`.

- `reserve(size)` grows the capacity.
- `insert(data)` appends bytes and `copy_from(data, offset)` writes them at an offset. A write past the capacity raises `ValueError`.
- `data()` returns the written bytes. `clear()` resets the size and keeps the capacity.

`VertexLayout` collects bindings:

- `add(binding, attribute)` adds a `Format` to a binding and creates any missing bindings.
- `add_binding(description)` appends a whole `VertexInputBindingDescription`.
- `stride()` returns the sum of the attribute sizes, each given by `Format.size`.

`DeviceBuffer` models a block of memory that is mapped, written, flushed, bound and copied:

- `DeviceBuffer.create_buffer(info, size, data)` allocates the block.
- `DeviceBuffer.copy_buffer(src, dst, size, offset)` copies between buffers.
- Out-of-range sizes and offsets raise `ValueError`. Misuse, such as writing while unmapped, raises `RuntimeError`.

## Deferred clean-up

Implement `Cleanable` (`is_dirty`, `flush(index)`) and queue objects with `Cleaner.push`. An object already in the queue is not added twice. `Cleaner.flush(index)` flushes every queued object and keeps only those still dirty. `Cleaner.clear()` empties the queue.

## Files

`FileSystem.instance()` returns the installed file system, or `None`.

- `DesktopFileSystem.init()` installs one that reads from disk. It reads text as UTF-8.
- `AssetFileSystem.init(asset_manager)` installs one that reads through any object with an `open(path)` method returning a binary stream, or `None` when the asset is missing.

Both raise `OSError("failed to open file: <path>")` when a file cannot be opened.

## Windows and applications

Implement an `ApplicationDelegate` with `init`, `step` and `destroy`. `Application.instance()` returns the most recently created application.

```python
from eaglecore.application import Application, ApplicationDelegate
from eaglecore.platform_application import DesktopApplication

class Game(ApplicationDelegate):
    def __init__(self):
        self.frames = 0

    def init(self):
        pass

    def step(self):
        self.frames += 1
        if self.frames == 3:
            Application.instance().quit()

    def destroy(self):
        pass

DesktopApplication(800, 600, Game()).run()
```

`DesktopApplication(width, height, delegate)`:

- installs a `DesktopFileSystem`;
- `run()` initialises its `DesktopWindow` with the application's bus, calls the delegate's `init`, then processes window events and steps the delegate until `quit()` is called.

`AndroidApplication(width, height, delegate, asset_manager)`:

- installs an `AssetFileSystem` and owns an `AndroidWindow`;
- `handle_app_cmd(command)` handles `AppCommand` values: `INIT_WINDOW` makes the surface ready, `TERM_WINDOW` releases it and `DESTROY` quits. Other commands are ignored.
- `run()` steps the delegate only while the surface is ready, and initialises the delegate the first time it is.

`DesktopWindow` turns native callbacks into bus events:

| Callback | Event emitted |
| --- | --- |
| `handle_resize` | `OnWindowResized`, unless the width or height is zero |
| `handle_focus` | `OnWindowFocus` or `OnWindowLostFocus` |
| `handle_close` | `OnWindowClose` |
| `handle_cursor_position` | `OnMouseMove` |
| `handle_scroll` | `OnMouseScrolled` |
| `handle_mouse_button` | `OnMouseButton` |
| `handle_key` | `OnKey` |
| `handle_char` | `OnKeyTyped` |

Other `DesktopWindow` behaviour:

- `post(callback, *args)` queues a callback. `pool_events()` runs every queued callback, and `wait_native_events()` blocks until one arrives.
- `set_cursor_shape` takes a `Cursor`.
- The framebuffer scales are the framebuffer size divided by the window size.

`AndroidWindow` has no cursor. `pool_events()` runs at most one queued callback per call, and both framebuffer scales are 1.0.

## What this package does not do

It does not open operating-system windows, read real input devices, or talk to a GPU. No rendering backend is included.

- Windows receive their input only through `post` and the `handle_*` methods.
- `DeviceBuffer` keeps its memory in a Python `bytearray`.
- `GraphicsBuffer.upload` must be supplied by a subclass.