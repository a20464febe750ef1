# barblocks

Building blocks for a Wayland status bar. Each module holds the state and
formatting logic of one bar widget. A widget turns events from a compositor
or a system service into the text, CSS classes and visibility it shows.
Drawing is left to you. The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

River:

- `barblocks.river_mode`: `RiverMode.handle_mode(mode)` shows the binding
  mode through `format` (default `"{}"`), with the mode name markup-escaped
  and added as a style class.
- `barblocks.river_window`: `RiverWindow(config, output)` shows the focused
  view's title only while this bar's output is focused. It adds the
  `focused` class while the output has focus.
- `barblocks.river_tags`: `tag_labels(config)` builds the labels from
  `num-tags` (default 9, at most 32) and `tag-labels`. `RiverTags` marks
  buttons `focused`, `occupied` and `urgent`. Clicks call
  `run_command(["set-focused-tags", tag])` or, on a right click,
  `["toggle-focused-tags", tag]`, unless `disable-click` is set.

Status notifier tray:

- `barblocks.sni_watcher`: `StatusNotifierWatcher` registers hosts and
  items (`register_host`, `register_item`), drops them in `name_vanished`
  and lists them, newest first, in `registered_items()`. A bad bus name, or
  a host that is already registered, raises `WatcherError`.
  `is_valid_bus_name` checks D-Bus names.
- `barblocks.sni_host`: `StatusNotifierHost` keeps `TrayItemRef`s for the
  registered services and calls `on_add` and `on_remove`. `split_service`
  splits `"bus.name/path"` and falls back to `/StatusNotifierItem`.
- `barblocks.tray`: `Tray` keeps items in display order. The order is
  reversed with `reverse-direction`. After `update()` the tray is visible
  only when it has items.

System widgets:

- `barblocks.sndio`: `SndioVolume` tracks the numeric `output.level`
  control. It changes it through `set_value(addr, value)` on scroll (step
  `scroll-step`, default 5) and toggles mute on click.
- `barblocks.upower`: `UPower` holds peripheral devices and a display
  device. It renders `{percentage}` and `{time}` (`format`, `format-alt`),
  with a status class and an icon. Also here are `device_status` and
  `time_to_string`.
- `barblocks.upower_tooltip`: `DeviceKind`, `Device`, `device_icon` and
  `tooltip_rows`. Each `TooltipRow` describes one peripheral. Line power
  and `BAT0` are left out.
- `barblocks.temperature`: `Temperature` reads millidegrees from
  `hwmon-path`, from `hwmon-path-abs` plus `input-filename`, or from
  `/sys/class/thermal/thermal_zone<N>/temp`. It offers `{temperatureC}`,
  `{temperatureF}`, `{temperatureK}` and `{icon}`, and adds the `critical`
  class at or above `critical-threshold`. `resolve_sensor_path` and
  `read_temperature` are also available. A sensor file that cannot be
  opened raises `RuntimeError`.
- `barblocks.clock`: `SimpleClock.update(now)` formats a datetime with
  `format` (default `"{:%H:%M}"`). `next_tick_delay(now, interval)` gives the
  seconds to the next interval boundary.

Helpers:

- `barblocks.jsonparse.parse_json`: an empty input gives `{}`, and a
  malformed input raises `ValueError`.
- `barblocks.sleeper.SleeperThread`: a daemon worker loop. It offers
  `sleep_for`, `sleep_until`, `wake_up`, `stop` and `join`, and it can be
  used as a context manager.

## Example

```python
from barblocks.river_tags import RiverTags

tags = RiverTags({"num-tags": 4}, run_command=print)
tags.handle_focused_tags(0b0010)
print([b.label for b in tags.buttons if "focused" in b.classes])  # ['2']
tags.handle_primary_clicked(4)  # prints ['set-focused-tags', '4']
```

Widgets take their configuration as a plain dictionary, in the same form as
a JSON bar configuration. Actions that reach the outside world, such as
setting a volume or running a river command, are given to a widget as
callables.

## What this package does not do

- It opens no connections. There is no Wayland, D-Bus, sndio or UPower
  client here. You feed the widgets the events yourself.
- It has no sway IPC client and no sway widgets: no workspaces, window
  title, binding mode, scratchpad, keyboard layout or bar visibility
  handling.
- It has no PulseAudio volume widget.
- It draws nothing and provides no command to run a bar.