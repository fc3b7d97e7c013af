# onairlight

Building blocks for an "on air" indicator light: a lamp that shows when
your camera or microphone is in use. The package models the parts such a
device is made of on top of an in-memory board, so the logic can run and be
tested without hardware.

## Modules

- `onairlight.utils` – value helpers for configuration data:
  `is_false_value`, `is_true_value`, `to_int`, `parse_bytes`,
  `store_int`, `store_float`, `store_bool`, `store_str` and `format_ip`.
- `onairlight.handlers` – `ConfigRegistry` and `StatusRegistry`, which
  hand each registered component its own named section of a nested
  dictionary.
- `onairlight.pins` – `PinBoard`, an in-memory board with pin modes,
  digital and analog levels and a millisecond clock; `InputPin` and
  `OutputPin` with logical on/off handling, output levels in percent and
  PWM value calculation.
- `onairlight.lightswitch` – `LightSwitch`, an output with non-blocking
  `blink` and `wave` (fade in, hold, fade out, pause) effects and a
  `brightness` property.
- `onairlight.button` – `Button`, a debounced input that notifies its
  handlers with `(button, pressed)` when `handle_change` is called.
- `onairlight.sensors` – `BatteryMeasure` (voltage from an analog pin
  through a calculation factor) and `LightSensor`.

## The board

`PinBoard` stands in for the hardware. Feed inputs through its `inputs`
and `analog_inputs` dictionaries; what the components write ends up in
`outputs` and `pwm`. `board.now` is the time in milliseconds and
`board.delay(ms)` moves it forward.

```python
from onairlight.pins import PinBoard
from onairlight.lightswitch import LightSwitch

board = PinBoard()
light = LightSwitch(board, pin=5)   # configured as output and switched off

board.delay(1)
light.blink(500, 500)               # due: the light goes on
light.is_on()                       # True
board.outputs[5]                    # 1
```

`blink` and `wave` are meant to be called on every pass of a main loop;
each call only changes the light when its next change is due. A
`max_level` below 10 makes `wave` use the light's own level.

## Sensors

```python
from onairlight.pins import PinBoard
from onairlight.sensors import BatteryMeasure

board = PinBoard()
board.analog_inputs[0] = 512
battery = BatteryMeasure(board, 0, calc_factor=4.2)
battery.voltage(2)                  # 2.1  (raw / 1024 * calc_factor)
```

A reading at or below `available_threshold` (10 by default) counts as no
battery, and `voltage` then returns `-0.0`.

## Configuration and status

Components that take part in configuration provide
`write_config_to(node, hide_critical)` and `read_config_from(node)`;
components that report status provide `write_status_to(node)`.

```python
from onairlight.handlers import ConfigRegistry, StatusRegistry

config = ConfigRegistry()
config.add("battery", battery)
node = {}
config.write_config_to(node)        # {"battery": {"calcFactor": 4.2}}
config.read_config_from({"battery": {"calcFactor": "5"}})
battery.calc_factor                 # 5.0

status = StatusRegistry()
status.add("battery", battery)
report = {}
status.write_status_to(report)      # {"battery": {"power": ..., "available": ..., "raw": ...}}
```

`ConfigRegistry.read_config_from` logs a warning for every registered
section missing from the node. `StatusRegistry.add` ignores a name that is
already taken.

## Interpreting configuration values

```python
from onairlight.utils import is_false_value, is_true_value, to_int, parse_bytes

is_false_value("off")            # True: None, "0", "false", "-" and "off" are false
is_true_value("yes", False)      # True: anything not false counts as true
is_true_value("yes", True)       # False: explicit mode accepts only "1", "true", "+", "on"
to_int("42abc")                  # 42: the leading decimal number, 0 if none
parse_bytes("192.168.4.1", ".", 4, 10)   # b'\xc0\xa8\x04\x01'
```

`store_int`, `store_float` and `store_bool` return the converted value if
it is not empty, else the given default, else the current value.
`store_float` keeps only the whole-number part of its input.

## What the package does not do

There is no application object and no command: nothing here runs a main
loop, reports uptime or system status, or ties the components together.
Configuration is only written to and read from dictionaries; the package
does not save or load configuration files, so storing them (for example
with the standard `json` module) is up to you. It does not drive real
pins either — `PinBoard` keeps everything in memory.

## Running the tests

Install the `test` extra and run `pytest`.