# barstatus

A small status monitor for window-manager status bars. It gathers system
information and puts it together into a single status line every 500 ms.
Most components read Linux interfaces such as `/proc`, `/sys` and nl80211
netlink.

## Installation

```
pip install .
```

## Usage

Print the status line to standard output every 500 ms:

```
barstatus -s
```

Print the status line once and exit:

```
barstatus -1
```

Print `barstatus-1.1` to standard error and exit with status 1:

```
barstatus -v
```

Without `-s` or `-1`, the line is set as the root window name by running
`xsetroot -name`. This needs `DISPLAY` to be set and `xsetroot` to be on the
`PATH`. When the loop ends, the name is cleared. `SIGINT` and `SIGTERM` end the
loop. `SIGUSR1` cuts the current wait short and triggers an immediate update.

The command always shows the same line, defined in `barstatus.cli.DEFAULT_ITEMS`:

- CPU usage icon and percent
- temperature icon and degrees from `/sys/class/thermal/thermal_zone8/temp`
- RAM usage icon and used memory
- Wi-Fi icon and the first three characters of the ESSID of `wlan0`
- battery icon and percent of `BAT0`
- the date and time

A value that cannot be read is shown as `n/a`.

## Components

Each component is a function that takes one argument and returns a string, or
`None` when no value can be read. The argument is a path, an interface name, a
format string or an unused value.

| Module | Functions |
| --- | --- |
| `barstatus.components.system` | `cat`, `datetime`, `hostname`, `kernel_release`, `load_avg`, `uptime`, `gid`, `uid`, `username`, `entropy`, `run_command` |
| `barstatus.components.disk` | `disk_free`, `disk_perc`, `disk_total`, `disk_used`, `num_files` |
| `barstatus.components.battery` | `battery_perc`, `battery_perc_di`, `battery_state`, `battery_remaining` |
| `barstatus.components.cpu` | `cpu_freq`, `cpu_perc`, `cpu_perc_di` |
| `barstatus.components.memory` | `ram_free`, `ram_perc`, `ram_perc_di`, `ram_total`, `ram_used`, `swap_free`, `swap_perc`, `swap_total`, `swap_used` |
| `barstatus.components.temperature` | `temp`, `temp_di` |
| `barstatus.components.network` | `ipv4`, `ipv6`, `up`, `netspeed_rx`, `netspeed_tx` |
| `barstatus.components.volume` | `vol_perc` (OSS mixer device, e.g. `/dev/mixer`) |
| `barstatus.components.wifi` | `wifi_perc`, `wifi_perc_di`, `wifi_essid` |

Some components work from the previous sample, so their first call returns
`None`. These are `cpu_perc` and `cpu_perc_di`, and the network speed functions
`netspeed_rx` and `netspeed_tx`.

Functions ending in `_di` return a dynamic icon chosen by the current level,
wrapped in status2d colour codes. The icon tables and the `DynamicIcon` class
are in `barstatus.icons`. `pick_icon(icons, value)` renders the first icon
whose level is at least `value`.

## Building a status line yourself

```python
from barstatus.cli import StatusItem, render_status
from barstatus.components.system import datetime, load_avg

items = [
    StatusItem(load_avg, " %s |", None),
    StatusItem(datetime, " %s", "%F %T"),
]
print(render_status(items, "n/a", 2048))
```

Each item's `fmt` is a printf-style format applied to the component's value.
`render_status` limits the line to `maxlen - 1` bytes.

Sizes are shown in human-readable form with binary prefixes, for example
`1.5Gi`. They are produced by `barstatus.util.fmt_human(num, base)`, which
takes a base of 1000 or 1024 and raises `ValueError` for any other base.

## What it does not do

- There is no configuration file. The items, the interval and the unknown text
  of the command are fixed in `barstatus.cli`.
- There are no keyboard indicator or keymap components.
- Battery, CPU, memory, temperature and Wi-Fi values are read only through Linux
  interfaces. No BSD backends exist, apart from `entropy`, which returns `∞` there.