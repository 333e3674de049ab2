# chronolog

Small, dependency-free building blocks for a logging pipeline.

## Installation

```
pip install chronolog
```

For running the test suite:

```
pip install "chronolog[test]"
pytest
```

## What is inside

### `chronolog.timefmt`: timestamps with sub-second fractions

Timestamps are integer nanoseconds since the Unix epoch, as `time.time_ns()`
returns them. Formatting uses `strftime` in local time and adds directives for
fractional seconds:

| Directive | Meaning                         | Example     |
|-----------|---------------------------------|-------------|
| `%f3`     | milliseconds, 3 digits          | `001`       |
| `%f6`     | microseconds, 6 digits          | `000001`    |
| `%f9`     | nanoseconds, 9 digits           | `000000001` |
| `%f`      | nanoseconds, 9 digits (default) | `000000001` |

```python
import time
from chronolog.timefmt import DEFAULT_TIME_FORMAT, localtime_formatted

print(localtime_formatted(time.time_ns(), DEFAULT_TIME_FORMAT))
# e.g. 2024/05/01 12:34:56 123456
```

`DEFAULT_TIME_FORMAT` is `"%Y/%m/%d %H:%M:%S %f6"`.

The module also provides:

- `Fractional`: the precision of a `%f` directive.
- `get_fractional(format_buffer, pos)`: the precision of the `%f` at `pos`.
- `fraction_to_string(ts, fractional)`: the zero-padded sub-second digits.
- `localtime_formatted_fractions(ts, format_buffer)`: replaces only the `%f`
  directives and leaves everything else unchanged.
- `put_time(tm, time_format)`: `strftime` that returns the format string itself
  when it cannot format the time or when the result is empty.
- `localtime(ts)`: the local `struct_time` for a timestamp in seconds.
- `to_system_time(ts)`: converts a `time.perf_counter_ns()` reading to epoch
  nanoseconds. It uses the values of both clocks that were read when the module
  was imported.

### `chronolog.shared_queue`: a thread-safe FIFO

`SharedQueue` accepts items from any number of producers and hands them to any
number of consumers, oldest first.

- `push(item)` adds an item and wakes one waiting consumer.
- `try_and_pop()` returns at once. It raises `queue.Empty` when nothing is queued.
- `wait_and_pop()` blocks until an item is available.
- `empty()` and `len()` report the current contents.

```python
from chronolog.shared_queue import SharedQueue

messages = SharedQueue()
messages.push("hello")
item = messages.wait_and_pop()
```

### `chronolog.stacktrace`: exception codes and stack dumps

- `exception_id_to_text(code)` gives the symbolic name of a Windows
  structured-exception code, for example `0xC0000005` gives
  `EXCEPTION_ACCESS_VIOLATION`. An unknown code comes back as
  `UNKNOWN EXCEPTION:<code>`.
- `is_known_exception(code)` tells whether the code is in that table.
- `stackdump(frame=None)` renders up to 64 frames, innermost first. Each frame
  becomes one line of the form `stack dump [n]\t\t<file> L: <line> <function>`.
  When no frame is given, the dump starts at the caller. If two dumps are
  already running in the same thread, a third request returns a
  "Recursive crash detected" notice and no dump.

### `chronolog.performance`: measuring logging latency

Measurements are latencies in whole microseconds.

- `write_text_to_file(filename, msg, write_mode, push_out=True)` appends to the
  file or truncates it first, as `WriteMode.APPEND` or `WriteMode.TRUNCATE`
  says. With `push_out`, it echoes the message to standard output first. It
  raises `OSError` when the file cannot be opened.
- `mean(values)` gives the integer mean, rounded down. It raises `ValueError`
  for an empty sequence.
- `bucket_measurements(measurements)` returns two dicts ordered by key:
  - counts per whole millisecond;
  - for values under one millisecond, counts per exact microsecond value.
- `format_bucket_report(measurements, dump_path)` returns the report text with
  one `ms\t, count` line per millisecond bucket. When every measurement falls
  into a single millisecond bucket, it first lists the sub-millisecond values
  per microsecond.

## What this package does not do

chronolog contains no logger object, no sinks and no background writer thread,
so nothing here sends log messages anywhere. It installs no crash or signal
handlers. It has no command-line tool: the performance helpers summarise
measurements you collect yourself, and do not run a benchmark.