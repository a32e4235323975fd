# rialtotimer

Small, cancellable timers that run a callback on a background thread after a
timeout, either once or repeatedly.

## Installation

```
pip install rialtotimer
```

## Usage

Everything lives in `rialtotimer.timer`:

- `TimerType`: `ONE_SHOT` or `PERIODIC`.
- `Timer(timeout, callback, timer_type=TimerType.ONE_SHOT)`: starts a timer
  at once. `timeout` is a number of seconds or a `datetime.timedelta`.
- `TimerFactory().create_timer(timeout, callback, timer_type=TimerType.ONE_SHOT)`:
  makes a `Timer` with the same arguments.
- `get_factory()`: returns a shared `TimerFactory`.

```python
from datetime import timedelta

from rialtotimer.timer import Timer, TimerType, get_factory

# One-shot timer: fires once after 500 ms.
timer = Timer(timedelta(milliseconds=500), lambda: print("fired"))

# Periodic timer: fires every 0.1 s until cancelled.
ticker = Timer(0.1, lambda: print("tick"), TimerType.PERIODIC)
ticker.cancel()
print(ticker.is_active())  # False

# A timer used as a context manager is cancelled when the block ends.
with Timer(timedelta(seconds=1), lambda: print("never")):
    pass

# Timers can also be made through the shared factory.
factory = get_factory()
timer = factory.create_timer(timedelta(milliseconds=250), lambda: print("done"))
```

### Behaviour

- A timer starts counting as soon as it is created; its thread is a daemon
  thread.
- `is_active()` is true until a one-shot timer has fired or any timer has been
  cancelled.
- A periodic timer waits a full `timeout` between callbacks and stops once it
  is cancelled.
- `cancel()` stops the timer and waits for its thread to finish. Called from
  inside the callback it does not wait, so it is safe there; it is also safe to
  call more than once.
- A callback of `None` is allowed; the timer then only tracks time.
- `get_factory()` returns the same `TimerFactory` while any reference to it is
  alive, and a new one after that.

This is a library only: it has no command-line program.

## Running the tests

```
pip install "rialtotimer[test]"
pytest
```