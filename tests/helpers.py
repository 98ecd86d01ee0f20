from datetime import datetime, timedelta


class StepClock:
    """Deterministic clock: each call is one minute after the previous one."""

    def __init__(self, start=datetime(2026, 1, 1, 9, 0)):
        self.current = start

    def __call__(self):
        value = self.current
        self.current += timedelta(minutes=1)
        return value
