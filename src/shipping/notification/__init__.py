"""Cargo notification adapter abstraction: where misdirection and arrival go."""

import os

_notifier_instance = None


def get_notifier():
    """Return the configured cargo notifier (singleton).

    Uses RecordingNotifier by default. Select another adapter with the
    CARGO_NOTIFIER environment variable.
    """
    global _notifier_instance
    if _notifier_instance is None:
        adapter = os.environ.get("CARGO_NOTIFIER", "fake")
        if adapter == "fake":
            from shipping.notification.fake_adapter import RecordingNotifier

            _notifier_instance = RecordingNotifier()
        elif adapter == "log":
            from shipping.notification.log_adapter import LoggingNotifier

            _notifier_instance = LoggingNotifier()
        else:
            raise ValueError(f"Unknown cargo notifier: {adapter}")
    return _notifier_instance


def reset_notifier():
    """Reset the notifier singleton (useful for testing)."""
    global _notifier_instance
    _notifier_instance = None
