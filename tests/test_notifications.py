"""Tests for readiness gating, warning delivery and message formatting."""

from fontfinder.config import assets_prefix_from_env
from fontfinder.i18n import DEFAULT_CATALOG, MessageCatalog
from fontfinder.notifications import ReadinessGate, WarningNotifier


def test_gate_runs_callback_immediately_when_ready() -> None:
    """Verify a ready gate does not defer callbacks."""
    calls: list[str] = []
    gate = ReadinessGate(ready=True)

    gate.do_once_ready(lambda: calls.append("now"))

    assert calls == ["now"]


def test_gate_delivers_queued_callbacks_once_in_order() -> None:
    """Verify queued callbacks run once, in order, after readiness."""
    calls: list[int] = []
    gate = ReadinessGate()

    gate.do_once_ready(lambda: calls.append(1))
    gate.do_once_ready(lambda: calls.append(2))
    assert calls == []

    gate.signal_ready()
    gate.signal_ready()
    gate.do_once_ready(lambda: calls.append(3))

    assert calls == [1, 2, 3]


def test_notifier_keeps_message_built_at_queue_time() -> None:
    """Verify a deferred warning carries the text formatted when it was queued."""
    delivered: list[str] = []
    gate = ReadinessGate()
    notifier = WarningNotifier(gate, sink=delivered.append, module_id="fonts")
    error = ["first"]

    queued = notifier.invalid_directory(error)
    error.append("second")
    gate.signal_ready()

    assert delivered == [queued]
    assert delivered[0] == "fonts | Invalid font directory: ['first']"


def test_notifier_uses_injected_localization() -> None:
    """Verify messages come from the injected localize function."""
    delivered: list[str] = []
    catalog = MessageCatalog(
        {
            "notifications.invalidDirectory": "Bad folder ({error})",
            "notifications.invalidFilePickerTarget": "wrong target",
        }
    )
    notifier = WarningNotifier(
        ReadinessGate(ready=True),
        sink=delivered.append,
        localize=catalog.format,
    )

    notifier.invalid_target()

    assert delivered == ["font-finder | Bad folder (wrong target)"]


def test_catalog_returns_key_for_unknown_messages() -> None:
    """Verify lookups fall back to the key and keep unmatched placeholders."""
    catalog = MessageCatalog({"greeting": "Hello {name} from {place}"})

    assert catalog.format("missing.key") == "missing.key"
    assert catalog.format("greeting", {"name": "Ada"}) == "Hello Ada from {place}"
    assert "{error}" not in DEFAULT_CATALOG.format(
        "notifications.invalidDirectory", {"error": "boom"}
    )


def test_assets_prefix_from_env_checks_both_names() -> None:
    """Verify the first configured environment name wins."""
    assert assets_prefix_from_env({}) == ""
    assert (
        assets_prefix_from_env({"FORGEVTT_ASSETS_LIBRARY_URL_PREFIX": "https://b/"})
        == "https://b/"
    )
    assert (
        assets_prefix_from_env(
            {
                "FONTFINDER_ASSETS_PREFIX": "https://a/",
                "FORGEVTT_ASSETS_LIBRARY_URL_PREFIX": "https://b/",
            }
        )
        == "https://a/"
    )
