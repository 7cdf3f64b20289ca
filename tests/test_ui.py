"""
Tests for the form widgets

Built offscreen on the session QApplication; nothing is shown.
"""
import dataclasses
import math

import pytest
from PySide6.QtCore import QCoreApplication

from bodycomposition.app.application import APP_ID, ORG_ID, VISIBLE_APP_NAME, create_app
from bodycomposition.app.ui.main_window import MainWindow
from bodycomposition.app.ui.panels import InputPanel, MetricCard
from bodycomposition.app.ui.panels.metric_card import GAUGE_RESOLUTION, TONE_STYLES
from bodycomposition.model.categories import Tone
from bodycomposition.model.readout import read_metric


def _card(store, warning_badge=True):
    return MetricCard(
        store, key="bmi", title="BMI", description="", caption="", warning_badge=warning_badge,
    )


class TestCreateApp:

    def test_reuses_running_instance(self, qapp):
        assert create_app() is qapp

    def test_identity(self, qapp):
        app = create_app()
        assert QCoreApplication.organizationName() == ORG_ID
        assert QCoreApplication.applicationName() == APP_ID
        assert app.applicationDisplayName() == VISIBLE_APP_NAME


class TestMetricCard:

    def test_initial_readout(self, store):
        card = _card(store)
        assert card.value_label.text() == "24.5"
        assert card.badge.text() == "normal"
        assert card.hint_label.text() == "18.5–24.9"

    def test_warning_badge(self, store):
        """Overweight gets the amber warning style"""
        store.set_weight(85.0)
        card = _card(store)
        assert card.badge.text() == "overweight"
        assert TONE_STYLES[Tone.WARNING] in card.badge.styleSheet()

    def test_warning_badge_fallback(self, store):
        """Without a warning look the badge is drawn as secondary"""
        store.set_weight(85.0)
        card = _card(store, warning_badge=False)
        assert TONE_STYLES[Tone.SECONDARY] in card.badge.styleSheet()
        assert TONE_STYLES[Tone.WARNING] not in card.badge.styleSheet()

    def test_destructive_badge_unchanged_by_fallback(self, store):
        store.set_weight(100.0)
        card = _card(store, warning_badge=False)
        assert TONE_STYLES[Tone.DESTRUCTIVE] in card.badge.styleSheet()

    def test_gauge_value(self, store):
        card = _card(store)
        assert card.gauge.value() == round(store.evaluation.bmi.gauge * GAUGE_RESOLUTION)

    def test_follows_store(self, store):
        card = _card(store)
        store.set_weight(100.0)
        assert card.value_label.text() == "32.7"
        assert card.badge.text() == "obese"
        assert card.gauge.value() == round(store.evaluation.bmi.gauge * GAUGE_RESOLUTION)

    def test_undefined_value_resets_gauge(self, store):
        card = _card(store)
        undefined = dataclasses.replace(store.evaluation, bmi=read_metric("bmi", math.nan))
        card.refresh(undefined)
        assert card.value_label.text() == "–"
        assert card.badge.text() == "–"
        assert card.hint_label.text() == ""
        # QProgressBar.reset() parks the value one below the minimum
        assert card.gauge.value() == card.gauge.minimum() - 1


class TestFieldRow:

    @pytest.mark.parametrize("value, ticks", [
        (175.3, 1753),
        (140.0, 1400),
        (220.0, 2200),
        (40.1, 401),
    ])
    def test_ticks_round_trip(self, store, value, ticks):
        panel = InputPanel(store)
        row = panel.rows["height_cm"]
        assert row.ticks_per_unit == 10
        assert row.to_ticks(value) == ticks
        assert row.from_ticks(ticks) == pytest.approx(value)

    def test_slider_range_matches_domain(self, store):
        panel = InputPanel(store)
        slider = panel.rows["waist_cm"].slider
        assert (slider.minimum(), slider.maximum()) == (500, 1500)


class TestInputPanel:

    def test_initial_values(self, store):
        panel = InputPanel(store)
        assert panel.rows["weight_kg"].entry.text() == "75"
        assert panel.rows["height_cm"].slider.value() == 1750
        assert panel.rows["waist_cm"].entry.text() == "85"

    def test_slider_updates_store(self, store):
        panel = InputPanel(store)
        panel.rows["height_cm"].slider.setValue(1801)
        assert store.inputs.height_cm == pytest.approx(180.1)
        assert panel.rows["height_cm"].entry.text() == "180.1"

    def test_store_updates_slider(self, store):
        panel = InputPanel(store)
        store.set_waist(92.5)
        assert panel.rows["waist_cm"].slider.value() == 925
        assert panel.rows["waist_cm"].entry.text() == "92.5"

    @pytest.mark.parametrize("text, shown, stored", [
        ("300", "220", 220.0),
        ("", "140", 140.0),
        ("abc", "140", 140.0),
        ("180,5", "180.5", 180.5),
    ])
    def test_entry_shows_clamped_value(self, store, text, shown, stored):
        panel = InputPanel(store)
        row = panel.rows["height_cm"]
        row.entry.setText(text)
        panel._on_entry_finished(row)
        assert store.inputs.height_cm == stored
        assert row.entry.text() == shown

    def test_entry_unchanged_value_still_reformatted(self, store):
        """The store emits nothing for an identical value, but the entry is normalized anyway"""
        panel = InputPanel(store)
        row = panel.rows["weight_kg"]
        row.entry.setText("75.0")
        panel._on_entry_finished(row)
        assert row.entry.text() == "75"


class TestMainWindow:

    def test_builds_with_store(self, store):
        window = MainWindow(store)
        assert window.store is store
        assert window.bmi_card.key == "bmi"
        assert window.bri_card.key == "bri"

    def test_status_bar_follows_evaluation(self, store):
        window = MainWindow(store)
        store.set_weight(100.0)
        message = window.statusBar().currentMessage()
        assert "BMI 32.7" in message
        assert "BRI 3.09" in message
