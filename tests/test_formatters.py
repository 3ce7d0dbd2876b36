from utils.formatters import format_alert, format_number, format_period
from utils.nws_models import AlertRecord, ForecastPeriod


def test_format_alert_all_fields():
    record = AlertRecord(
        event="Flood Warning",
        area_desc="Kings County",
        severity="Severe",
        status="Actual",
        headline="Flood Warning issued October 16",
    )
    assert format_alert(record) == (
        "Event: Flood Warning\n"
        "Area: Kings County\n"
        "Severity: Severe\n"
        "Status: Actual\n"
        "Headline: Flood Warning issued October 16\n"
        "---"
    )


def test_format_alert_missing_fields_use_defaults():
    assert format_alert(AlertRecord()) == (
        "Event: Unknown\n"
        "Area: Unknown\n"
        "Severity: Unknown\n"
        "Status: Unknown\n"
        "Headline: No headline\n"
        "---"
    )


def test_format_alert_empty_string_uses_default():
    text = format_alert(AlertRecord(event="", headline=""))
    assert "Event: Unknown" in text
    assert "Headline: No headline" in text


def test_format_alert_partial_record():
    lines = format_alert(AlertRecord(severity="Minor")).split("\n")
    assert len(lines) == 6
    assert lines[0] == "Event: Unknown"
    assert lines[2] == "Severity: Minor"


def test_format_period_all_fields():
    period = ForecastPeriod(
        name="Tonight",
        temperature=54,
        temperature_unit="F",
        wind_speed="5 to 10 mph",
        wind_direction="NW",
        short_forecast="Mostly Clear",
    )
    assert format_period(period) == (
        "Tonight:\nTemperature: 54°F\nWind: 5 to 10 mph NW\nMostly Clear\n---"
    )


def test_format_period_missing_fields_use_defaults():
    assert format_period(ForecastPeriod()) == (
        "Unknown:\nTemperature: Unknown°F\nWind: Unknown \nNo forecast available\n---"
    )


def test_format_period_zero_temperature_uses_default():
    text = format_period(ForecastPeriod(temperature=0, temperature_unit="C"))
    assert "Temperature: Unknown°C" in text
    assert "Temperature: Unknown°F" in format_period(ForecastPeriod(temperature=0.0))


def test_format_period_whole_float_temperature():
    assert "Temperature: 72°F" in format_period(ForecastPeriod(temperature=72.0))
    assert "Temperature: 72.5°F" in format_period(ForecastPeriod(temperature=72.5))


def test_formatting_is_repeatable():
    record = AlertRecord(event="Heat Advisory", area_desc="Maricopa")
    period = ForecastPeriod(name="Today", temperature=101)
    assert format_alert(record) == format_alert(record)
    assert format_period(period) == format_period(period)


def test_format_number():
    assert format_number(40.0) == "40"
    assert format_number(-74.006) == "-74.006"
    assert format_number(12) == "12"


def test_format_number_small_values_stay_positional():
    assert format_number(0.00005) == "0.00005"
    assert format_number(-0.00001) == "-0.00001"
    assert format_number(1.5e-7) == "0.00000015"
