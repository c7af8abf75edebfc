from __future__ import annotations

import pytest

from enigma.core import RotorBindingError, SettingError
from enigma.frontend.settings import Settings, apply_settings, configure, parse_settings


def test_parse_full_line():
    s = parse_settings("* B Beta III IV I AXLE BBBB (HQ) (EX) (IP)", 5)
    assert s == Settings(
        rotors=("B", "Beta", "III", "IV", "I"),
        setting="AXLE",
        ring="BBBB",
        plugboard="(HQ) (EX) (IP)",
    )


def test_parse_without_ring():
    s = parse_settings("* B Beta III IV I AXLE (HQ) (EX)", 5)
    assert s.ring is None
    assert s.plugboard == "(HQ) (EX)"


def test_parse_minimal_line():
    s = parse_settings("*  B Beta III IV I   AXLE  ", 5)
    assert s.setting == "AXLE"
    assert s.ring is None
    assert s.plugboard == ""


@pytest.mark.parametrize(
    "line, error",
    [
        ("B Beta III IV I AXLE", SettingError),
        ("", SettingError),
        ("* B Beta III", RotorBindingError),
        ("* B Beta III IV I", SettingError),
        ("* B Beta III III I AXLE", RotorBindingError),
    ],
)
def test_parse_errors(line, error):
    with pytest.raises(error):
        parse_settings(line, 5)


def test_configure_binds_everything(default_config):
    m = default_config.build_machine()
    configure(m, "* B Beta III IV I AXLE BCDE (HQ) (EX)")
    assert [m.get_rotor(i).name for i in range(5)] == ["B", "Beta", "III", "IV", "I"]
    assert m.settings() == "AXLE"
    assert [m.get_rotor(i).ring() for i in range(1, 5)] == [1, 2, 3, 4]
    assert m.plugboard().cycles == ("HQ", "EX")


def test_settings_line_without_ring_keeps_old_rings(default_config):
    m = default_config.build_machine()
    configure(m, "* B Beta III IV I AXLE BCDE")
    configure(m, "* B Beta III IV I AXLE")
    assert [m.get_rotor(i).ring() for i in range(1, 5)] == [1, 2, 3, 4]


def test_first_rotor_must_reflect(default_config):
    m = default_config.build_machine()
    with pytest.raises(RotorBindingError):
        configure(m, "* Beta B III IV I AXLE")


def test_unknown_rotor(default_config):
    m = default_config.build_machine()
    with pytest.raises(RotorBindingError):
        configure(m, "* B Beta III IV IX AXLE")


def test_bad_setting_string(default_config):
    m = default_config.build_machine()
    with pytest.raises(SettingError):
        configure(m, "* B Beta III IV I AXL")


def test_apply_parsed_settings(default_config):
    m = default_config.build_machine()
    apply_settings(m, parse_settings("* C Gamma V VI VII ZZZZ", 5))
    assert m.settings() == "ZZZZ"
    assert m.get_rotor(0).name == "C"
