from __future__ import annotations

import pytest

from enigma.core import InvalidCharacterError, StateError
from enigma.core.utils import group_text
from enigma.frontend.session import process

SETTINGS = "* B Beta III IV I AXLE (HQ) (EX) (IP) (TR) (BY)"
PLAIN = "FROM HIS SHOULDER HIAWATHA"
CIPHER = "QVPQS OKOIL PUBKJ ZPISF XDW"


def test_encrypts_known_message(default_config):
    m = default_config.build_machine()
    assert list(process(m, [SETTINGS, PLAIN])) == [CIPHER]


def test_decrypts_from_the_same_settings(default_config):
    m = default_config.build_machine()
    assert list(process(m, [SETTINGS + "\n", CIPHER + "\n"])) == ["FROMH ISSHO ULDER HIAWA THA"]


def test_state_carries_across_lines(default_config):
    m = default_config.build_machine()
    split = list(process(m, [SETTINGS, "FROM HIS", "SHOULDER HIAWATHA"]))
    assert "".join(split).replace(" ", "") == CIPHER.replace(" ", "")


def test_settings_line_resets_state(default_config):
    m = default_config.build_machine()
    out = list(process(m, [SETTINGS, PLAIN, SETTINGS, PLAIN]))
    assert out == [CIPHER, CIPHER]


def test_blank_lines_are_kept(default_config):
    m = default_config.build_machine()
    out = list(process(m, [SETTINGS, "", PLAIN, "", "   "]))
    assert out == ["", CIPHER, ""]


def test_ungrouped_output(default_config):
    m = default_config.build_machine()
    out = list(process(m, [SETTINGS, PLAIN], group=0))
    assert out == [CIPHER.replace(" ", "")]


def test_message_before_settings(default_config):
    m = default_config.build_machine()
    with pytest.raises(StateError):
        list(process(m, [PLAIN]))


def test_bad_character_stops_processing(default_config):
    m = default_config.build_machine()
    out = process(m, [SETTINGS, PLAIN, "HELLO!"])
    assert next(out) == CIPHER
    with pytest.raises(InvalidCharacterError):
        next(out)


@pytest.mark.parametrize(
    "msg, expected",
    [("", ""), ("ABC", "ABC"), ("ABCDE", "ABCDE"), ("ABCDEF", "ABCDE F"), ("ABCDEFGHIJK", "ABCDE FGHIJ K")],
)
def test_group_text(msg, expected):
    assert group_text(msg) == expected
