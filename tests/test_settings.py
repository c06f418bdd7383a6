#!/usr/bin/env python
# -*- coding:utf-8 -*-
#
# Created: 10/2026
# Author: qltrap developers

import pytest

from qltrap.exceptions import ConfigurationError
from qltrap.settings import Settings, load_settings, default_settings
from qltrap.sweep import SweepSpace


def test_defaults():
    s = Settings()
    assert s.to_dict() == default_settings
    assert s.total_runs == 1
    assert s.models['trap'] == 'QLT_2mmFillet_0.2mmGap_6mmZinj.pa0'


def test_overrides(settings: Settings):
    assert settings.total_runs == 12
    assert SweepSpace.from_settings(settings).shape == (2, 3, 2)
    settings.lens_step = 2
    assert settings.lens_step == 2


def test_defaults_not_shared():
    s = Settings()
    s.b_mT[2] = 5
    assert default_settings['b_mT'] == [0, 0, 0]


def test_models_are_merged():
    s = Settings(models={'trap': 'other.pa0'})
    assert s.models['trap'] == 'other.pa0'
    assert s.models['esa'] == 'bigesa2_edit.pa0'


@pytest.mark.parametrize('kwargs', [
    dict(n_float=0),
    dict(n_lens=2.0),
    dict(b_mT=[0, 1]),
    dict(max_time=0),
    dict(vfloat=-100),
])
def test_invalid(kwargs):
    with pytest.raises(ConfigurationError):
        Settings(**kwargs)


def test_rejected_update_keeps_settings():
    s = Settings()
    with pytest.raises(ConfigurationError):
        s.n_float = 0
    assert s.n_float == 1
    assert s.total_runs == 1
    with pytest.raises(ConfigurationError):
        s.update(n_lens=3, geometry=[6e-3, 15e-3])
    assert s.n_lens == 1
    assert s.geometry == [6e-3, 15e-3, 22e-3]


def test_unknown_attribute():
    with pytest.raises(AttributeError):
        Settings().nope


def test_load_settings(tmp_path):
    path = tmp_path / 'sweep.yaml'
    path.write_text("n_float: 3\nfloat_step: -5\nexcite: true\nb_mT: [0, 0, 2.5]\n")
    s = load_settings(path)
    assert s.n_float == 3
    assert s.float_step == -5
    assert s.excite is True
    assert s.b_mT == [0, 0, 2.5]


def test_load_settings_empty(tmp_path):
    path = tmp_path / 'empty.yaml'
    path.write_text("")
    assert load_settings(path).to_dict() == default_settings


def test_load_settings_not_a_mapping(tmp_path):
    path = tmp_path / 'list.yaml'
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ConfigurationError):
        load_settings(path)
