#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""干支、四柱、出生信息模型单元测试"""

from itertools import product

import pytest
from pydantic import ValidationError

from saju_core.data.stems_branches import Branch, Element, Polarity, Stem
from saju_core.exceptions import InvalidSexagenaryPairError
from saju_core.models.ganzhi import BirthInput, CalendarType, FourPillars, Gender, PillarPosition, SexagenaryPair


class TestStemBranch:
    def test_stem_attributes(self):
        assert Stem.REN.hanja == '壬'
        assert Stem.REN.hangul == '임'
        assert Stem.REN.element == Element.WATER
        assert Stem.REN.polarity == Polarity.YANG
        assert Stem.GUI.polarity == Polarity.YIN

    def test_branch_attributes(self):
        assert Branch.CHEN.hanja == '辰'
        assert Branch.CHEN.hangul == '진'
        assert Branch.CHEN.element == Element.EARTH
        assert Branch.HAI.element == Element.WATER

    def test_from_hanja(self):
        assert Stem.from_hanja('庚') == Stem.GENG
        assert Branch.from_hanja('酉') == Branch.YOU

    def test_from_hanja_unknown(self):
        with pytest.raises(ValueError):
            Stem.from_hanja('子')


class TestSexagenaryPair:
    def test_only_sixty_valid_pairs(self):
        valid = 0
        for stem, branch in product(range(10), range(12)):
            try:
                SexagenaryPair(stem, branch)
                valid += 1
            except InvalidSexagenaryPairError:
                pass
        assert valid == 60

    def test_polarity_mismatch_rejected(self):
        with pytest.raises(InvalidSexagenaryPairError):
            SexagenaryPair(Stem.JIA, Branch.CHOU)

    def test_out_of_range_rejected(self):
        with pytest.raises(InvalidSexagenaryPairError):
            SexagenaryPair(10, 0)

    @pytest.mark.parametrize("index", range(60))
    def test_index_roundtrip(self, index):
        assert SexagenaryPair.from_index(index).index == index

    @pytest.mark.parametrize("text,index", [('甲子', 0), ('壬辰', 28), ('戊戌', 34), ('庚子', 36), ('癸亥', 59)])
    def test_from_text(self, text, index):
        pair = SexagenaryPair.from_text(text)
        assert pair.index == index
        assert pair.text == text
        assert str(pair) == text

    @pytest.mark.parametrize("text", ['甲', '甲丑', '子甲', '', '甲子子'])
    def test_from_text_invalid(self, text):
        with pytest.raises(InvalidSexagenaryPairError):
            SexagenaryPair.from_text(text)

    def test_shift_wraps(self):
        assert SexagenaryPair.from_text('癸亥').shift(1).text == '甲子'
        assert SexagenaryPair.from_text('甲子').shift(-1).text == '癸亥'
        assert SexagenaryPair.from_text('壬寅').shift(12).text == '甲寅'

    def test_immutable(self):
        pair = SexagenaryPair.from_text('甲子')
        with pytest.raises(Exception):
            pair.stem = Stem.YI


class TestFourPillars:
    def test_from_texts(self):
        pillars = FourPillars.from_texts(
            {'year': '壬申', 'month': '壬寅', 'day': '壬子', 'hour': '庚子'}, birth_year=1992,
        )
        assert pillars.day_master == Stem.REN
        assert pillars.stems == (Stem.REN, Stem.REN, Stem.REN, Stem.GENG)
        assert pillars.branches == (Branch.SHEN, Branch.YIN, Branch.ZI, Branch.ZI)
        assert pillars.pillar(PillarPosition.HOUR).text == '庚子'
        assert pillars.gender == Gender.MALE

    def test_to_texts_roundtrip(self):
        texts = {'year': '甲辰', 'month': '丙寅', 'day': '戊午', 'hour': '庚申'}
        assert FourPillars.from_texts(texts, birth_year=2024).to_texts() == texts

    def test_pillar_labels(self):
        assert PillarPosition.YEAR.label == '年柱'
        assert PillarPosition.HOUR.label == '时柱'


class TestBirthInput:
    def test_defaults(self):
        birth = BirthInput(year=1990, month=1, day=15)
        assert birth.calendar_type == CalendarType.SOLAR
        assert birth.gender == Gender.MALE
        assert birth.time_known is False

    def test_time_known(self):
        assert BirthInput(year=1990, month=1, day=15, hour=0).time_known is True

    def test_solar_clears_leap_flag(self):
        birth = BirthInput(year=1990, month=5, day=1, is_leap_month=True)
        assert birth.is_leap_month is False

    def test_lunar_keeps_leap_flag(self):
        birth = BirthInput(year=2020, month=4, day=1, calendar_type='lunar', is_leap_month=True)
        assert birth.is_leap_month is True

    @pytest.mark.parametrize("field,value", [('month', 13), ('month', 0), ('day', 32), ('hour', 24), ('minute', 60)])
    def test_out_of_range_rejected(self, field, value):
        data = {'year': 1990, 'month': 1, 'day': 1, field: value}
        with pytest.raises(ValidationError):
            BirthInput(**data)
